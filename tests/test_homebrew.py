from macsetup import homebrew
from macsetup.models import PackageKind


def test_is_present_outside_homebrew_matches_existing_app_output():
    output = (
        "==> Downloading https://github.com/rectangle/Rectangle0.80.dmg\n"
        "Error: It seems there is already an App at '/Applications/Rectangle.app'.\n"
    )

    assert homebrew.is_present_outside_homebrew(output)


def test_is_present_outside_homebrew_matches_already_installed_output():
    output = "Warning: Cask 'firefox' is already installed.\n"

    assert homebrew.is_present_outside_homebrew(output)


def test_is_present_outside_homebrew_rejects_unrelated_failure():
    output = "Error: Download failed on Cask 'slack' with message: 404 Not Found\n"

    assert not homebrew.is_present_outside_homebrew(output)


def test_ensure_homebrew_skips_installer_when_brew_runs(fake_shell, config):
    fake_shell.succeeding.add(("brew", "--version"))

    assert homebrew.ensure_homebrew(config) is True
    assert fake_shell.calls == [("brew", "--version")]


def test_ensure_homebrew_runs_installer_when_brew_missing(fake_shell, config):
    assert homebrew.ensure_homebrew(config) is True
    assert fake_shell.calls == [("brew", "--version"), tuple(homebrew.INSTALL_COMMAND)]


def test_ensure_homebrew_reports_installer_failure(fake_shell, config, capsys):
    fake_shell.failing[tuple(homebrew.INSTALL_COMMAND)] = 1

    assert homebrew.ensure_homebrew(config) is False
    assert "Homebrew installation failed" in capsys.readouterr().err


def test_ensure_homebrew_does_not_run_installer_in_dry_run(fake_shell, config):
    config.dryrun = True

    assert homebrew.ensure_homebrew(config) is True
    assert fake_shell.calls == [("brew", "--version")]


def test_is_installed_queries_brew_list_with_kind_flag(fake_shell):
    fake_shell.succeeding.add(("brew", "list", "--cask", "firefox"))

    assert homebrew.is_installed(PackageKind.CASK, "firefox")
    assert not homebrew.is_installed(PackageKind.FORMULA, "firefox")
    assert fake_shell.calls == [
        ("brew", "list", "--cask", "firefox"),
        ("brew", "list", "--formula", "firefox"),
    ]
