import pytest

from macsetup.cli import COMMANDS, main


def test_show_prints_normalized_yaml(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("dotfiles: [.vimrc]\nbrew:\n  taps: [hashicorp/tap]\n")

    main(["show", "--config", str(path)])

    assert capsys.readouterr().out == (
        "brew:\n"
        "  taps:\n"
        "  - hashicorp/tap\n"
        "  formulae: {}\n"
        "  casks: {}\n"
        "dotfiles:\n"
        "- .vimrc\n"
    )


def test_missing_config_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["show", "--config", str(tmp_path / "missing.yaml")])

    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("Error: cannot read")


def test_dotfiles_command_uses_working_dir_and_home(tmp_path, monkeypatch):
    repo = tmp_path / "repo"
    home = tmp_path / "home"
    (repo / "dotfiles").mkdir(parents=True)
    home.mkdir()
    (repo / "config.yaml").write_text("dotfiles:\n  - .vimrc\n")
    (repo / "dotfiles" / ".vimrc").write_text("syntax on\n")
    monkeypatch.chdir(repo)
    monkeypatch.setenv("HOME", str(home))

    main(["dotfiles"])

    assert (home / ".vimrc").read_text() == "syntax on\n"


def test_failed_command_exits_with_status_one(fake_shell, tmp_path, monkeypatch, capsys):
    fake_shell.succeeding.add(("brew", "--version"))
    fake_shell.failing[("brew", "tap", "bad/tap")] = 2
    (tmp_path / "config.yaml").write_text("brew:\n  taps: [bad/tap]\n")
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main(["brew"])

    assert excinfo.value.code == 1
    assert "tap bad/tap" in capsys.readouterr().err


def test_interrupt_exits_with_status_130(tmp_path, monkeypatch, capsys):
    def interrupted(config):
        raise KeyboardInterrupt

    monkeypatch.setitem(COMMANDS, "show", interrupted)

    with pytest.raises(SystemExit) as excinfo:
        main(["show", "--config", str(tmp_path / "config.yaml")])

    assert excinfo.value.code == 130
    assert "Interrupted" in capsys.readouterr().out


def test_unresolvable_home_exits_with_error(tmp_path, monkeypatch, capsys):
    def no_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr("macsetup.config.Path.home", no_home)

    with pytest.raises(SystemExit) as excinfo:
        main(["show", "--config", str(tmp_path / "config.yaml")])

    assert excinfo.value.code == 1
    assert capsys.readouterr().err == "Error: Could not determine home directory.\n"
