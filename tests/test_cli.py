from __future__ import annotations

from pathlib import Path

import pytest

from create_godotrs.cli import build_parser, main


def test_parser_defaults_to_basic_template():
    args = build_parser().parse_args(["demo"])
    assert args.name == "demo"
    assert args.template == "basic"
    assert args.directory is None
    assert args.verbose is False


def test_parser_rejects_unknown_template(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["demo", "--template", "fancy"])
    assert excinfo.value.code == 2


def test_cli_creates_project(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["my-game", "--directory", str(tmp_path)])

    assert exit_code == 0
    project_path = tmp_path / "my-game"
    assert (project_path / "engine-project" / "project.godot").exists()
    out = capsys.readouterr().out
    assert "Successfully created project: my-game" in out
    assert f"Project location: {project_path}" in out


def test_cli_proto_template(tmp_path: Path):
    exit_code = main(["proto-game", "--template", "proto", "-d", str(tmp_path)])

    assert exit_code == 0
    assert (tmp_path / "proto-game" / "engine-project" / "addons" / "AsepriteWizard").is_dir()


def test_cli_defaults_to_current_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)

    assert main(["here"]) == 0
    assert (tmp_path / "here" / "native" / "Cargo.toml").exists()


def test_cli_reports_existing_project(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "taken").mkdir()

    exit_code = main(["taken", "-d", str(tmp_path)])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "Error creating project: Project directory already exists" in err
    assert str(tmp_path / "taken") in err


def test_cli_reports_invalid_name(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["nested/name", "-d", str(tmp_path)])

    assert exit_code == 1
    assert "single path segment" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []
