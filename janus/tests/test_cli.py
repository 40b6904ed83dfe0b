"""Tests for the janus command-line entry point."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from janus import __version__
from janus.cli.main import main, prompt_project_name


@pytest.fixture
def cli_env(
    tmp_path: Path, templates_root: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("JANUS_HOME", str(templates_root.parent))
    monkeypatch.delenv("JANUS_TEMPLATES", raising=False)
    monkeypatch.delenv("JANUS_TRACING", raising=False)
    return workdir


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == f"Janus v{__version__}"


def test_help_mentions_templates_path(
    cli_env: Path, templates_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["-h"])

    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "janus -o templates" in out
    assert str(templates_root) in out


def test_no_arguments_prints_help(
    cli_env: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main([]) == 0
    assert "Cross-domain Project Scaffolder" in capsys.readouterr().out


def test_list_templates(cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-o", "templates"]) == 0

    out = capsys.readouterr().out
    assert "Available offline templates" in out
    assert "  • python" in out
    assert "- flask" in out


def test_list_without_templates_root(
    cli_env: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "nowhere"

    assert main(["-o", "templates", "--templates-root", str(missing)]) == 0

    out = capsys.readouterr().out
    assert f"No templates directory found at: {missing}" in out
    assert not missing.exists()


def test_unknown_offline_target(
    cli_env: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["-o", "recipes"]) == 2
    assert "Usage: janus -o templates" in capsys.readouterr().err


def test_scaffold_with_name_flag(
    cli_env: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main(["python", "flask", "--name", "My App", "--no-install", "--no-git"])

    assert code == 0
    assert (cli_env / "my-app" / "app.py").exists()
    out = capsys.readouterr().out
    assert "🎉 Project ready! Next steps:" in out
    assert "  cd my-app" in out


def test_scaffold_prompts_for_name(
    cli_env: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("myapp\n"))

    assert main(["python", "flask", "--no-git"]) == 0

    assert (cli_env / "myapp" / "app.py").exists()
    assert "Enter your project name (default: python-flask-app): " in (
        capsys.readouterr().out
    )


def test_blank_prompt_uses_default(
    cli_env: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))

    assert main(["python", "flask", "--no-git"]) == 0
    assert (cli_env / "python-flask-app").is_dir()


def test_prompt_eof_uses_default() -> None:
    def _eof(_prompt: str) -> str:
        raise EOFError

    assert prompt_project_name("python-app", input_fn=_eof) == "python-app"


def test_missing_template(cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["rust", "axum", "--name", "demo"]) == 1

    captured = capsys.readouterr()
    assert "Template 'rust-axum' not found at:" in captured.err
    assert "Available templates:" in captured.out
    assert "  • python" in captured.out
    assert list(cli_env.iterdir()) == []


def test_existing_project_directory(
    cli_env: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (cli_env / "demo").mkdir()

    assert main(["python", "flask", "--name", "demo", "--no-git"]) == 1
    assert "already exists" in capsys.readouterr().err
    assert list((cli_env / "demo").iterdir()) == []


def test_invalid_config_file(
    cli_env: Path, templates_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (templates_root.parent / "config.yaml").write_text(
        "init_git: maybe\n", encoding="utf-8"
    )

    assert main(["python", "flask", "--name", "demo"]) == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_errors_share_the_janus_prefix(
    cli_env: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (cli_env / "demo").mkdir()

    assert main(["rust", "--name", "demo"]) == 1
    assert main(["python", "flask", "--name", "demo", "--no-git"]) == 1
    assert main(["-o", "recipes"]) == 2

    err_lines = [line for line in capsys.readouterr().err.splitlines() if line]
    assert len(err_lines) == 3
    assert all(line.startswith("[janus] ") for line in err_lines)
