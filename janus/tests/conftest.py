from __future__ import annotations

from pathlib import Path

import pytest

from janus.core import JanusConfig


class FakeRunner:
    """Record commands and fail the ones listed in ``failures``."""

    def __init__(self, failures: dict[str, BaseException] | None = None) -> None:
        self.calls: list[tuple[tuple[str, ...], Path]] = []
        self.failures = failures or {}

    def __call__(self, cmd, cwd: Path) -> None:
        command = tuple(cmd)
        self.calls.append((command, cwd))
        key = " ".join(command)
        for prefix, exc in self.failures.items():
            if key.startswith(prefix):
                raise exc

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [cmd for cmd, _ in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    root = tmp_path / "janus-home" / "templates"
    flask = root / "python" / "flask"
    flask.mkdir(parents=True)
    app = flask / "app.py"
    app.write_text("print('hello')\n", encoding="utf-8")
    app.chmod(0o644)
    return root


@pytest.fixture
def config(templates_root: Path) -> JanusConfig:
    return JanusConfig(home=templates_root.parent, templates_root=templates_root)


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path
