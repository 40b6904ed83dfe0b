"""Initialise a git repository inside a freshly scaffolded project."""

from __future__ import annotations

import logging
import shutil
import subprocess  # nosec B404 - only used for CalledProcessError
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .process import CommandRunner, describe_failure, run_command

logger = logging.getLogger(__name__)

DEFAULT_COMMIT_MESSAGE = "Initial commit from Janus"


@dataclass
class GitResult:
    status: str
    step: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"


def git_steps(commit_message: str) -> list[tuple[str, tuple[str, ...]]]:
    return [
        ("init", ("git", "init")),
        ("add", ("git", "add", ".")),
        ("commit", ("git", "commit", "-m", commit_message)),
    ]


def is_git_repository(project_dir: Path) -> bool:
    return (project_dir / ".git").exists()


def initialize_git(
    project_dir: Path,
    *,
    commit_message: str = DEFAULT_COMMIT_MESSAGE,
    runner: CommandRunner = run_command,
    which: Callable[[str], Optional[str]] = shutil.which,
    progress: Callable[[str], None] | None = None,
) -> GitResult:
    """Run ``git init``, ``git add .`` and ``git commit`` in ``project_dir``.

    Skipped when git is not on ``PATH`` or the directory already holds a
    repository. The first failing step stops the sequence; the failure is
    returned rather than raised. ``progress`` is called with each step name
    before it runs.
    """

    if which("git") is None:
        return GitResult(status="unavailable")
    if is_git_repository(project_dir):
        return GitResult(status="existing")

    for step, command in git_steps(commit_message):
        if progress is not None:
            progress(step)
        try:
            runner(command, project_dir)
        except (subprocess.CalledProcessError, OSError) as exc:
            error = describe_failure(exc)
            logger.info("git %s failed in %s: %s", step, project_dir, error)
            return GitResult(status="failed", step=step, error=error)
    return GitResult(status="initialized")
