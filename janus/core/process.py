"""Subprocess helpers shared by the installer and git initialiser."""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - package managers and git only
from pathlib import Path
from typing import Callable, Sequence

logger = logging.getLogger(__name__)

CommandRunner = Callable[[Sequence[str], Path], None]


def run_command(cmd: Sequence[str], cwd: Path) -> None:
    """Run ``cmd`` in ``cwd`` inheriting stdio; raise on non-zero exit."""

    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    subprocess.run(  # nosec B603 - argv comes from fixed install/git rules
        list(cmd),
        cwd=cwd,
        check=True,
    )


def describe_failure(exc: BaseException) -> str:
    if isinstance(exc, subprocess.CalledProcessError):
        return f"exit status {exc.returncode}"
    if isinstance(exc, FileNotFoundError) and exc.filename:
        return f"executable file not found: {exc.filename}"
    return str(exc)
