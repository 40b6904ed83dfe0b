"""Detect a project's package manager and install its dependencies."""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - only used for CalledProcessError
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .process import CommandRunner, describe_failure, run_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallRule:
    """Marker file plus the install commands to try, in order."""

    marker: str
    ecosystem: str
    label: str
    commands: tuple[tuple[str, ...], ...]


INSTALL_RULES: tuple[InstallRule, ...] = (
    InstallRule("package.json", "npm", "npm install", (("npm", "install"),)),
    InstallRule(
        "requirements.txt",
        "pip",
        "pip install",
        (
            ("pip", "install", "-r", "requirements.txt"),
            ("pip3", "install", "-r", "requirements.txt"),
        ),
    ),
    InstallRule("go.mod", "Go", "go mod tidy", (("go", "mod", "tidy"),)),
    InstallRule("Cargo.toml", "Rust", "cargo fetch", (("cargo", "fetch"),)),
)


@dataclass
class InstallResult:
    status: str
    rule: InstallRule | None = None
    command: tuple[str, ...] | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"


def detect_rule(
    project_dir: Path, rules: tuple[InstallRule, ...] = INSTALL_RULES
) -> InstallRule | None:
    """Return the first rule whose marker file exists in ``project_dir``."""
    for rule in rules:
        if (project_dir / rule.marker).exists():
            return rule
    return None


def run_install(
    rule: InstallRule, project_dir: Path, *, runner: CommandRunner = run_command
) -> InstallResult:
    """Run the rule's commands until one succeeds. Failures are returned, not raised."""

    error: str | None = None
    for command in rule.commands:
        try:
            runner(command, project_dir)
        except (subprocess.CalledProcessError, OSError) as exc:
            error = describe_failure(exc)
            logger.info("%s failed in %s: %s", " ".join(command), project_dir, error)
            continue
        return InstallResult(status="installed", rule=rule, command=command)
    return InstallResult(
        status="failed", rule=rule, command=rule.commands[-1], error=error
    )


def install_dependencies(
    project_dir: Path,
    *,
    rules: tuple[InstallRule, ...] = INSTALL_RULES,
    runner: CommandRunner = run_command,
    progress: Callable[[InstallRule], None] | None = None,
) -> InstallResult:
    """Detect the project's package manager and run it once.

    ``progress`` is called with the matched rule before its commands run.
    """
    rule = detect_rule(project_dir, rules)
    if rule is None:
        return InstallResult(status="skipped")
    if progress is not None:
        progress(rule)
    return run_install(rule, project_dir, runner=runner)
