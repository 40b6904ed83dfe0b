"""Copy a template into a new project and run post-copy setup."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from ..observability import trace_operation
from .config import JanusConfig
from .copier import copy_template
from .errors import ProjectExistsError
from .installer import InstallResult, InstallRule, install_dependencies
from .naming import sanitize_project_name
from .process import CommandRunner, run_command
from .templates import TemplateLibrary, TemplateRef
from .vcs import GitResult, initialize_git

_NEXT_STEP_HINTS: list[tuple[tuple[str, ...], str]] = [
    (("nextjs", "react"), "npm run dev"),
    (("python", "flask", "django"), "python main.py  # or your main file"),
    (("node", "express"), "npm start"),
]

_GIT_PROGRESS = {
    "init": ["🔧 Initializing git repository..."],
    "add": ["✅ Git repository initialized", "📝 Creating initial commit..."],
}


def next_steps(template_name: str, project_name: str) -> list[str]:
    """Commands suggested after scaffolding, chosen by template name."""
    steps = [f"cd {project_name}"]
    for keywords, hint in _NEXT_STEP_HINTS:
        if any(keyword in template_name for keyword in keywords):
            steps.append(hint)
            break
    else:
        steps.append("# Start coding!")
    return steps


@dataclass
class ScaffoldResult:
    template: TemplateRef
    project_dir: Path
    files: list[Path] = field(default_factory=list)
    install: InstallResult = field(
        default_factory=lambda: InstallResult(status="disabled")
    )
    git: GitResult = field(default_factory=lambda: GitResult(status="disabled"))
    next_steps: list[str] = field(default_factory=list)


class ProjectScaffolder:
    """Create projects from the template library described by ``config``."""

    def __init__(
        self,
        config: JanusConfig,
        *,
        runner: CommandRunner = run_command,
        which: Callable[[str], Optional[str]] = shutil.which,
        reporter: Callable[[str], None] = print,
    ) -> None:
        self.config = config
        self.library = TemplateLibrary(config.templates_root)
        self.runner = runner
        self.which = which
        self.reporter = reporter

    def scaffold(
        self, ref: TemplateRef, project_name: str, *, workdir: Path | None = None
    ) -> ScaffoldResult:
        template_path = self.library.resolve(ref)
        name = sanitize_project_name(project_name)
        project_dir = (workdir or Path.cwd()) / name
        if project_dir.exists():
            raise ProjectExistsError(project_dir)

        self.reporter(f"Scaffolding project '{name}' from template '{ref.name}'...")
        with trace_operation("scaffold.copy", template=ref.name, project=name) as span:
            files = copy_template(template_path, project_dir)
            span.set_attribute("janus.files", len(files))
        self.reporter(f"✅ Project scaffolded successfully in './{name}'")

        return ScaffoldResult(
            template=ref,
            project_dir=project_dir,
            files=files,
            install=self.install_dependencies(project_dir),
            git=self.initialize_git(project_dir),
            next_steps=next_steps(ref.name, name),
        )

    def install_dependencies(self, project_dir: Path) -> InstallResult:
        if not self.config.install_dependencies:
            self.reporter("📦 Dependency installation disabled, skipping")
            return InstallResult(status="disabled")

        with trace_operation("scaffold.install") as span:
            result = install_dependencies(
                project_dir, runner=self.runner, progress=self._report_install_start
            )
            span.set_attribute("janus.install_status", result.status)
            if result.rule is not None:
                span.set_attribute("janus.ecosystem", result.rule.ecosystem)

        if result.rule is None:
            self.reporter(
                "📦 No recognized dependency files found, skipping dependency installation"
            )
        elif result.status == "installed":
            self.reporter(
                f"✅ {result.rule.ecosystem} dependencies installed successfully"
            )
        else:
            self.reporter(f"⚠️  Warning: {result.rule.label} failed: {result.error}")
        return result

    def _report_install_start(self, rule: InstallRule) -> None:
        self.reporter(
            f"📦 Found {rule.marker}, installing {rule.ecosystem} dependencies..."
        )

    def initialize_git(self, project_dir: Path) -> GitResult:
        if not self.config.init_git:
            self.reporter("🔧 Git initialization disabled, skipping")
            return GitResult(status="disabled")

        with trace_operation("scaffold.git") as span:
            result = initialize_git(
                project_dir,
                commit_message=self.config.commit_message,
                runner=self.runner,
                which=self.which,
                progress=self._report_git_step,
            )
            span.set_attribute("janus.git_status", result.status)

        if result.status == "unavailable":
            self.reporter("⚠️  Git not found, skipping git initialization")
        elif result.status == "existing":
            self.reporter("📁 Directory is already a git repository")
        elif result.status == "failed":
            self.reporter(f"⚠️  Warning: git {result.step} failed: {result.error}")
        else:
            self.reporter("✅ Initial commit created")
        return result

    def _report_git_step(self, step: str) -> None:
        for message in _GIT_PROGRESS.get(step, []):
            self.reporter(message)
