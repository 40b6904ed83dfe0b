"""Error types raised by the Janus core."""

from __future__ import annotations

from pathlib import Path


class JanusError(RuntimeError):
    """Base class for scaffolding failures that abort the current command."""


class HomeDirectoryError(JanusError):
    """Raised when the user's home directory cannot be determined."""


class ConfigError(JanusError):
    """Raised when the Janus configuration file is unreadable or invalid."""


class TemplateNotFoundError(JanusError):
    """Raised when a domain/subdomain pair does not map to a template folder."""

    def __init__(self, name: str, path: Path) -> None:
        super().__init__(f"Template '{name}' not found at: {path}")
        self.name = name
        self.path = path


class ProjectExistsError(JanusError):
    """Raised instead of overwriting an existing project directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Directory '{path.name}' already exists. Aborting to avoid overwriting."
        )
        self.path = path


class CopyError(JanusError):
    """Raised when a template tree cannot be copied."""
