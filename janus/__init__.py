"""Janus package root exposing the scaffolding core."""

__version__ = "1.0.0"

from .core import (  # isort: skip
    JanusConfig,
    ProjectScaffolder,
    TemplateLibrary,
    TemplateRef,
    load_config,
)

__all__ = [
    "JanusConfig",
    "ProjectScaffolder",
    "TemplateLibrary",
    "TemplateRef",
    "__version__",
    "load_config",
]
