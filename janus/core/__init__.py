"""Janus core package - template copy, install and git helpers."""

from .config import ConfigValidator, JanusConfig, load_config, resolve_janus_home
from .copier import copy_template, copy_tree
from .errors import (
    ConfigError,
    CopyError,
    HomeDirectoryError,
    JanusError,
    ProjectExistsError,
    TemplateNotFoundError,
)
from .installer import (
    INSTALL_RULES,
    InstallResult,
    InstallRule,
    detect_rule,
    install_dependencies,
    run_install,
)
from .naming import default_project_name, sanitize_project_name
from .scaffold import ProjectScaffolder, ScaffoldResult, next_steps
from .templates import TemplateLibrary, TemplateRef
from .vcs import DEFAULT_COMMIT_MESSAGE, GitResult, initialize_git

__all__ = [
    "ConfigError",
    "ConfigValidator",
    "CopyError",
    "DEFAULT_COMMIT_MESSAGE",
    "GitResult",
    "HomeDirectoryError",
    "INSTALL_RULES",
    "InstallResult",
    "InstallRule",
    "JanusConfig",
    "JanusError",
    "ProjectExistsError",
    "ProjectScaffolder",
    "ScaffoldResult",
    "TemplateLibrary",
    "TemplateNotFoundError",
    "TemplateRef",
    "copy_template",
    "copy_tree",
    "default_project_name",
    "detect_rule",
    "initialize_git",
    "install_dependencies",
    "load_config",
    "next_steps",
    "resolve_janus_home",
    "run_install",
    "sanitize_project_name",
]
