"""Project name helpers."""

from __future__ import annotations

import re

from .templates import TemplateRef

FALLBACK_PROJECT_NAME = "my-project"

_INVALID_CHARS_RE = re.compile(r'[<>:"/\\|?*!\x00-\x1f\x7f]')


def sanitize_project_name(name: str) -> str:
    """Turn user input into a lowercase, hyphenated directory name.

    Characters that are invalid in file names (control characters included)
    are dropped, spaces become hyphens, and leading/trailing hyphens and dots
    are trimmed so the result can never point outside the working directory.
    An empty result falls back to ``my-project``.
    """

    sanitized = _INVALID_CHARS_RE.sub("", name)
    sanitized = sanitized.replace(" ", "-")
    sanitized = sanitized.lower()
    sanitized = sanitized.strip("-.")
    return sanitized or FALLBACK_PROJECT_NAME


def default_project_name(template: TemplateRef) -> str:
    return f"{template.name}-app"
