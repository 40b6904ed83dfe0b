"""Template library lookup helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import TemplateNotFoundError

logger = logging.getLogger(__name__)

_RESERVED_SEGMENTS = {".", ".."}


@dataclass(frozen=True)
class TemplateRef:
    """A ``(domain, subdomain)`` key into the template library."""

    domain: str
    subdomain: str = ""

    @property
    def name(self) -> str:
        if self.subdomain:
            return f"{self.domain}-{self.subdomain}"
        return self.domain

    @property
    def relative_path(self) -> Path:
        if self.subdomain:
            return Path(self.domain) / self.subdomain
        return Path(self.domain)

    def is_safe(self) -> bool:
        """Return False when a segment could escape the templates root."""
        if not self.domain:
            return False
        for segment in (self.domain, self.subdomain):
            if segment in _RESERVED_SEGMENTS:
                return False
            if "/" in segment or "\\" in segment:
                return False
        return True

    def __str__(self) -> str:
        return self.name


class TemplateLibrary:
    """Resolve and enumerate templates stored under a single root folder."""

    def __init__(self, root: Path):
        self.root = root

    def exists(self) -> bool:
        return self.root.is_dir()

    def path_for(self, ref: TemplateRef) -> Path:
        return self.root / ref.relative_path

    def resolve(self, ref: TemplateRef) -> Path:
        path = self.path_for(ref)
        if not ref.is_safe() or not path.is_dir():
            raise TemplateNotFoundError(ref.name, path)
        logger.debug("Resolved template %s to %s", ref.name, path)
        return path

    def list_domains(self) -> list[str]:
        if not self.exists():
            return []
        return sorted(
            entry.name for entry in self.root.iterdir() if _is_visible_dir(entry)
        )

    def list_templates(self) -> list[TemplateRef]:
        """List every domain followed by the subdomains nested below it."""
        refs: list[TemplateRef] = []
        for domain in self.list_domains():
            refs.append(TemplateRef(domain))
            domain_dir = self.root / domain
            for entry in sorted(domain_dir.iterdir(), key=lambda item: item.name):
                if _is_visible_dir(entry):
                    refs.append(TemplateRef(domain, entry.name))
        return refs


def _is_visible_dir(path: Path) -> bool:
    return path.is_dir() and not path.name.startswith(".")
