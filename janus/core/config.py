"""Janus configuration loading and validation."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml  # type: ignore[import-not-found]
from jsonschema import Draft202012Validator  # type: ignore[import-not-found]

from .errors import ConfigError, HomeDirectoryError
from .vcs import DEFAULT_COMMIT_MESSAGE

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_SCHEMA = PACKAGE_ROOT / "schemas" / "config.schema.json"
JANUS_DIR = ".janus"
TEMPLATES_DIR = "templates"
CONFIG_FILE = "config.yaml"


@dataclass(frozen=True)
class JanusConfig:
    """Resolved settings passed explicitly into the scaffolder."""

    home: Path
    templates_root: Path
    install_dependencies: bool = True
    init_git: bool = True
    commit_message: str = DEFAULT_COMMIT_MESSAGE


class ConfigValidator:
    """Validate config file payloads against the bundled JSON Schema."""

    def __init__(self, schema_path: Path | None = None) -> None:
        self.schema_path = schema_path or DEFAULT_SCHEMA
        self.validator = self._build_validator()

    def _build_validator(self) -> Draft202012Validator:
        if not self.schema_path.exists():
            raise ConfigError(f"Config schema missing at {self.schema_path}.")
        schema = json.loads(self.schema_path.read_text(encoding="utf-8"))
        return Draft202012Validator(schema)

    def collect_errors(self, payload: Any) -> list[str]:
        return list(self._iter_error_messages(payload))

    def validate(self, payload: Any, *, source: Path | None = None) -> None:
        errors = self.collect_errors(payload)
        if errors:
            where = f" in {source}" if source else ""
            raise ConfigError(f"Invalid configuration{where}:\n" + "\n".join(errors))

    def _iter_error_messages(self, payload: Any) -> Iterable[str]:
        for error in self.validator.iter_errors(payload):
            path = ".".join(str(idx) for idx in error.path) or "config"
            yield f"{path}: {error.message}"


def resolve_janus_home(env: Mapping[str, str] | None = None) -> Path:
    env = os.environ if env is None else env
    override = env.get("JANUS_HOME")
    if override:
        return Path(override).expanduser()
    try:
        user_home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirectoryError(f"Error getting home directory: {exc}") from exc
    return user_home / JANUS_DIR


def load_config_file(
    path: Path, validator: ConfigValidator | None = None
) -> dict[str, Any]:
    """Read ``config.yaml``; a missing file yields an empty mapping."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    if data is None:
        return {}
    (validator or ConfigValidator()).validate(data, source=path)
    return dict(data)


def load_config(
    *,
    home: Path | None = None,
    templates_root: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> JanusConfig:
    """Resolve configuration from arguments, environment and ``config.yaml``.

    The templates root is taken from, in order: ``templates_root``,
    ``$JANUS_TEMPLATES``, the config file's ``templates_root`` (relative to
    the Janus home), and finally ``<janus home>/templates``.
    """

    env = os.environ if env is None else env
    janus_home = home or resolve_janus_home(env)
    settings = load_config_file(janus_home / CONFIG_FILE)

    if templates_root:
        root = Path(templates_root).expanduser()
    elif env.get("JANUS_TEMPLATES"):
        root = Path(env["JANUS_TEMPLATES"]).expanduser()
    elif settings.get("templates_root"):
        root = Path(settings["templates_root"]).expanduser()
        if not root.is_absolute():
            root = janus_home / root
    else:
        root = janus_home / TEMPLATES_DIR

    config = JanusConfig(
        home=janus_home,
        templates_root=root,
        install_dependencies=settings.get("install_dependencies", True),
        init_git=settings.get("init_git", True),
        commit_message=settings.get("commit_message", DEFAULT_COMMIT_MESSAGE),
    )
    logger.debug("Loaded configuration %s", config)
    return config
