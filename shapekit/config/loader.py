from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, TextIO

import yaml
from dotenv import load_dotenv

from shapekit.core.errors import ConfigError, ShapeSpecError
from shapekit.observability.logging import configure_logging
from shapekit.shapes import Shape, build_shapes

logger = logging.getLogger(__name__)


_ENV_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class _UnresolvedEnvRef:
    var_name: str
    key_path: str
    reason: str  # "missing" | "empty"


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    # Raw catalog entries; turned into shapes by build_shapes().
    shapes: list[dict[str, Any]] = field(default_factory=list)


def _expand_env_in_obj(obj: Any, *, key_path: str, unresolved: list[_UnresolvedEnvRef]) -> Any:
    if isinstance(obj, str):
        def repl(match: re.Match[str]) -> str:
            name = match.group(1)
            value = os.getenv(name)
            if value is None or value == "":
                unresolved.append(
                    _UnresolvedEnvRef(
                        var_name=name,
                        key_path=key_path,
                        reason="missing" if value is None else "empty",
                    )
                )
                return match.group(0)
            return value

        return _ENV_PLACEHOLDER_RE.sub(repl, obj)

    if isinstance(obj, Mapping):
        return {
            str(k): _expand_env_in_obj(
                v,
                key_path=f"{key_path}.{k}" if key_path else str(k),
                unresolved=unresolved,
            )
            for k, v in obj.items()
        }

    if isinstance(obj, list):
        return [
            _expand_env_in_obj(v, key_path=f"{key_path}[{i}]", unresolved=unresolved)
            for i, v in enumerate(obj)
        ]

    return obj


def load_config(
    path: str | Path,
    *,
    load_dotenv_file: bool = True,
    dotenv_path: Path | None = None,
) -> AppConfig:
    """Load a YAML shape catalog with strict ${ENV_VAR} expansion.

    Args:
        path: YAML file with optional `logging` and `shapes` sections.
        load_dotenv_file: Whether to load a .env file before expansion.
        dotenv_path: Optional explicit .env path. Defaults to `.env` in the
            current working directory.

    Raises:
        ConfigError: If the file is missing, the YAML is invalid, a section has the
            wrong type, or an env var is missing/empty.
    """

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError("config file not found", path=str(config_path))

    if load_dotenv_file:
        # Never overrides variables already set in the environment.
        load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse YAML: {e}", path=str(config_path)) from e

    if not isinstance(raw, Mapping):
        raise ConfigError("top-level YAML must be a mapping", path=str(config_path))

    unresolved: list[_UnresolvedEnvRef] = []
    expanded = _expand_env_in_obj(raw, key_path="", unresolved=unresolved)
    if unresolved:
        lines = ["Unresolved environment variables in config:"]
        for ref in unresolved:
            lines.append(f"- {ref.var_name} ({ref.reason}) at {ref.key_path or '<root>'}")
        raise ConfigError("\n".join(lines), path=str(config_path))

    logging_cfg = LoggingConfig()
    logging_raw = expanded.get("logging")
    if logging_raw is not None:
        if not isinstance(logging_raw, dict):
            raise ConfigError("must be a mapping", path="logging")
        level = str(logging_raw.get("level", LoggingConfig.level)).upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"unknown log level {level!r}", path="logging.level")
        logging_cfg = LoggingConfig(level=level)

    shapes_raw = expanded.get("shapes")
    if shapes_raw is None:
        shapes_raw = []
    if not isinstance(shapes_raw, list):
        raise ConfigError("must be a list of mappings", path="shapes")
    for i, item in enumerate(shapes_raw):
        if not isinstance(item, dict):
            raise ConfigError("must be a mapping", path=f"shapes[{i}]")

    logger.debug("config_loaded", extra={"path": str(config_path), "shapes": len(shapes_raw)})
    return AppConfig(logging=logging_cfg, shapes=[dict(item) for item in shapes_raw])


def load_shapes(path: str | Path, *, load_dotenv_file: bool = True) -> list[Shape]:
    """Load a catalog and build its shapes.

    Invalid entries are reported as ConfigError, keeping the entry path.
    """

    cfg = load_config(path, load_dotenv_file=load_dotenv_file)
    try:
        return build_shapes(cfg.shapes)
    except ShapeSpecError as e:
        raise ConfigError(e.message, path=e.path) from e


def apply_logging_config(cfg: AppConfig, *, stream: TextIO | None = None) -> None:
    """Configure package logging from the catalog's `logging` section."""

    configure_logging(level=cfg.logging.level, stream=stream)
    logger.debug("logging_configured", extra={"level": cfg.logging.level})
