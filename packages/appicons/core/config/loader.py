"""Load generation requests and app settings from JSON or YAML files."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from appicons.core.assets.errors import ConfigError
from appicons.core.config.models import AppConfig, GeneratorConfig, LoggingConfig
from appicons.core.utils.logging import configure_logging as _configure_logging
from appicons.core.utils.paths import resolve_path

logger = logging.getLogger(__name__)

# Layer fields holding file paths, resolved against the config file directory
_LAYER_PATH_FIELDS = ("image_path", "svg_path", "font_path")

_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e


def _parse_yaml(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e


_PARSERS: dict[str, Callable[[str], Any]] = {"json": _parse_json, "yaml": _parse_yaml}


def detect_format(file_path: Path | str) -> str:
    """Return ``"json"`` or ``"yaml"`` for a config path, by extension.

    >>> detect_format("icons.yml")
    'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    try:
        return _FORMATS[suffix]
    except KeyError:
        raise ValueError(f"Unsupported config format: {suffix or '<none>'}") from None


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a config file into a plain dict.

    An empty file yields ``{}``.

    Raises:
        FileNotFoundError: If ``path`` is missing.
        ValueError: On an unknown extension, unparseable content, or a
            non-mapping document.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    parse = _PARSERS[detect_format(path)]
    try:
        content = parse(path.read_text(encoding="utf-8"))
    except ValueError as e:
        raise ValueError(f"{e} ({path})") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def _resolve_layer_paths(layer: Any, base_dir: Path) -> Any:
    if not isinstance(layer, dict):
        return layer
    resolved = dict(layer)
    for field in _LAYER_PATH_FIELDS:
        if resolved.get(field):
            resolved[field] = str(resolve_path(resolved[field], base_dir))
    return resolved


def load_generator_config(path: str | Path) -> GeneratorConfig:
    """Load and validate a generation request.

    Relative paths (output directory, layer files) are resolved against the
    config file's directory and ``~`` is expanded.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Validated GeneratorConfig

    Raises:
        FileNotFoundError: If config file does not exist
        ConfigError: If the file cannot be parsed or fails validation
    """
    path = Path(path)
    try:
        raw = load_config(path)
    except ValueError as e:
        raise ConfigError(str(e), {"path": str(path)}) from e

    base_dir = path.resolve().parent
    if raw.get("output_dir"):
        raw["output_dir"] = str(resolve_path(raw["output_dir"], base_dir))
    for key in ("background", "foreground", "dark_background"):
        if key in raw:
            raw[key] = _resolve_layer_paths(raw[key], base_dir)

    try:
        return GeneratorConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid generator config in {path}: {e}", {"path": str(path)}) from e


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load application settings, falling back to defaults when the file is
    absent. ``APPICONS_LOG_LEVEL`` wins over the file's log level."""
    path = AppConfig.default_path() if path is None else Path(path)
    config = AppConfig.model_validate(load_config(path)) if path.exists() else AppConfig()

    level = os.getenv("APPICONS_LOG_LEVEL")
    if not level:
        return config

    logger.debug("Log level %s taken from APPICONS_LOG_LEVEL", level)
    log_settings = LoggingConfig.model_validate(
        {**config.logging.model_dump(), "level": level.upper()}
    )
    return config.model_copy(update={"logging": log_settings})


def configure_logging(config: AppConfig | None = None) -> None:
    """Apply ``config.logging`` (or the default app config's) to the root logger."""
    settings = (config or load_app_config()).logging
    _configure_logging(
        level=settings.level,
        format_string=settings.format,
        filename=settings.filename,
        structured=settings.structured,
    )
