"""Extractor settings loading.

Settings come from an optional YAML or JSON file, overridden by
``SHDOC_*`` environment variables. Environment variables are also read from
a ``.env`` file via python-dotenv at import time.

In non-strict mode unreadable or malformed settings fall back to defaults
with a warning. In strict mode they raise ``SettingsError``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Idempotent; does nothing if already loaded or missing
load_dotenv()

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class SettingsError(RuntimeError):
    """Raised when strict settings validation fails."""


@dataclass(frozen=True)
class ExtractorSettings:
    """Runtime settings for the extractor runner."""

    log_level: str = "INFO"
    output_dir: str = "output/docs"
    json_indent: int = 2
    script_extensions: tuple[str, ...] = (".bash", ".ksh", ".sh", ".zsh")


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def resolve_strict_settings(default: bool = False) -> bool:
    """Resolve strict validation mode from ``SHDOC_STRICT_SETTINGS`` env."""
    return _env_flag("SHDOC_STRICT_SETTINGS", default=default)


def _fail(msg: str, strict: bool) -> None:
    if strict:
        raise SettingsError(msg)
    logger.warning("%s; continuing with defaults", msg)


def _load_payload(path: str, strict: bool) -> dict[str, Any]:
    settings_path = Path(path)
    try:
        text = settings_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        _fail(f"Settings file not found: {settings_path}", strict)
        return {}
    except OSError as exc:
        _fail(f"Failed to read settings file {settings_path}: {exc}", strict)
        return {}

    try:
        if settings_path.suffix.lower() == ".json":
            payload = json.loads(text)
        else:
            payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        _fail(f"Failed to parse settings file {settings_path}: {exc}", strict)
        return {}

    if payload is None:
        return {}

    if not isinstance(payload, dict):
        _fail(f"Unexpected settings payload type: {type(payload).__name__}", strict)
        return {}

    return payload


def _coerce(payload: dict[str, Any], strict: bool) -> dict[str, Any]:
    known = {f.name for f in fields(ExtractorSettings)}
    values: dict[str, Any] = {}

    for key, raw in payload.items():
        if key not in known:
            _fail(f"Unknown settings key '{key}'", strict)
            continue

        if key == "log_level":
            level = str(raw).strip().upper()
            if level not in _LOG_LEVELS:
                _fail(f"Invalid log_level '{raw}'", strict)
                continue
            values[key] = level

        elif key == "json_indent":
            if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
                _fail(f"json_indent must be a non-negative integer, got {raw!r}", strict)
                continue
            values[key] = raw

        elif key == "script_extensions":
            if not isinstance(raw, list) or not all(isinstance(e, str) for e in raw):
                _fail("script_extensions must be a list of strings", strict)
                continue
            values[key] = tuple(e if e.startswith(".") else f".{e}" for e in raw)

        else:
            values[key] = str(raw)

    return values


def load_settings(path: str | None = None, strict: bool | None = None) -> ExtractorSettings:
    """Load settings from ``path`` and apply environment overrides.

    Args:
        path: Optional YAML or JSON settings file.
        strict: Raise on invalid settings. Defaults to ``SHDOC_STRICT_SETTINGS``.

    Returns:
        Resolved settings.

    Raises:
        SettingsError: In strict mode, if the file or any value is invalid.
    """
    if strict is None:
        strict = resolve_strict_settings()

    payload: dict[str, Any] = {}
    if path:
        payload = _load_payload(path, strict)

    env_level = os.getenv("SHDOC_LOG_LEVEL")
    if env_level:
        payload["log_level"] = env_level
    env_output = os.getenv("SHDOC_OUTPUT_DIR")
    if env_output:
        payload["output_dir"] = env_output

    settings = replace(ExtractorSettings(), **_coerce(payload, strict))
    logger.debug("Resolved settings: %s", settings)
    return settings
