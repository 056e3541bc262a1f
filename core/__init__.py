"""Core shared logging, settings and output helpers."""

from core.structured_logging import (
    configure_structured_logging,
    get_run_id,
    script_scope,
    set_run_id,
)
from core.settings import (
    ExtractorSettings,
    SettingsError,
    load_settings,
    resolve_strict_settings,
)
from core.run_artifacts import write_document_json

__all__ = [
    "configure_structured_logging",
    "get_run_id",
    "script_scope",
    "set_run_id",
    "ExtractorSettings",
    "SettingsError",
    "load_settings",
    "resolve_strict_settings",
    "write_document_json",
]
