from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary conforms to the expected schema
before a walk starts. Handles type coercion, path normalization and
default value injection, and converts a clean configuration into the
immutable TreeOptions consumed by the builder.
"""

import logging
from typing import Any, Dict, List, Tuple

from treeify.domain.config import get_default_config
from treeify.domain.tree_models import TreeOptions
from treeify.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["path", "output_file", "log_level", "log_file"]

_BOOL_FIELDS = [
    "include_hidden", "count_entries", "dirs_only",
    "sort_entries", "follow_symlinks", "json_output",
]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["path"] = normalize_path(merged["path"], defaults["path"])
    merged["log_level"] = _normalize_level(merged["log_level"], warnings, strict)

    return merged, warnings


def options_from_config(config: Dict[str, Any]) -> TreeOptions:
    """Build the builder options from a validated configuration."""
    return TreeOptions(
        path=config["path"],
        include_hidden=config["include_hidden"],
        count_entries=config["count_entries"],
        dirs_only=config["dirs_only"],
        sort_entries=config["sort_entries"],
        follow_symlinks=config["follow_symlinks"],
    )

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _normalize_level(level: str, warnings: List[str], strict: bool) -> str:
    upper = level.upper()
    if upper in _LOG_LEVELS:
        return upper
    msg = f"Invalid log level '{level}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using INFO.")
    return "INFO"
