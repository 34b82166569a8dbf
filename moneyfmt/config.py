"""Process-wide default settings and their environment loader."""

from __future__ import annotations

import os
from typing import Any, Callable, Mapping, Optional

from .models import Settings

__all__ = [
    "DEFAULT_SETTINGS",
    "get_log_level",
    "get_settings",
    "load_settings",
    "resolve_settings",
    "set_settings",
]

DEFAULT_SETTINGS = Settings()

_current: Settings = DEFAULT_SETTINGS


_ENV_PREFIX = "MONEYFMT_"

_TRUE = {"1", "true", "t", "yes", "y", "on"}
_FALSE = {"0", "false", "f", "no", "n", "off"}


def _get_env(name: str, default: Optional[str] = None, *, allow_empty: bool = False) -> Optional[str]:
    """Read ``MONEYFMT_<name>``; blank counts as unset unless ``allow_empty``."""
    value = os.getenv(_ENV_PREFIX + name)
    if value is None or allow_empty:
        return default if value is None else value
    value = value.strip()
    return value or default


def _get_typed(name: str, default: Any, cast: Callable[[str], Any], kind: str) -> Any:
    value = _get_env(name)
    if value is None:
        return default
    try:
        return cast(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {_ENV_PREFIX}{name} must be {kind}") from exc


def _to_bool(value: str) -> bool:
    value_lower = value.lower()
    if value_lower in _TRUE:
        return True
    if value_lower in _FALSE:
        return False
    raise ValueError(value)


def load_settings(base: Settings = DEFAULT_SETTINGS) -> Settings:
    """Build settings from ``MONEYFMT_*`` environment variables."""
    return Settings(
        symbol=_get_env("SYMBOL", base.symbol, allow_empty=True),
        format=_get_env("FORMAT", base.format),
        decimal=_get_env("DECIMAL", base.decimal),
        # Separators may legitimately be blank or a single space.
        thousand=_get_env("THOUSAND", base.thousand, allow_empty=True),
        precision=max(0, _get_typed("PRECISION", base.precision, int, "an integer")),
        grouping=max(1, _get_typed("GROUPING", base.grouping, int, "an integer")),
        strip_zeros=_get_typed("STRIP_ZEROS", base.strip_zeros, _to_bool, "a boolean"),
        fallback=_get_typed("FALLBACK", base.fallback, float, "a number"),
        round=_get_typed("ROUND", base.round, int, "an integer"),
    )


def get_log_level() -> str:
    return _get_env("LOG_LEVEL", "WARNING").upper()


def get_settings() -> Settings:
    """Return the process-wide default settings."""
    return _current


def set_settings(settings: Settings | None = None, **overrides: Any) -> Settings:
    """Replace the process-wide defaults.

    With no arguments the built-in defaults are restored. Keyword overrides
    are merged onto ``settings`` (or the current defaults when omitted).
    """
    global _current
    if settings is None and not overrides:
        _current = DEFAULT_SETTINGS
    else:
        _current = (settings or _current).merge(**overrides)
    return _current


def resolve_settings(
    options: Settings | Mapping[str, Any] | None = None,
    base: Settings | None = None,
    **overrides: Any,
) -> Settings:
    """Merge per-call options onto ``base`` or the process-wide defaults."""
    return (base or _current).merge(options, **overrides)
