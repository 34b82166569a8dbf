"""Settings records for number and currency formatting."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Union

from .logging import get_logger

__all__ = ["CurrencyFormat", "FormatSpec", "Settings"]

logger = get_logger(__name__)

_OPTION_ALIASES = {"stripZeros": "strip_zeros"}


@dataclass(frozen=True, slots=True)
class CurrencyFormat:
    """Templates for positive, negative and zero amounts.

    Each template may use ``%s`` for the currency symbol and ``%v`` for the
    formatted value, e.g. ``"%s %v"`` or ``"%s (%v)"``.
    """

    pos: str
    neg: Optional[str] = None
    zero: Optional[str] = None

    def __post_init__(self) -> None:
        if self.neg is None:
            object.__setattr__(self, "neg", self.pos)
        if self.zero is None:
            object.__setattr__(self, "zero", self.pos)

    def for_amount(self, amount: float) -> str:
        """Pick the template matching the sign of ``amount``."""
        if amount > 0:
            return self.pos
        if amount < 0:
            return self.neg
        return self.zero


FormatSpec = Union[str, CurrencyFormat, Mapping[str, str]]


@dataclass(frozen=True, slots=True)
class Settings:
    """Options shared by the parsing and formatting helpers."""

    symbol: str = "$"
    format: FormatSpec = "%s%v"
    decimal: str = "."
    thousand: str = ","
    precision: int = 2
    # Output always groups by three; kept so configurations round-trip.
    grouping: int = 3
    strip_zeros: bool = False
    fallback: float = 0
    round: int = 0

    def merge(self, options: Settings | Mapping[str, Any] | None = None, **overrides: Any) -> Settings:
        """Return a copy with ``options`` and then ``overrides`` applied."""
        changes: dict[str, Any] = {}
        if isinstance(options, Settings):
            changes.update((f.name, getattr(options, f.name)) for f in fields(options))
        elif options:
            changes.update(options)
        changes.update(overrides)
        if not changes:
            return self
        known = {f.name for f in fields(self)}
        normalized = {}
        for key, value in changes.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                logger.debug("unknown_option_ignored", option=key)
                continue
            normalized[name] = value
        return replace(self, **normalized)

