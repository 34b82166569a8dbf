"""Helpers for parsing formatted numbers and rounding floats like decimals."""

from __future__ import annotations

import math
import numbers
import re
from typing import Any, Callable, Optional

from .config import get_settings
from .logging import get_logger

__all__ = ["check_precision", "to_fixed", "unformat"]

logger = get_logger(__name__)

# Nudges values such as 0.615 (stored as 0.61499...) over the rounding edge.
_EPSILON = 1e-11

_BRACKETED_NUMBER = re.compile(r"-?\(([-]*\d*[^)]?\d+)\)")
_BRACKETED_CRUFT = re.compile(r"\((.*)\)")
_FLOAT_PREFIX = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def _parse_float_prefix(text: str) -> Optional[float]:
    """Parse the longest float literal at the start of ``text``."""
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return None
    return float(match.group(0))


def unformat(value: Any, decimal: Optional[str] = None, fallback: Any = None) -> Any:
    """Strip formatting cruft from ``value`` and return the raw float.

    Accepts bracketed negatives (``"$ (1.99)"`` gives ``-1.99``) and treats an
    even number of minus signs as positive. Lists are parsed element-wise,
    keeping their nesting. Nothing is raised: unparseable text returns
    ``fallback``.
    """
    settings = get_settings()
    if decimal is None:
        decimal = settings.decimal
    if fallback is None:
        fallback = settings.fallback

    if isinstance(value, (list, tuple)):
        return [unformat(item, decimal, fallback) for item in value]

    if isinstance(value, numbers.Number):
        return value

    cruft = re.compile(r"[^0-9\-()" + re.escape(decimal) + r"]")
    cleaned = cruft.sub("", str(value))
    cleaned = cleaned.replace(decimal, ".", 1)
    cleaned = _BRACKETED_NUMBER.sub(r"-\1", cleaned)
    cleaned = _BRACKETED_CRUFT.sub("", cleaned, count=1)

    negative = cleaned.count("-") % 2 == 1
    magnitude = _parse_float_prefix(cleaned.replace("-", ""))
    if magnitude is None:
        logger.debug("unformat_fallback", value=str(value), fallback=fallback)
        return fallback
    return -magnitude if negative else magnitude


def check_precision(value: Any, base: int) -> int:
    """Normalise ``value`` to a non-negative integer, or return ``base``."""
    try:
        number = abs(float(value))
    except (TypeError, ValueError):
        return base
    if math.isnan(number) or math.isinf(number):
        return base
    return int(_round_half_up(number))


def _check_round(value: Any, base: int) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return base
    if math.isnan(number):
        return base
    return number


def to_fixed(value: float, precision: Any = None, round: Any = None) -> str:
    """Fixed-point rendering that treats floats more like decimals.

    ``format(0.615, ".2f")`` gives ``'0.61'`` because of binary
    representation; ``to_fixed(0.615, 2)`` gives ``'0.62'``.

    ``round`` picks the direction: positive rounds up, negative rounds down
    and zero rounds to nearest (halves up).
    """
    settings = get_settings()
    precision = check_precision(precision, settings.precision)
    direction = _check_round(round, settings.round)

    rounder: Callable[[float], float]
    if direction > 0:
        rounder = math.ceil
    elif direction < 0:
        rounder = math.floor
    else:
        rounder = _round_half_up

    value = float(value)
    if not math.isfinite(value):
        return f"{value:.{precision}f}"

    power = 10 ** precision
    result = rounder((value + _EPSILON) * power) / power
    if result == 0:
        result = 0.0
    return f"{result:.{precision}f}"
