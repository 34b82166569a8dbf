"""Number, money and accounting-column formatting."""

from __future__ import annotations

import numbers
import re
from typing import Any, Mapping, Optional, Union

from .config import get_settings, resolve_settings
from .logging import get_logger
from .models import CurrencyFormat, FormatSpec, Settings
from .numeral import check_precision, to_fixed, unformat

__all__ = [
    "check_currency_format",
    "format_column",
    "format_money",
    "format_number",
]

logger = get_logger(__name__)

Options = Optional[Union[Settings, Mapping[str, Any]]]

_THOUSANDS = re.compile(r"(\d{3})(?=\d)")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _as_number(value: Any, settings: Settings) -> float:
    if isinstance(value, numbers.Number):
        return value
    return unformat(value, settings.decimal, settings.fallback)


def check_currency_format(currency_format: FormatSpec) -> CurrencyFormat:
    """Turn a format string or mapping into pos/neg/zero templates.

    A plain string is the positive template; the negative one is derived by
    moving the minus sign in front of ``%v``.
    """
    if isinstance(currency_format, CurrencyFormat):
        return currency_format
    if isinstance(currency_format, Mapping):
        return CurrencyFormat(
            pos=currency_format["pos"],
            neg=currency_format.get("neg"),
            zero=currency_format.get("zero"),
        )
    if "%v" not in currency_format:
        logger.debug("currency_format_missing_value", format=currency_format)
        return CurrencyFormat(pos=currency_format)
    return CurrencyFormat(
        pos=currency_format,
        neg=currency_format.replace("-", "", 1).replace("%v", "-%v", 1),
        zero=currency_format,
    )


def format_number(number: Any, options: Options = None, **overrides: Any) -> Any:
    """Format a number with grouped thousands and fixed precision.

    >>> format_number(5318008)
    '5,318,008.00'
    >>> format_number(9876543.21, precision=3, thousand=" ")
    '9 876 543.210'
    """
    settings = resolve_settings(options, **overrides)

    if _is_sequence(number):
        return [format_number(item, settings) for item in number]

    number = _as_number(number, settings)
    precision = check_precision(settings.precision, get_settings().precision)
    negative = "-" if number < 0 else ""

    fixed = to_fixed(abs(number), precision, settings.round)
    base, _, fraction = fixed.partition(".")
    mod = len(base) % 3 if len(base) > 3 else 0

    head = base[:mod] + settings.thousand if mod else ""
    body = _THOUSANDS.sub(lambda match: match.group(1) + settings.thousand, base[mod:])

    if settings.strip_zeros:
        fraction = fraction.rstrip("0")
    tail = settings.decimal + fraction if precision > 0 and fraction else ""

    return negative + head + body + tail


def _render_money(amount: float, formats: CurrencyFormat, settings: Settings) -> str:
    template = formats.for_amount(amount)
    return template.replace("%s", settings.symbol, 1).replace(
        "%v", format_number(abs(amount), settings), 1
    )


def format_money(amount: Any, options: Options = None, **overrides: Any) -> Any:
    """Format a number into currency.

    >>> format_money(12345678)
    '$12,345,678.00'
    >>> format_money(-500000, symbol="£ ", precision=0)
    '£ -500,000'
    >>> format_money(5318008, symbol="GBP", format="%v %s")
    '5,318,008.00 GBP'
    """
    settings = resolve_settings(options, **overrides)

    if _is_sequence(amount):
        return [format_money(item, settings) for item in amount]

    formats = check_currency_format(settings.format)
    return _render_money(_as_number(amount, settings), formats, settings)


def format_column(values: Any, options: Options = None, **overrides: Any) -> list:
    """Format a list of values as an accounting column.

    Every string in the result is padded with spaces to the same width so
    symbols, separators and decimals line up in monospace output. Nested
    lists are formatted as independent columns.
    """
    if values is None:
        return []

    settings = resolve_settings(options, **overrides)
    formats = check_currency_format(settings.format)
    pad_after_symbol = formats.pos.find("%s") < formats.pos.find("%v")

    max_length = 0
    formatted: list = []
    for value in values:
        if _is_sequence(value):
            formatted.append(format_column(value, settings))
            continue
        amount = unformat(value, settings.decimal, settings.fallback)
        rendered = _render_money(amount, formats, settings)
        max_length = max(max_length, len(rendered))
        formatted.append(rendered)

    column = []
    for rendered in formatted:
        if isinstance(rendered, str) and len(rendered) < max_length:
            padding = " " * (max_length - len(rendered))
            if pad_after_symbol:
                rendered = rendered.replace(settings.symbol, settings.symbol + padding, 1)
            else:
                rendered = padding + rendered
        column.append(rendered)
    return column
