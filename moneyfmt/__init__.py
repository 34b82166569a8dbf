"""Number, money and currency formatting and parsing."""

from .config import DEFAULT_SETTINGS, get_settings, load_settings, set_settings
from .formatting import check_currency_format, format_column, format_money, format_number
from .models import CurrencyFormat, Settings
from .numeral import to_fixed, unformat

format = format_money
parse = unformat

__all__ = [
    "CurrencyFormat",
    "DEFAULT_SETTINGS",
    "Settings",
    "check_currency_format",
    "format",
    "format_column",
    "format_money",
    "format_number",
    "get_settings",
    "load_settings",
    "parse",
    "set_settings",
    "to_fixed",
    "unformat",
]
