"""Command-line interface for moneyfmt."""

from __future__ import annotations

from typing import Any, List, Optional

import typer

from .config import get_log_level, load_settings
from .formatting import format_column, format_money, format_number
from .logging import configure_logging, get_logger
from .models import Settings
from .numeral import to_fixed, unformat

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Format and parse money and numbers")

VALUES = typer.Argument(..., help="Values to process; put '--' before negative values")
SYMBOL = typer.Option(None, "--symbol", "-s", help="Currency symbol")
FORMAT = typer.Option(None, "--format", "-f", help="Template using %s (symbol) and %v (value)")
PRECISION = typer.Option(None, "--precision", "-p", help="Decimal places")
DECIMAL = typer.Option(None, "--decimal", help="Decimal separator")
THOUSAND = typer.Option(None, "--thousand", help="Thousands separator")
STRIP_ZEROS = typer.Option(None, "--strip-zeros/--keep-zeros", help="Trim trailing decimal zeros")
ROUND = typer.Option(None, "--round", help="Rounding direction: >0 up, <0 down, 0 nearest")


def _build_settings(**options: Any) -> Settings:
    try:
        settings = load_settings()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    overrides = {key: value for key, value in options.items() if value is not None}
    return settings.merge(overrides)


def _echo_lines(lines: List[Any]) -> None:
    for line in lines:
        if isinstance(line, list):
            _echo_lines(line)
        else:
            typer.echo(line)


@app.callback()
def main_callback() -> None:
    configure_logging(get_log_level())


@app.command("money")
def money_command(
    values: List[str] = VALUES,
    symbol: Optional[str] = SYMBOL,
    format_: Optional[str] = FORMAT,
    precision: Optional[int] = PRECISION,
    decimal: Optional[str] = DECIMAL,
    thousand: Optional[str] = THOUSAND,
    strip_zeros: Optional[bool] = STRIP_ZEROS,
    round_: Optional[int] = ROUND,
) -> None:
    """Format values as currency, one per line."""
    settings = _build_settings(
        symbol=symbol,
        format=format_,
        precision=precision,
        decimal=decimal,
        thousand=thousand,
        strip_zeros=strip_zeros,
        round=round_,
    )
    logger.debug("cli_money", count=len(values))
    _echo_lines(format_money(values, settings))


@app.command("number")
def number_command(
    values: List[str] = VALUES,
    precision: Optional[int] = PRECISION,
    decimal: Optional[str] = DECIMAL,
    thousand: Optional[str] = THOUSAND,
    strip_zeros: Optional[bool] = STRIP_ZEROS,
    round_: Optional[int] = ROUND,
) -> None:
    """Format values as grouped plain numbers, one per line."""
    settings = _build_settings(
        precision=precision,
        decimal=decimal,
        thousand=thousand,
        strip_zeros=strip_zeros,
        round=round_,
    )
    logger.debug("cli_number", count=len(values))
    _echo_lines(format_number(values, settings))


@app.command("parse")
def parse_command(
    values: List[str] = VALUES,
    decimal: Optional[str] = DECIMAL,
    fallback: Optional[float] = typer.Option(None, "--fallback", help="Value used when parsing fails"),
) -> None:
    """Parse formatted strings back into numbers."""
    settings = _build_settings(decimal=decimal, fallback=fallback)
    logger.debug("cli_parse", count=len(values))
    for parsed in unformat(values, settings.decimal, settings.fallback):
        typer.echo(repr(float(parsed)))


@app.command("column")
def column_command(
    values: List[str] = VALUES,
    symbol: Optional[str] = SYMBOL,
    format_: Optional[str] = FORMAT,
    precision: Optional[int] = PRECISION,
    decimal: Optional[str] = DECIMAL,
    thousand: Optional[str] = THOUSAND,
    strip_zeros: Optional[bool] = STRIP_ZEROS,
    round_: Optional[int] = ROUND,
) -> None:
    """Format values as a padded accounting column."""
    settings = _build_settings(
        symbol=symbol,
        format=format_,
        precision=precision,
        decimal=decimal,
        thousand=thousand,
        strip_zeros=strip_zeros,
        round=round_,
    )
    logger.debug("cli_column", count=len(values))
    _echo_lines(format_column(values, settings))


@app.command("fixed")
def fixed_command(
    value: float = typer.Argument(..., help="Number to round"),
    precision: Optional[int] = PRECISION,
    round_: Optional[int] = ROUND,
) -> None:
    """Round a value like a decimal and print it in fixed notation."""
    settings = _build_settings(precision=precision, round=round_)
    typer.echo(to_fixed(value, settings.precision, settings.round))


def main():
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
