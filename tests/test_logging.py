import logging

from moneyfmt.formatting import format_column, format_money
from moneyfmt.numeral import unformat


def test_library_calls_write_nothing(capsys):
    assert unformat("abc") == 0
    assert format_money(1, format="%s") == "$"
    assert format_column(["n/a", 1]) == ["$0.00", "$1.00"]

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_fallback_event_reaches_stdlib_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="moneyfmt.numeral")
    unformat("abc")
    assert "unformat_fallback" in caplog.text
