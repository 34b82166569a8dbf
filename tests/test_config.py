import dataclasses

import pytest

from moneyfmt.config import (
    DEFAULT_SETTINGS,
    get_settings,
    load_settings,
    resolve_settings,
    set_settings,
)
from moneyfmt.formatting import format_money
from moneyfmt.models import Settings
from moneyfmt.numeral import to_fixed, unformat


def test_defaults():
    settings = get_settings()
    assert settings is DEFAULT_SETTINGS
    assert settings.symbol == "$"
    assert settings.format == "%s%v"
    assert settings.decimal == "."
    assert settings.thousand == ","
    assert settings.precision == 2
    assert settings.grouping == 3
    assert settings.strip_zeros is False
    assert settings.fallback == 0
    assert settings.round == 0


def test_settings_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SETTINGS.symbol = "€"


def test_merge_returns_new_settings():
    merged = DEFAULT_SETTINGS.merge({"symbol": "€"}, precision=0)
    assert merged.symbol == "€"
    assert merged.precision == 0
    assert DEFAULT_SETTINGS.symbol == "$"


def test_resolve_settings_later_wins():
    settings = resolve_settings({"symbol": "€", "precision": 1}, precision=3)
    assert settings.symbol == "€"
    assert settings.precision == 3


def test_set_settings_changes_library_defaults():
    set_settings(symbol="€", decimal=",", thousand=".")
    assert format_money(1234.5) == "€1.234,50"
    assert unformat("1,5") == 1.5

    set_settings()
    assert get_settings() is DEFAULT_SETTINGS
    assert format_money(1234.5) == "$1,234.50"


def test_set_settings_replaces_with_value():
    replacement = Settings(precision=0, round=1)
    assert set_settings(replacement) is replacement
    assert to_fixed(1.2) == "2"


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("MONEYFMT_SYMBOL", "£ ")
    monkeypatch.setenv("MONEYFMT_FORMAT", "%v %s")
    monkeypatch.setenv("MONEYFMT_PRECISION", "3")
    monkeypatch.setenv("MONEYFMT_THOUSAND", " ")
    monkeypatch.setenv("MONEYFMT_STRIP_ZEROS", "yes")
    monkeypatch.setenv("MONEYFMT_FALLBACK", "-1")
    monkeypatch.setenv("MONEYFMT_ROUND", "-1")

    settings = load_settings()

    assert settings.symbol == "£ "
    assert settings.format == "%v %s"
    assert settings.precision == 3
    assert settings.thousand == " "
    assert settings.strip_zeros is True
    assert settings.fallback == -1.0
    assert settings.round == -1
    assert settings.decimal == "."


def test_load_settings_ignores_blank_values(monkeypatch):
    monkeypatch.setenv("MONEYFMT_PRECISION", "  ")
    monkeypatch.setenv("MONEYFMT_DECIMAL", "")
    assert load_settings() == DEFAULT_SETTINGS


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("MONEYFMT_PRECISION", "two"),
        ("MONEYFMT_FALLBACK", "none"),
        ("MONEYFMT_STRIP_ZEROS", "maybe"),
    ],
)
def test_load_settings_rejects_invalid_values(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValueError, match=key):
        load_settings()


def test_merge_drops_unknown_options():
    merged = DEFAULT_SETTINGS.merge({"colour": "red"}, precision=1)
    assert merged == Settings(precision=1)
