import pytest

from moneyfmt.config import set_settings


@pytest.fixture(autouse=True)
def default_settings():
    set_settings()
    yield
    set_settings()
