import pytest

from gamemath.config import configure


@pytest.fixture(autouse=True)
def _reset_config():
    configure(debug_checks=False)
    yield
    configure(debug_checks=False)


@pytest.fixture
def debug_checks():
    configure(debug_checks=True)
    yield
