import pytest

from i18nprovider import hooks


@pytest.fixture(autouse=True)
def _clean_hooks():
    """Isolate each test from handlers left behind by mounted providers."""
    hooks.clear()
    yield
    hooks.clear()
