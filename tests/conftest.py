import pytest

from urlparams import parse


@pytest.fixture
def multi_value_url():
    """Fixture providing a URL whose parameter 'a' holds two values."""
    return parse("?a=1&b=2&a=3")
