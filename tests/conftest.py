from unittest.mock import Mock
from urllib.parse import quote, unquote

import pytest

from route_template.types import Options


@pytest.fixture
def options():
    return Options()


@pytest.fixture
def url_options():
    """Options percent-encoding values on compile and decoding them on match."""
    return Options(encode=lambda value: quote(value, safe=""), decode=unquote)


@pytest.fixture
def decode():
    """Mock decoder upper-casing values."""
    return Mock(side_effect=str.upper)
