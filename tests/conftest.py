# tests/conftest.py
import pytest

from pyparcore.Stream import Stream
from pyparcore.Types import Err, Ok


def assert_ok(result, value, cursor):
    """Assert a parse succeeded with the given value and next cursor."""
    assert isinstance(result, Ok), f"Expected Ok, got {result!r}"
    got_value, got_cursor = result.value.unpack()
    assert got_value == value, f"Value mismatch: {got_value!r} != {value!r}"
    assert got_cursor == cursor, f"Cursor mismatch: {got_cursor} != {cursor}"


def assert_err(result, *fragments):
    """Assert a parse failed and its message mentions every fragment."""
    assert isinstance(result, Err), f"Expected Err, got {result!r}"
    for fragment in fragments:
        assert fragment in result.error, f"{fragment!r} not in {result.error!r}"


@pytest.fixture
def make_stream():
    def _make(text):
        return Stream(text)

    return _make
