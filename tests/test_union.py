import dataclasses

import pytest
from hypothesis import given, strategies as st

from pyparcore.Types import NULL, Nothing, Some
from pyparcore.Union import Union, union


@given(st.lists(st.integers()), st.integers(min_value=-5, max_value=30))
def test_get_is_one_based_and_total(values, index):
    u = union(*values)
    got = u.get(index)
    if 1 <= index <= len(values):
        assert got == Some(values[index - 1])
    else:
        assert isinstance(got, Nothing)


@pytest.mark.parametrize("falsy", [0, "", NULL, False, None, []])
def test_falsy_entries_are_present(falsy):
    u = union(falsy, 1)
    assert isinstance(u.get(1), Some)
    assert u.get(1).value == falsy


def test_unpack_and_destructure():
    u = union("abc", 4)
    assert u.unpack() == ("abc", 4)
    value, cursor = u
    assert value == "abc"
    assert cursor == 4
    assert len(u) == 2


def test_empty_union():
    u = union()
    assert len(u) == 0
    assert u.unpack() == ()
    assert isinstance(u.get(1), Nothing)


def test_union_equality_and_immutability():
    assert union("a", 2) == union("a", 2)
    assert union("a", 2) != union("a", 3)
    assert union("a", 2) == Union(("a", 2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        union("a", 2).values = ()


def test_repr():
    assert repr(union("a", 2)) == "Union('a', 2)"
