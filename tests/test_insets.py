import dataclasses

import pytest
from cellkit.ui.insets import Insets, ZERO


def test_shorthand():
    assert Insets.of() == Insets(0, 0, 0, 0)
    assert Insets.of(5) == Insets(5, 5, 5, 5)
    assert Insets.of(10, 20) == Insets(top=10, right=20, bottom=10, left=20)
    assert Insets.of(1, 2, 3) == Insets(1, 2, 3, 2)
    assert Insets.of(1, 2, 3, 4) == Insets(1, 2, 3, 4)

def test_extra_values_ignored():
    assert Insets.of(1, 2, 3, 4, 5, 6) == Insets(1, 2, 3, 4)

def test_totals():
    insets = Insets(1, 2, 3, 4)
    assert insets.horizontal == 6   # left + right
    assert insets.vertical == 4     # top + bottom
    assert insets.total == (6, 4)
    assert ZERO.total == (0, 0)

def test_helpers():
    assert Insets.all(2) == Insets.of(2)
    assert Insets.symmetric(1, 3) == Insets(1, 3, 1, 3)
    assert Insets.only(left=7) == Insets(0, 0, 0, 7)

def test_immutable():
    insets = Insets.of(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        insets.top = 5
