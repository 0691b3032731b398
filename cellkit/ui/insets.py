"""
Insets

Four-sided spacing (margin, padding) measured in character cells.
Follows CSS order: top, right, bottom, left.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Insets:
    """
    Insets for padding/margin (top, right, bottom, left).

    Immutable - styles share Insets values freely since nothing can
    change them after construction.
    """
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @staticmethod
    def of(*values: int) -> Insets:
        """
        Build insets from CSS shorthand.

        - 0 values: all zero
        - 1 value: all sides
        - 2 values: vertical, horizontal
        - 3 values: top, horizontal, bottom
        - 4+ values: top, right, bottom, left (extra values ignored)
        """
        n = len(values)
        if n == 0:
            return Insets()
        if n == 1:
            return Insets.all(values[0])
        if n == 2:
            return Insets.symmetric(values[0], values[1])
        if n == 3:
            return Insets(values[0], values[1], values[2], values[1])
        return Insets(values[0], values[1], values[2], values[3])

    @staticmethod
    def all(value: int) -> Insets:
        """Same value on all sides."""
        return Insets(value, value, value, value)

    @staticmethod
    def symmetric(vertical: int = 0, horizontal: int = 0) -> Insets:
        """Symmetric vertical and horizontal."""
        return Insets(vertical, horizontal, vertical, horizontal)

    @staticmethod
    def only(top: int = 0, right: int = 0, bottom: int = 0, left: int = 0) -> Insets:
        """Explicit sides."""
        return Insets(top, right, bottom, left)

    @property
    def horizontal(self) -> int:
        """Total horizontal inset."""
        return self.left + self.right

    @property
    def vertical(self) -> int:
        """Total vertical inset."""
        return self.top + self.bottom

    @property
    def total(self) -> Tuple[int, int]:
        return (self.horizontal, self.vertical)

    def info(self) -> str:
        return f"({self.top} {self.right} {self.bottom} {self.left})"


ZERO = Insets()
