"""
Selectors

Grammar (every component optional, order fixed):

    type ["/" part1] ["." class] ["#" id] ["/" part2] [":" state]

Tokens are ASCII letters, digits, "_" and "-". A "/" seen before any
"." or "#" introduces part1; any later "/" introduces part2.

The tokenizer is strict and raises SelectorError with the offending
position. parse_selector() is total: malformed input yields the empty
selector, which resolves to the theme's universal style.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List
import string

__all__ = [
    "Selector",
    "SelectorError",
    "tokenize_selector",
    "parse_selector",
    "cascade_keys",
]

_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "_-")

# Component slots in grammar order: (delimiter, field name)
_SLOTS = (
    ("", "type"),
    ("/", "part1"),
    (".", "cls"),
    ("#", "id"),
    ("/", "part2"),
    (":", "state"),
)


class SelectorError(ValueError):
    """Raised by the strict tokenizer for text outside the selector grammar."""

    def __init__(self, selector: str, position: int, reason: str):
        self.selector = selector
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} at position {position} in selector {selector!r}")


@dataclass(frozen=True)
class Selector:
    """The six components of a selector; empty string means absent."""
    type: str = ""
    part1: str = ""
    cls: str = ""
    id: str = ""
    part2: str = ""
    state: str = ""

    @property
    def part(self) -> str:
        """The widget part this selector styles; part1 wins over part2."""
        return self.part1 or self.part2

    @property
    def empty(self) -> bool:
        return not (self.type or self.part1 or self.cls or self.id or self.part2 or self.state)

    def __str__(self) -> str:
        text = self.type
        if self.part1:
            text += "/" + self.part1
        if self.cls:
            text += "." + self.cls
        if self.id:
            text += "#" + self.id
        if self.part2:
            text += "/" + self.part2
        if self.state:
            text += ":" + self.state
        return text


def _next_slot(delimiter: str, current: int) -> int:
    """Index of the first slot after current introduced by delimiter, or -1."""
    for index in range(current + 1, len(_SLOTS)):
        if _SLOTS[index][0] == delimiter:
            return index
    return -1


def tokenize_selector(text: str) -> Selector:
    """Split a selector into its components, raising SelectorError if malformed."""
    values = {name: "" for _, name in _SLOTS}
    slot = 0
    pos = 0
    n = len(text)

    while True:
        start = pos
        while pos < n and text[pos] in _TOKEN_CHARS:
            pos += 1
        values[_SLOTS[slot][1]] = text[start:pos]
        if pos == n:
            break

        char = text[pos]
        if char not in "/.#:":
            raise SelectorError(text, pos, f"invalid character {char!r}")
        following = _next_slot(char, slot)
        if following < 0:
            raise SelectorError(text, pos, f"unexpected {char!r}")
        slot = following
        pos += 1

    return Selector(**values)


def parse_selector(text: str) -> Selector:
    """Total parse: any string yields a Selector, malformed ones the empty one."""
    try:
        return tokenize_selector(text)
    except SelectorError:
        return Selector()


def cascade_keys(selector: Selector) -> List[str]:
    """
    Theme keys consulted for a selector, least specific first.

    Keys for components the selector lacks are left out. The id family
    comes last so ids outrank types, classes and states.
    """
    t, p1, c, i, p2, s = (
        selector.type, selector.part1, selector.cls,
        selector.id, selector.part2, selector.state,
    )
    keys = [""]
    if t:
        keys.append(t)
    if t and p1:
        keys.append(f"{t}/{p1}")
    if c:
        keys.append(f".{c}")
    if t and c:
        keys.append(f"{t}.{c}")
    if t and p1 and c:
        keys.append(f"{t}/{p1}.{c}")
    if s:
        keys.append(f":{s}")
    if t and s:
        keys.append(f"{t}:{s}")
    if t and c and s:
        keys.append(f"{t}.{c}:{s}")
    if t and p1 and s:
        keys.append(f"{t}/{p1}:{s}")
    if t and p1 and c and s:
        keys.append(f"{t}/{p1}.{c}:{s}")
    if i:
        keys.append(f"#{i}")
    if i and s:
        keys.append(f"#{i}:{s}")
    if i and p2:
        keys.append(f"#{i}/{p2}")
    if i and p2 and s:
        keys.append(f"#{i}/{p2}:{s}")
    return keys
