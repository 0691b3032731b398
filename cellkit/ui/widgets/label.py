"""
Static Widgets

Plain text display. Multi-line text is split on newlines; no wrapping.
"""

from __future__ import annotations
from typing import List, Tuple

from cellkit.ui.widget import Widget, WidgetKind
from cellkit.ui.style import Style


class Static(Widget):
    """
    Static text.

    Intrinsic size is the longest line by the number of lines.
    """

    kind = WidgetKind.STATIC
    type_name = "static"

    def __init__(self, text: str = "", id: str = "", cls: str = "", style: Style = None):
        super().__init__(id=id, cls=cls, style=style)
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str):
        self._text = value

    @property
    def lines(self) -> List[str]:
        return self._text.split("\n") if self._text else []

    def hint(self) -> Tuple[int, int]:
        lines = self.lines
        if not lines:
            return (0, 0)
        return (max(len(line) for line in lines), len(lines))


class Label(Static):
    """Single text label, styled as "label"."""

    type_name = "label"
