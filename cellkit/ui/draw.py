"""
Draw Surface

Character-cell canvas the renderer paints into.

Design:
- One glyph per cell (numpy "<U1" array, row-major: [y, x])
- Foreground/background as float32 RGBA planes ([y, x, 4])
- Clip stack; every primitive is clipped to the current clip rect
- A color argument of None leaves that plane untouched

Primitives:
- put: single cell
- fill: rectangle
- hline / vline: repeated glyph
- text: string left to right
"""

from __future__ import annotations
from typing import List, Optional

import numpy as np

from cellkit.ui.layout import Rect


class Surface:
    """Fixed-size grid of cells."""

    def __init__(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        self.chars = np.full((self.height, self.width), " ", dtype="<U1")
        self.fg = np.zeros((self.height, self.width, 4), dtype=np.float32)
        self.bg = np.zeros((self.height, self.width, 4), dtype=np.float32)

        self._clip = Rect(0, 0, self.width, self.height)
        self._clip_stack: List[Rect] = []

    # -------------------------------------------------------------------------
    # Clipping
    # -------------------------------------------------------------------------

    def push_clip(self, rect: Rect):
        """Restrict drawing to rect (intersected with the current clip)."""
        self._clip_stack.append(self._clip)
        self._clip = self._clip.intersect(rect)

    def pop_clip(self):
        if self._clip_stack:
            self._clip = self._clip_stack.pop()

    @property
    def clip(self) -> Rect:
        return self._clip.copy()

    # -------------------------------------------------------------------------
    # Drawing Primitives
    # -------------------------------------------------------------------------

    def fill(self, rect: Rect, char: str = " ", fg: Optional[np.ndarray] = None, bg: Optional[np.ndarray] = None):
        """Fill a rectangle."""
        area = rect.intersect(self._clip)
        if area.empty:
            return
        rows = slice(area.y, area.bottom)
        cols = slice(area.x, area.right)
        if char:
            self.chars[rows, cols] = char
        if fg is not None:
            self.fg[rows, cols] = fg
        if bg is not None:
            self.bg[rows, cols] = bg

    def put(self, x: int, y: int, char: str, fg: Optional[np.ndarray] = None, bg: Optional[np.ndarray] = None):
        """Set a single cell."""
        self.fill(Rect(x, y, 1, 1), char, fg, bg)

    def hline(self, x: int, y: int, length: int, char: str, fg: Optional[np.ndarray] = None, bg: Optional[np.ndarray] = None):
        """Repeat char to the right starting at (x, y)."""
        if length > 0:
            self.fill(Rect(x, y, length, 1), char, fg, bg)

    def vline(self, x: int, y: int, length: int, char: str, fg: Optional[np.ndarray] = None, bg: Optional[np.ndarray] = None):
        """Repeat char downwards starting at (x, y)."""
        if length > 0:
            self.fill(Rect(x, y, 1, length), char, fg, bg)

    def text(self, x: int, y: int, text: str, fg: Optional[np.ndarray] = None, bg: Optional[np.ndarray] = None):
        """Write text left to right, clipped."""
        for i, char in enumerate(text):
            self.put(x + i, y, char, fg, bg)

    # -------------------------------------------------------------------------
    # Readback
    # -------------------------------------------------------------------------

    def at(self, x: int, y: int) -> str:
        return str(self.chars[y, x])

    def row(self, y: int) -> str:
        return "".join(self.chars[y])

    def lines(self) -> List[str]:
        return [self.row(y) for y in range(self.height)]

    def clear(self):
        self.chars[:, :] = " "
        self.fg[:, :] = 0.0
        self.bg[:, :] = 0.0
        self._clip = Rect(0, 0, self.width, self.height)
        self._clip_stack.clear()

    def __str__(self) -> str:
        return "\n".join(self.lines())
