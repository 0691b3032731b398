"""
Style System

CSS-like style values for character-cell widgets.

Design principles:
- Immutable after creation (use cascade() or .with_*() for variants)
- "Unset" is the empty string / None / zero, which cascade() skips
- Insets are replaced wholesale, never merged per side
- All measurements in character cells

Box model (from inside out):
  1. Content area
  2. Padding (filled with background)
  3. Border (one cell on each side when present)
  4. Margin (transparent)
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple
import re

import numpy as np

from cellkit.ui.insets import Insets, ZERO
from cellkit.ui.layout import Rect


# =============================================================================
# Color
# =============================================================================

# Parsed color: RGBA tuple of floats (0.0-1.0), or None for the terminal default
Color = Optional[Tuple[float, ...]]

NAMED_COLORS: Dict[str, str] = {
    "black": "#000000",
    "maroon": "#800000",
    "green": "#008000",
    "olive": "#808000",
    "navy": "#000080",
    "purple": "#800080",
    "teal": "#008080",
    "silver": "#c0c0c0",
    "gray": "#808080",
    "grey": "#808080",
    "red": "#ff0000",
    "lime": "#00ff00",
    "yellow": "#ffff00",
    "blue": "#0000ff",
    "fuchsia": "#ff00ff",
    "magenta": "#ff00ff",
    "aqua": "#00ffff",
    "cyan": "#00ffff",
    "white": "#ffffff",
    "orange": "#ffa500",
}

_RGB_RE = re.compile(r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$")


def color_rgba(c: Color) -> Tuple[float, float, float, float]:
    """Normalize color to RGBA tuple."""
    if c is None:
        return (0.0, 0.0, 0.0, 0.0)
    if len(c) == 3:
        return (c[0], c[1], c[2], 1.0)
    return (c[0], c[1], c[2], c[3])


def color_to_array(c: Color) -> np.ndarray:
    """Convert color to numpy array."""
    return np.array(color_rgba(c), dtype=np.float32)


def hex_to_color(hex_str: str) -> Color:
    """Convert hex string to color. Supports #RGB, #RGBA, #RRGGBB, #RRGGBBAA."""
    h = hex_str.lstrip('#')
    try:
        if len(h) == 3:
            r, g, b = int(h[0], 16) / 15, int(h[1], 16) / 15, int(h[2], 16) / 15
            return (r, g, b, 1.0)
        elif len(h) == 4:
            r, g, b, a = int(h[0], 16) / 15, int(h[1], 16) / 15, int(h[2], 16) / 15, int(h[3], 16) / 15
            return (r, g, b, a)
        elif len(h) == 6:
            r, g, b = int(h[0:2], 16) / 255, int(h[2:4], 16) / 255, int(h[4:6], 16) / 255
            return (r, g, b, 1.0)
        elif len(h) == 8:
            r, g, b, a = int(h[0:2], 16) / 255, int(h[2:4], 16) / 255, int(h[4:6], 16) / 255, int(h[6:8], 16) / 255
            return (r, g, b, a)
    except ValueError:
        pass
    raise ValueError(f"Invalid hex color: {hex_str}")


def parse_color(spec: str) -> Color:
    """
    Parse a literal color spec.

    Accepts "#hex", "rgb(r, g, b)", a named color, or "" / "default"
    for the terminal default (None). Color variables must be resolved
    through Theme.color() first; an unresolved "$name" is an error here.
    """
    value = spec.strip().lower()
    if value in ("", "default"):
        return None
    if value.startswith("#"):
        return hex_to_color(value)
    match = _RGB_RE.match(value)
    if match:
        channels = [int(g) for g in match.groups()]
        if any(ch > 255 for ch in channels):
            raise ValueError(f"Invalid rgb color: {spec}")
        return (channels[0] / 255, channels[1] / 255, channels[2] / 255, 1.0)
    if value in NAMED_COLORS:
        return hex_to_color(NAMED_COLORS[value])
    raise ValueError(f"Invalid color: {spec}")


# =============================================================================
# Style
# =============================================================================

NO_BORDER = "none"


@dataclass(frozen=True)
class Style:
    """
    Complete style for a widget or widget part.

    Immutable - use cascade() or the .with_*() methods for variants.
    Width/height are layout hints: > 0 fixed, 0 auto, < 0 fractional weight.
    """

    # --- Visual ---
    background: str = ""
    foreground: str = ""
    font: str = ""
    border: str = ""
    cursor: str = ""
    render: str = ""

    # --- Box Model ---
    margin: Optional[Insets] = None
    padding: Optional[Insets] = None
    width: int = 0
    height: int = 0

    # -------------------------------------------------------------------------
    # Cascade
    # -------------------------------------------------------------------------

    def cascade(self, other: Optional[Style]) -> Style:
        """
        Overlay the declared (non-default) fields of other onto this style.

        Returns a new Style; neither input is modified.
        """
        if other is None:
            return self
        updates = {}
        for name in ("background", "foreground", "font", "border", "cursor", "render"):
            value = getattr(other, name)
            if value != "":
                updates[name] = value
        if other.margin is not None:
            updates["margin"] = other.margin
        if other.padding is not None:
            updates["padding"] = other.padding
        if other.width != 0:
            updates["width"] = other.width
        if other.height != 0:
            updates["height"] = other.height
        return replace(self, **updates) if updates else self

    # -------------------------------------------------------------------------
    # Box Model
    # -------------------------------------------------------------------------

    @property
    def bordered(self) -> bool:
        return self.border not in ("", NO_BORDER)

    @property
    def horizontal(self) -> int:
        """Cells consumed left and right of the content (margin, padding, border)."""
        margin = self.margin or ZERO
        padding = self.padding or ZERO
        return margin.horizontal + padding.horizontal + (2 if self.bordered else 0)

    @property
    def vertical(self) -> int:
        """Cells consumed above and below the content (margin, padding, border)."""
        margin = self.margin or ZERO
        padding = self.padding or ZERO
        return margin.vertical + padding.vertical + (2 if self.bordered else 0)

    def outer_size(self, width: int, height: int) -> Tuple[int, int]:
        """Outer bounds size for a given content size."""
        return (width + self.horizontal, height + self.vertical)

    def inner_size(self, width: int, height: int) -> Tuple[int, int]:
        """Content size for a given outer bounds size."""
        return (width - self.horizontal, height - self.vertical)

    def content_rect(self, bounds: Rect) -> Rect:
        """Content area inside the given outer bounds."""
        margin = self.margin or ZERO
        padding = self.padding or ZERO
        edge = 1 if self.bordered else 0
        w, h = self.inner_size(bounds.w, bounds.h)
        return Rect(
            x=bounds.x + margin.left + padding.left + edge,
            y=bounds.y + margin.top + padding.top + edge,
            w=w,
            h=h,
        )

    def border_rect(self, bounds: Rect) -> Rect:
        """Area inside the margin: where the border frame (if any) is drawn."""
        margin = self.margin or ZERO
        return bounds.inset(margin.top, margin.right, margin.bottom, margin.left)

    # -------------------------------------------------------------------------
    # Builder Methods
    # -------------------------------------------------------------------------

    def with_colors(self, foreground: str, background: str) -> Style:
        """Return new Style with updated colors."""
        return replace(self, foreground=foreground, background=background)

    def with_foreground(self, foreground: str) -> Style:
        return replace(self, foreground=foreground)

    def with_background(self, background: str) -> Style:
        return replace(self, background=background)

    def with_border(self, border: str) -> Style:
        return replace(self, border=border)

    def with_cursor(self, cursor: str) -> Style:
        return replace(self, cursor=cursor)

    def with_render(self, render: str) -> Style:
        return replace(self, render=render)

    def with_margin(self, *values: int) -> Style:
        """Return new Style with margin from CSS shorthand values."""
        return replace(self, margin=Insets.of(*values))

    def with_padding(self, *values: int) -> Style:
        """Return new Style with padding from CSS shorthand values."""
        return replace(self, padding=Insets.of(*values))

    def with_size(self, width: int, height: int) -> Style:
        """Return new Style with updated size hints."""
        return replace(self, width=width, height=height)

    # -------------------------------------------------------------------------
    # Debug
    # -------------------------------------------------------------------------

    def info(self) -> str:
        margin = self.margin.info() if self.margin else "-"
        padding = self.padding.info() if self.padding else "-"
        return (
            f"Background: {self.background}\n"
            f"Foreground: {self.foreground}\n"
            f"Border    : {self.border}\n"
            f"Cursor    : {self.cursor}\n"
            f"Margin    : {margin}\n"
            f"Padding   : {padding}\n"
            f"Pref. Size: {self.width} x {self.height}\n"
            f"Render    : {self.render}"
        )
