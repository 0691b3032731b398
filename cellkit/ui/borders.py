"""
Border Glyphs

BorderStyle is a complete line-drawing character set for one border
family (thin, double, round, ...). Grid intersections pick their glyph
from a 4-bit neighbor mask through the JUNCTIONS table.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Dict, Optional, Tuple


# =============================================================================
# Border Style
# =============================================================================

@dataclass(frozen=True)
class BorderStyle:
    """
    Nineteen glyphs of one border family.

    The all-empty instance is what a theme returns for an unknown name;
    renderers skip drawing it.
    """

    # Outer edges
    top: str = ""
    right: str = ""
    bottom: str = ""
    left: str = ""

    # Corners
    top_left: str = ""
    top_right: str = ""
    bottom_right: str = ""
    bottom_left: str = ""

    # Outer T-connectors (an inner line meeting the frame)
    top_t: str = ""
    right_t: str = ""
    bottom_t: str = ""
    left_t: str = ""

    # Inner lines
    inner_h: str = ""
    inner_v: str = ""
    inner_x: str = ""

    # Inner T-connectors
    inner_top_t: str = ""
    inner_right_t: str = ""
    inner_bottom_t: str = ""
    inner_left_t: str = ""

    @property
    def empty(self) -> bool:
        return all(getattr(self, f.name) == "" for f in fields(self))

    def validate(self, name: str = "") -> None:
        """Raise ValueError unless every glyph is exactly one character."""
        for f in fields(self):
            glyph = getattr(self, f.name)
            if len(glyph) != 1:
                raise ValueError(f"Border {name!r}: glyph {f.name} must be one character, got {glyph!r}")


def _family(
    top: str, right: str, bottom: str, left: str,
    corners: str, outer_t: str, inner: str, inner_t: str,
) -> BorderStyle:
    """
    Compact constructor: corners/outer_t/inner_t are read clockwise from
    the top-left (or top) position, inner is "h v x".
    """
    return BorderStyle(
        top=top, right=right, bottom=bottom, left=left,
        top_left=corners[0], top_right=corners[1],
        bottom_right=corners[2], bottom_left=corners[3],
        top_t=outer_t[0], right_t=outer_t[1], bottom_t=outer_t[2], left_t=outer_t[3],
        inner_h=inner[0], inner_v=inner[1], inner_x=inner[2],
        inner_top_t=inner_t[0], inner_right_t=inner_t[1],
        inner_bottom_t=inner_t[2], inner_left_t=inner_t[3],
    )


UNICODE_BORDERS: Dict[str, BorderStyle] = {
    "thin": _family("─", "│", "─", "│", "┌┐┘└", "┬┤┴├", "─│┼", "┬┤┴├"),
    "double": _family("═", "║", "═", "║", "╔╗╝╚", "╦╣╩╠", "═║╬", "╦╣╩╠"),
    "round": _family("─", "│", "─", "│", "╭╮╯╰", "┬┤┴├", "─│┼", "┬┤┴├"),
    "thick": _family("━", "┃", "━", "┃", "┏┓┛┗", "┳┫┻┣", "━┃╋", "┳┫┻┣"),
    "thick-thin": _family("━", "┃", "━", "┃", "┏┓┛┗", "┯┨┷┠", "─│┼", "┬┤┴├"),
    "thick-slashed": _family("━", "┃", "━", "┃", "┏┓┛┗", "┯┨┷┠", "┈┊┼", "┬┤┴├"),
    # Block-element underline/overline frame without side lines or inner grid
    "lines": _family("▔", " ", "▁", " ", "▔▔▁▁", "▔ ▁ ", "   ", "    "),
}


# =============================================================================
# Junctions
# =============================================================================

# Neighbor bits: which of the four segments meet at an intersection
UP = 1
RIGHT = 2
DOWN = 4
LEFT = 8

# Mask -> BorderStyle field; None draws nothing. Defined for all 16 masks.
JUNCTIONS: Tuple[Optional[str], ...] = (
    None,               # 0
    "inner_v",          # 1  up
    "inner_h",          # 2  right
    "bottom_left",      # 3  up + right
    "inner_v",          # 4  down
    "inner_v",          # 5  up + down
    "top_left",         # 6  right + down
    "inner_left_t",     # 7  up + right + down
    "inner_h",          # 8  left
    "bottom_right",     # 9  up + left
    "inner_h",          # 10 right + left
    "inner_bottom_t",   # 11 up + right + left
    "top_right",        # 12 down + left
    "inner_right_t",    # 13 up + down + left
    "inner_top_t",      # 14 right + down + left
    "inner_x",          # 15 all four
)


def junction(border: BorderStyle, mask: int) -> str:
    """
    Glyph for an intersection whose neighbor segments are given by mask.

    Returns "" when nothing is to be drawn (mask 0 or an empty border).
    """
    if not 0 <= mask < len(JUNCTIONS):
        raise ValueError(f"Junction mask out of range: {mask}")
    name = JUNCTIONS[mask]
    if name is None:
        return ""
    return getattr(border, name)
