"""
Layout Engine

Character-cell box layout shared by Flex and Grid containers.

Size hints along an axis:
- hint > 0: fixed size (plus the child's margin/padding/border)
- hint == 0: auto, the child's intrinsic preferred size
- hint < 0: fractional, |hint| shares of the space left over

Every axis is distributed by the same primitive, distribute(), so a
flex row and a grid's columns agree on how hints are interpreted.

Not implemented:
- wrapping
- min/max constraints
- justify (free space stays at the end of the main axis)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple, TYPE_CHECKING
from enum import Enum
import logging

if TYPE_CHECKING:
    from cellkit.ui.widget import Widget

logger = logging.getLogger(__name__)


# =============================================================================
# Enums
# =============================================================================

class Orientation(Enum):
    HORIZONTAL = "horizontal"   # Main axis left to right
    VERTICAL = "vertical"       # Main axis top to bottom


class Align(Enum):
    """Cross axis alignment."""
    START = "start"
    END = "end"
    CENTER = "center"
    STRETCH = "stretch"


# =============================================================================
# Rect
# =============================================================================

@dataclass
class Rect:
    """Rectangle with position and size, in cells."""
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def contains(self, px: int, py: int) -> bool:
        return self.x <= px < (self.x + self.w) and self.y <= py < (self.y + self.h)

    def inset(self, top: int, right: int, bottom: int, left: int) -> Rect:
        """Return new rect inset by the given amounts."""
        return Rect(
            x=self.x + left,
            y=self.y + top,
            w=max(0, self.w - left - right),
            h=max(0, self.h - top - bottom),
        )

    def intersect(self, other: Rect) -> Rect:
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        r = min(self.right, other.right)
        b = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, r - x), max(0, b - y))

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)

    def copy(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)


# =============================================================================
# Flex Layout
# =============================================================================

@dataclass
class FlexLayout:
    """
    Flex container configuration.

    gap is the number of separator cells between adjacent children.
    """
    orientation: Orientation = Orientation.VERTICAL
    align: Align = Align.STRETCH
    gap: int = 1

    def is_horizontal(self) -> bool:
        return self.orientation == Orientation.HORIZONTAL


# =============================================================================
# Tracks
# =============================================================================

@dataclass(frozen=True)
class Track:
    """
    One slot along an axis: a flex child, a grid column or a grid row.

    weight > 0 makes the track fractional and size is ignored;
    otherwise size is the track's exact outer extent.
    """
    size: int = 0
    weight: int = 0

    @property
    def fractional(self) -> bool:
        return self.weight > 0

    @staticmethod
    def from_hint(hint: int, intrinsic: int = 0, overhead: int = 0) -> Track:
        """Build a track from a size hint (fixed, auto or fractional)."""
        if hint > 0:
            return Track(size=hint + overhead)
        if hint == 0:
            return Track(size=intrinsic + overhead)
        return Track(weight=-hint)


def distribute(tracks: Sequence[Track], available: int, gap: int = 1) -> List[int]:
    """
    Assign a size to every track along one axis.

    Fixed/auto tracks keep their size. The space left after them and the
    gaps is shared between fractional tracks by weight (integer division);
    the last fractional track takes the rounding remainder so that sizes
    plus gaps add up to available exactly. On overflow the shares are
    clamped to zero and the tracks simply run past the end.
    """
    n = len(tracks)
    if n == 0:
        return []

    spacing = gap * (n - 1)
    fixed = sum(t.size for t in tracks if not t.fractional)
    weights = sum(t.weight for t in tracks if t.fractional)
    remaining = available - fixed - spacing

    last = -1
    for i, track in enumerate(tracks):
        if track.fractional:
            last = i

    sizes: List[int] = []
    rest = remaining
    for i, track in enumerate(tracks):
        if not track.fractional:
            sizes.append(track.size)
        elif i == last:
            sizes.append(max(0, rest))
        else:
            share = remaining * track.weight // weights
            rest -= share
            sizes.append(max(0, share))

    logger.debug(
        f"distribute: tracks={n}, available={available}, fixed={fixed}, "
        f"weights={weights}, remaining={remaining}, sizes={sizes}"
    )
    return sizes


def align(alignment: Align, start: int, end: int, size: int) -> Tuple[int, int]:
    """
    Position an extent of the given size within [start, end).

    Returns (position, size). STRETCH ignores size and fills the span.
    """
    space = end - start
    if alignment == Align.CENTER:
        if space >= size:
            return (start + (space - size) // 2, size)
        return (start + space // 2, size)
    if alignment == Align.END:
        return (end - size, size)
    if alignment == Align.STRETCH:
        return (start, space)
    return (start, size)


# =============================================================================
# Measurement
# =============================================================================

def preferred_outer(widget: Widget) -> Tuple[int, int]:
    """
    Outer size a widget asks for along both axes.

    Fixed style hints win over the intrinsic hint; fractional hints
    contribute nothing (they only take what is left over).
    """
    style = widget.style("")
    hint_w, hint_h = widget.hint()
    w = style.width if style.width > 0 else (hint_w if style.width == 0 else 0)
    h = style.height if style.height > 0 else (hint_h if style.height == 0 else 0)
    return (w + style.horizontal, h + style.vertical)
