"""
Container Widgets

Basic layout containers:
- Flex: single-axis container (Row, Column shorthands)
- Box: one child filling the content area, usually bordered
- ThemeSwitch: a Box whose subtree is styled by another theme
"""

from __future__ import annotations
from typing import List, Optional, Tuple, TYPE_CHECKING
import logging

from cellkit.ui.widget import Widget, WidgetKind
from cellkit.ui.style import Style
from cellkit.ui.layout import (
    Align, FlexLayout, Orientation, Track, align, distribute, preferred_outer,
)

if TYPE_CHECKING:
    from cellkit.ui.theme import Theme

logger = logging.getLogger(__name__)


class Flex(Widget):
    """
    Flex container.

    Children are laid out along the main axis by their size hints
    (fixed, auto or fractional) with flex.gap cells between them, and
    aligned on the cross axis by flex.align.
    """

    kind = WidgetKind.FLEX
    type_name = "flex"

    def __init__(
        self,
        children: List[Widget] = None,
        orientation: Orientation = Orientation.VERTICAL,
        alignment: Align = Align.STRETCH,
        gap: int = 1,
        id: str = "",
        cls: str = "",
        style: Style = None,
    ):
        super().__init__(id=id, cls=cls, style=style)
        self.flex = FlexLayout(orientation=orientation, align=alignment, gap=gap)
        for child in children or []:
            self.add_child(child)

    def add(self, child: Widget) -> Flex:
        self.add_child(child)
        return self

    def hint(self) -> Tuple[int, int]:
        """Children's outer hints plus gaps along the main axis, max across."""
        main = 0
        cross = 0
        horizontal = self.flex.is_horizontal()
        for i, child in enumerate(self._children):
            w, h = preferred_outer(child)
            if i > 0:
                main += self.flex.gap
            if horizontal:
                main += w
                cross = max(cross, h)
            else:
                main += h
                cross = max(cross, w)
        return (main, cross) if horizontal else (cross, main)

    def layout(self):
        if not self._children:
            return

        c = self.content()
        horizontal = self.flex.is_horizontal()
        main_start, main_size = (c.x, c.w) if horizontal else (c.y, c.h)
        cross_start, cross_size = (c.y, c.h) if horizontal else (c.x, c.w)

        tracks: List[Track] = []
        for child in self._children:
            style = child.style("")
            hint_w, hint_h = child.hint()
            if horizontal:
                tracks.append(Track.from_hint(style.width, hint_w, style.horizontal))
            else:
                tracks.append(Track.from_hint(style.height, hint_h, style.vertical))

        sizes = distribute(tracks, main_size, self.flex.gap)
        logger.debug(
            f"Flex {self.selector()} {self.flex.orientation.value}: "
            f"children={len(self._children)}, content={main_size}, sizes={sizes}"
        )

        pos = main_start
        for child, size in zip(self._children, sizes):
            extent = self._cross_extent(child, cross_size)
            cross_pos, cross_len = align(self.flex.align, cross_start, cross_start + cross_size, extent)
            cross_len = max(0, cross_len)
            if horizontal:
                child.set_bounds(pos, cross_pos, size, cross_len)
            else:
                child.set_bounds(cross_pos, pos, cross_len, size)
            child.layout()
            pos += size + self.flex.gap

    def _cross_extent(self, child: Widget, available: int) -> int:
        """Outer cross-axis size a child asks for; fractional children take it all."""
        style = child.style("")
        hint_w, hint_h = child.hint()
        if self.flex.is_horizontal():
            hint, intrinsic, overhead = style.height, hint_h, style.vertical
        else:
            hint, intrinsic, overhead = style.width, hint_w, style.horizontal
        if hint < 0:
            return available
        return (hint if hint > 0 else intrinsic) + overhead


class Row(Flex):
    """Horizontal flex container."""

    def __init__(self, children: List[Widget] = None, **kwargs):
        super().__init__(children=children, orientation=Orientation.HORIZONTAL, **kwargs)


class Column(Flex):
    """Vertical flex container."""

    def __init__(self, children: List[Widget] = None, **kwargs):
        super().__init__(children=children, orientation=Orientation.VERTICAL, **kwargs)


class Box(Widget):
    """Single-child container; the child fills the content area."""

    kind = WidgetKind.BOX
    type_name = "box"

    def __init__(self, child: Widget = None, title: str = "", id: str = "", cls: str = "", style: Style = None):
        super().__init__(id=id, cls=cls, style=style)
        self.title = title
        if child is not None:
            self.add(child)

    @property
    def child(self) -> Optional[Widget]:
        return self._children[0] if self._children else None

    def add(self, child: Widget) -> Box:
        """Set the child, replacing any previous one."""
        self.clear_children()
        self.add_child(child)
        return self

    def hint(self) -> Tuple[int, int]:
        if self.child is None:
            return (0, 0)
        return preferred_outer(self.child)

    def layout(self):
        if self.child is None:
            return
        c = self.content()
        self.child.set_bounds(c.x, c.y, max(0, c.w), max(0, c.h))
        self.child.layout()


class ThemeSwitch(Box):
    """Box whose child subtree is themed and rendered with its own theme."""

    kind = WidgetKind.THEME_SWITCH
    type_name = "theme-switch"

    def __init__(self, theme: Theme, child: Widget = None, id: str = "", cls: str = ""):
        super().__init__(child=child, id=id, cls=cls)
        self.theme = theme
