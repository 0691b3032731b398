"""
Root Widget

Top of a widget tree: owns the theme and the screen size and runs the
theme / layout / render cycle. Call refresh() at startup, on resize and
after a theme switch.
"""

from __future__ import annotations
from typing import Optional
import logging

from cellkit.ui.draw import Surface
from cellkit.ui.renderer import Renderer
from cellkit.ui.theme import Theme
from cellkit.ui.themes import default_theme
from cellkit.ui.widget import Widget
from cellkit.ui.widgets.container import Box

logger = logging.getLogger(__name__)


class RootWidget(Box):
    """
    Special root widget that fills the screen.

    Example:

        root = RootWidget(Column([Label("hello"), Label("world")]), width=40, height=10)
        surface = root.refresh()
        print(surface)
    """

    type_name = "screen"

    def __init__(self, child: Widget = None, theme: Theme = None, width: int = 80, height: int = 24):
        super().__init__(child=child)
        self.theme = theme or default_theme()
        self._width = width
        self._height = height

    @property
    def screen_size(self):
        return (self._width, self._height)

    def set_theme(self, theme: Theme):
        """Swap the theme; takes effect on the next apply_theme()."""
        logger.debug(f"Theme switch: {self.theme.name!r} -> {theme.name!r}")
        self.theme = theme

    def set_screen_size(self, width: int, height: int):
        """Update screen size and re-layout."""
        self._width = width
        self._height = height
        self.do_layout()

    def apply_theme(self):
        self.theme.apply_tree(self)

    def do_layout(self):
        """Perform full layout pass."""
        self.set_bounds(0, 0, self._width, self._height)
        self.layout()

    def render(self, surface: Optional[Surface] = None) -> Surface:
        if surface is None:
            surface = Surface(self._width, self._height)
        Renderer(self.theme, surface).render(self)
        return surface

    def refresh(self) -> Surface:
        """Apply theme, lay out and render in one pass."""
        self.apply_theme()
        self.do_layout()
        return self.render()
