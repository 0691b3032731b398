"""
Cell Renderer

Paints a laid-out widget tree onto a Surface.

Each widget is painted with the style for its current state: the
background is filled inside the margin, the border frame is drawn from
the theme's glyph set, then kind-specific content (text, grid lines,
children). Dispatch goes through a table keyed by WidgetKind.

Nothing here raises for theme problems: unknown colors fall back to
the renderer defaults, unknown borders are skipped.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple
import logging

import numpy as np

from cellkit.ui.draw import Surface
from cellkit.ui.layout import Rect
from cellkit.ui.insets import ZERO
from cellkit.ui.style import Style, parse_color, color_to_array
from cellkit.ui.borders import BorderStyle, UP, RIGHT, DOWN, LEFT, junction
from cellkit.ui.theme import Theme
from cellkit.ui.widget import Widget, WidgetKind
from cellkit.ui.widgets.grid import Grid, GRID_H, GRID_V

logger = logging.getLogger(__name__)

DEFAULT_FOREGROUND = color_to_array((0.75, 0.75, 0.75, 1.0))


class Renderer:
    """
    Usage:
        surface = Surface(80, 24)
        Renderer(theme, surface).render(root)
        print(surface)
    """

    def __init__(self, theme: Theme, surface: Surface):
        self.surface = surface
        self._themes: List[Theme] = [theme]
        self._painters: Dict[WidgetKind, Callable[[Widget], None]] = {
            WidgetKind.WIDGET: self._paint_container,
            WidgetKind.STATIC: self._paint_static,
            WidgetKind.FLEX: self._paint_container,
            WidgetKind.BOX: self._paint_box,
            WidgetKind.GRID: self._paint_grid,
            WidgetKind.THEME_SWITCH: self._paint_theme_switch,
        }

    @property
    def theme(self) -> Theme:
        return self._themes[-1]

    def render(self, widget: Widget):
        """Paint widget and its subtree."""
        if not widget.visible:
            return
        self._painters[widget.kind](widget)

    # -------------------------------------------------------------------------
    # Colors
    # -------------------------------------------------------------------------

    def color(self, value: str, fallback: Optional[np.ndarray]) -> Optional[np.ndarray]:
        """Resolve a style color to an RGBA array, or fallback if unset/invalid."""
        if not value:
            return fallback
        literal = self.theme.color(value)
        try:
            parsed = parse_color(literal)
        except ValueError:
            logger.warning(f"Theme {self.theme.name!r}: cannot parse color {value!r} ({literal!r})")
            return fallback
        if parsed is None:
            return fallback
        return color_to_array(parsed)

    def _colors(self, style: Style) -> Tuple[np.ndarray, Optional[np.ndarray]]:
        return (
            self.color(style.foreground, DEFAULT_FOREGROUND),
            self.color(style.background, None),
        )

    # -------------------------------------------------------------------------
    # Common Chrome
    # -------------------------------------------------------------------------

    def _paint_chrome(self, widget: Widget) -> Style:
        """Background and border of any widget; returns the style used."""
        style = widget.current_style()
        fg, bg = self._colors(style)
        frame = style.border_rect(widget.bounds())
        if bg is not None:
            self.surface.fill(frame, " ", fg, bg)
        if style.bordered:
            border = self.theme.border(style.border)
            if border.empty:
                logger.debug(f"No glyphs for border {style.border!r} on {widget.selector()}")
            else:
                self._paint_frame(frame, border, fg)
        return style

    def _paint_frame(self, rect: Rect, border: BorderStyle, fg: np.ndarray):
        if rect.w < 2 or rect.h < 2:
            return
        s = self.surface
        s.put(rect.x, rect.y, border.top_left, fg)
        s.put(rect.right - 1, rect.y, border.top_right, fg)
        s.put(rect.right - 1, rect.bottom - 1, border.bottom_right, fg)
        s.put(rect.x, rect.bottom - 1, border.bottom_left, fg)
        s.hline(rect.x + 1, rect.y, rect.w - 2, border.top, fg)
        s.hline(rect.x + 1, rect.bottom - 1, rect.w - 2, border.bottom, fg)
        s.vline(rect.x, rect.y + 1, rect.h - 2, border.left, fg)
        s.vline(rect.right - 1, rect.y + 1, rect.h - 2, border.right, fg)

    def _paint_children(self, widget: Widget):
        for child in widget.children:
            self.render(child)

    # -------------------------------------------------------------------------
    # Painters
    # -------------------------------------------------------------------------

    def _paint_container(self, widget: Widget):
        self._paint_chrome(widget)
        self._paint_children(widget)

    def _paint_box(self, widget: Widget):
        style = self._paint_chrome(widget)
        title = getattr(widget, "title", "")
        if title and style.bordered:
            frame = style.border_rect(widget.bounds())
            room = frame.w - 4
            if room > 0:
                fg, _ = self._colors(style)
                self.surface.text(frame.x + 2, frame.y, f" {title} "[:room], fg)
        self._paint_children(widget)

    def _paint_theme_switch(self, widget: Widget):
        self._paint_chrome(widget)
        self._themes.append(widget.theme)
        try:
            self._paint_children(widget)
        finally:
            self._themes.pop()

    def _paint_static(self, widget: Widget):
        style = self._paint_chrome(widget)
        fg, _ = self._colors(style)
        c = widget.content()
        if c.empty:
            return
        ellipsis = self.theme.rune("ellipsis") if self.theme.flag("ellipsis") else ""
        self.surface.push_clip(c)
        try:
            for i, line in enumerate(widget.lines[:c.h]):
                if len(line) > c.w:
                    line = line[:c.w - 1] + ellipsis if ellipsis else line[:c.w]
                self.surface.text(c.x, c.y + i, line, fg)
        finally:
            self.surface.pop_clip()

    def _paint_grid(self, grid: Grid):
        style = self._paint_chrome(grid)
        if grid.lines:
            border = self.theme.border(style.border) if style.bordered else BorderStyle()
            if border.empty:
                logger.debug(f"Grid {grid.selector()} has no border glyphs, lines skipped")
            else:
                fg, _ = self._colors(style)
                self._paint_grid_lines(grid, style, border, fg)
        self._paint_children(grid)

    def _paint_grid_lines(self, grid: Grid, style: Style, border: BorderStyle, fg: np.ndarray):
        s = self.surface
        sep = grid.separators
        rows, cols = grid.row_count, grid.column_count
        xs = grid.column_offsets()
        ys = grid.row_offsets()
        # Separator cell positions between adjacent tracks
        line_x = [xs[i] + grid.widths[i] for i in range(cols - 1)]
        line_y = [ys[j] + grid.heights[j] for j in range(rows - 1)]

        for i, x in enumerate(line_x):
            for r in range(rows):
                if sep[r, i] & GRID_V:
                    s.vline(x, ys[r], grid.heights[r], border.inner_v, fg)
        for j, y in enumerate(line_y):
            for c in range(cols):
                if sep[j, c] & GRID_H:
                    s.hline(xs[c], y, grid.widths[c], border.inner_h, fg)

        for j, y in enumerate(line_y):
            for i, x in enumerate(line_x):
                mask = 0
                if sep[j, i] & GRID_V:
                    mask |= UP
                if sep[j, i + 1] & GRID_H:
                    mask |= RIGHT
                if sep[j + 1, i] & GRID_V:
                    mask |= DOWN
                if sep[j, i] & GRID_H:
                    mask |= LEFT
                glyph = junction(border, mask)
                if glyph:
                    s.put(x, y, glyph, fg)

        # Where inner lines meet the grid's own frame
        frame = style.border_rect(grid.bounds())
        padding = style.padding or ZERO
        for i, x in enumerate(line_x):
            if sep[0, i] & GRID_V:
                s.put(x, frame.y, border.top_t, fg)
                s.vline(x, frame.y + 1, padding.top, border.inner_v, fg)
            if sep[rows - 1, i] & GRID_V:
                s.put(x, frame.bottom - 1, border.bottom_t, fg)
                s.vline(x, frame.bottom - 1 - padding.bottom, padding.bottom, border.inner_v, fg)
        for j, y in enumerate(line_y):
            if sep[j, 0] & GRID_H:
                s.put(frame.x, y, border.left_t, fg)
                s.hline(frame.x + 1, y, padding.left, border.inner_h, fg)
            if sep[j, cols - 1] & GRID_H:
                s.put(frame.right - 1, y, border.right_t, fg)
                s.hline(frame.right - 1 - padding.right, y, padding.right, border.inner_h, fg)
