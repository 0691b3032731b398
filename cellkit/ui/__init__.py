"""
UI System

CSS-like theming and box-model layout for character-cell terminals.

Components:
- insets/style: spacing and style values with cascade merge
- selector: selector grammar and specificity order
- theme: style store with color variables, borders, flags, runes
- borders: border glyph sets and grid junction lookup
- layout: track distribution shared by Flex and Grid
- widget: base widget, style cache, box model
- widgets/: concrete widgets and containers
- draw/renderer: cell surface and painter
- root: theme / layout / render cycle

Example usage:

    from cellkit.ui import RootWidget, Column, Grid, Label, get_theme

    grid = Grid(2, 2)
    grid.set_columns(10, -1)
    grid.add(0, 0, Label("name"))
    grid.add(0, 1, Label("value"))
    grid.add(1, 0, Label("total"), column_span=2)

    root = RootWidget(Column([Label("Report", cls="header"), grid]),
                      theme=get_theme("tokyo-night"), width=40, height=10)
    surface = root.refresh()
    print(surface)
"""

from cellkit.ui.insets import Insets
from cellkit.ui.style import (
    Style, Color, NAMED_COLORS, hex_to_color, parse_color, color_rgba, color_to_array,
)
from cellkit.ui.selector import (
    Selector, SelectorError, tokenize_selector, parse_selector, cascade_keys,
)
from cellkit.ui.borders import (
    BorderStyle, UNICODE_BORDERS, JUNCTIONS, UP, RIGHT, DOWN, LEFT, junction,
)
from cellkit.ui.theme import Theme
from cellkit.ui.themes import (
    THEMES, default_theme, tokyo_night_theme, nord_theme, gruvbox_theme,
    midnight_neon_theme, get_theme,
)
from cellkit.ui.layout import (
    Rect, Orientation, Align, FlexLayout, Track, distribute, align, preferred_outer,
)
from cellkit.ui.widget import (
    Widget, WidgetKind, WidgetState, StyleCache, Styleable, Boundable, Hinted,
)
from cellkit.ui.widgets import (
    Static, Label, Flex, Row, Column, Box, ThemeSwitch,
    Grid, Cell, GridError, GRID_H, GRID_V, GRID_B,
)
from cellkit.ui.draw import Surface
from cellkit.ui.renderer import Renderer
from cellkit.ui.root import RootWidget

__all__ = [
    # Style
    "Insets", "Style", "Color", "NAMED_COLORS",
    "hex_to_color", "parse_color", "color_rgba", "color_to_array",
    # Selectors
    "Selector", "SelectorError", "tokenize_selector", "parse_selector", "cascade_keys",
    # Borders
    "BorderStyle", "UNICODE_BORDERS", "JUNCTIONS", "UP", "RIGHT", "DOWN", "LEFT", "junction",
    # Themes
    "Theme", "THEMES", "default_theme", "tokyo_night_theme", "nord_theme", "gruvbox_theme",
    "midnight_neon_theme", "get_theme",
    # Layout
    "Rect", "Orientation", "Align", "FlexLayout", "Track", "distribute", "align",
    "preferred_outer",
    # Widget
    "Widget", "WidgetKind", "WidgetState", "StyleCache", "Styleable", "Boundable", "Hinted",
    # Widgets
    "Static", "Label", "Flex", "Row", "Column", "Box", "ThemeSwitch",
    "Grid", "Cell", "GridError", "GRID_H", "GRID_V", "GRID_B",
    # Rendering
    "Surface", "Renderer", "RootWidget",
]
