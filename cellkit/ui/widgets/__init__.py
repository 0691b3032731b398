"""
Built-in Widgets

- Static, Label: text display
- Flex, Row, Column: single-axis containers
- Box: single bordered child
- ThemeSwitch: subtree with its own theme
- Grid: rows x columns with spanning cells
"""

from cellkit.ui.widgets.label import Static, Label
from cellkit.ui.widgets.container import Flex, Row, Column, Box, ThemeSwitch
from cellkit.ui.widgets.grid import Grid, Cell, GridError, GRID_H, GRID_V, GRID_B

__all__ = [
    "Static",
    "Label",
    "Flex",
    "Row",
    "Column",
    "Box",
    "ThemeSwitch",
    "Grid",
    "Cell",
    "GridError",
    "GRID_H",
    "GRID_V",
    "GRID_B",
]
