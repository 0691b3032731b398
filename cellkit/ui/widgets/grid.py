"""
Grid Container

Fixed number of rows and columns, each sized by a hint with the same
rules as flex children (fixed, auto, fractional). Cells may span rows
and columns. One separator cell is reserved between adjacent tracks;
whether a separator segment is drawn is recorded in the separator
matrix:

    separators[row, column] & GRID_H  line below the cell is drawn
    separators[row, column] & GRID_V  line right of the cell is drawn

Segments inside a spanning cell are cleared. Entries of the last row
(GRID_H) and last column (GRID_V) refer to the outer edge and are kept
for the renderer's outer T-connectors.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple
import logging

import numpy as np

from cellkit.ui.widget import Widget, WidgetKind
from cellkit.ui.style import Style
from cellkit.ui.layout import Track, distribute, preferred_outer

logger = logging.getLogger(__name__)

GRID_H = 1
GRID_V = 2
GRID_B = GRID_H | GRID_V


class GridError(ValueError):
    """Invalid grid construction: bad spans, out-of-range or overlapping cells."""


@dataclass
class Cell:
    """A widget placed in the grid with its spans."""
    row: int
    column: int
    row_span: int
    column_span: int
    content: Widget


class Grid(Widget):
    """
    Grid container.

    Tracks default to fractional weight 1. Placement errors raise
    GridError immediately; they are never clamped.
    """

    kind = WidgetKind.GRID
    type_name = "grid"

    def __init__(
        self,
        rows: int,
        columns: int,
        lines: bool = True,
        id: str = "",
        cls: str = "",
        style: Style = None,
    ):
        if rows < 1 or columns < 1:
            raise GridError(f"Grid needs at least one row and column, got {rows}x{columns}")
        super().__init__(id=id, cls=cls, style=style)
        self.lines = lines
        self._rows: List[int] = [-1] * rows
        self._columns: List[int] = [-1] * columns
        self.widths: List[int] = [0] * columns
        self.heights: List[int] = [0] * rows
        self._cells: List[Cell] = []
        self._occupied = np.zeros((rows, columns), dtype=bool)
        self._separators = np.full((rows, columns), GRID_B, dtype=np.uint8)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def row_hints(self) -> Tuple[int, ...]:
        return tuple(self._rows)

    @property
    def column_hints(self) -> Tuple[int, ...]:
        return tuple(self._columns)

    def set_columns(self, *hints: int):
        """Set every column's size hint; the count cannot change."""
        if len(hints) != len(self._columns):
            raise GridError(f"Grid has {len(self._columns)} columns, got {len(hints)} hints")
        self._columns = list(hints)

    def set_rows(self, *hints: int):
        """Set every row's size hint; the count cannot change."""
        if len(hints) != len(self._rows):
            raise GridError(f"Grid has {len(self._rows)} rows, got {len(hints)} hints")
        self._rows = list(hints)

    # -------------------------------------------------------------------------
    # Cells
    # -------------------------------------------------------------------------

    @property
    def children(self) -> List[Widget]:
        return [cell.content for cell in self._cells]

    @property
    def cells(self) -> List[Cell]:
        return list(self._cells)

    @property
    def separators(self) -> np.ndarray:
        """Separator bitmask per cell position (read-only view)."""
        view = self._separators.view()
        view.flags.writeable = False
        return view

    def add(self, row: int, column: int, content: Widget, row_span: int = 1, column_span: int = 1) -> Grid:
        """Place content at (row, column) spanning row_span x column_span tracks."""
        # Moving within this grid frees the old footprint before any checks
        if content.parent is self:
            self.remove_child(content)
        if row_span < 1 or column_span < 1:
            raise GridError(f"Spans must be >= 1, got {row_span}x{column_span}")
        if row < 0 or column < 0 or row + row_span > self.row_count or column + column_span > self.column_count:
            raise GridError(
                f"Cell ({row}, {column}) spanning {row_span}x{column_span} "
                f"exceeds {self.row_count}x{self.column_count} grid"
            )
        if self._occupied[row:row + row_span, column:column + column_span].any():
            raise GridError(f"Cell ({row}, {column}) spanning {row_span}x{column_span} overlaps another cell")

        if content.parent is not None:
            content.parent.remove_child(content)
        content.parent = self

        self._occupied[row:row + row_span, column:column + column_span] = True
        # Lines inside the span disappear: no horizontal line between
        # its rows, no vertical line between its columns.
        self._separators[row:row + row_span - 1, column:column + column_span] &= np.uint8(GRID_V)
        self._separators[row:row + row_span, column:column + column_span - 1] &= np.uint8(GRID_H)

        self._cells.append(Cell(row, column, row_span, column_span, content))
        return self

    def add_child(self, child: Widget):
        """Grid children need a position; use add(row, column, child)."""
        raise GridError(f"Grid {self.selector()} places children with add(row, column, child)")

    def remove_child(self, child: Widget):
        for cell in self._cells:
            if cell.content is child:
                self._cells.remove(cell)
                child.parent = None
                self._rebuild_placement()
                return

    def clear_children(self):
        for cell in self._cells:
            cell.content.parent = None
        self._cells.clear()
        self._rebuild_placement()

    def _rebuild_placement(self):
        cells = self._cells
        self._cells = []
        self._occupied[:, :] = False
        self._separators[:, :] = GRID_B
        for cell in cells:
            self.add(cell.row, cell.column, cell.content, cell.row_span, cell.column_span)

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def _auto_sizes(self) -> Tuple[List[int], List[int]]:
        """Largest outer hint of single-span cells per column and per row."""
        aw = [0] * self.column_count
        ah = [0] * self.row_count
        for cell in self._cells:
            pw, ph = preferred_outer(cell.content)
            if cell.column_span == 1:
                aw[cell.column] = max(aw[cell.column], pw)
            if cell.row_span == 1:
                ah[cell.row] = max(ah[cell.row], ph)
        return aw, ah

    def hint(self) -> Tuple[int, int]:
        aw, ah = self._auto_sizes()
        w = sum(hint if hint > 0 else auto for hint, auto in zip(self._columns, aw))
        h = sum(hint if hint > 0 else auto for hint, auto in zip(self._rows, ah))
        return (w + self.column_count - 1, h + self.row_count - 1)

    def layout(self):
        c = self.content()
        aw, ah = self._auto_sizes()

        self.widths = distribute(
            [Track.from_hint(hint, auto) for hint, auto in zip(self._columns, aw)], c.w
        )
        self.heights = distribute(
            [Track.from_hint(hint, auto) for hint, auto in zip(self._rows, ah)], c.h
        )
        logger.debug(f"Grid {self.selector()}: widths={self.widths}, heights={self.heights}")

        xs = self.column_offsets()
        ys = self.row_offsets()
        for cell in self._cells:
            w = sum(self.widths[cell.column:cell.column + cell.column_span]) + cell.column_span - 1
            h = sum(self.heights[cell.row:cell.row + cell.row_span]) + cell.row_span - 1
            cell.content.set_bounds(xs[cell.column], ys[cell.row], w, h)
            cell.content.layout()

    def column_offsets(self) -> List[int]:
        """Screen x of every column's first cell."""
        x = self.content().x
        offsets = []
        for width in self.widths:
            offsets.append(x)
            x += width + 1
        return offsets

    def row_offsets(self) -> List[int]:
        """Screen y of every row's first cell."""
        y = self.content().y
        offsets = []
        for height in self.heights:
            offsets.append(y)
            y += height + 1
        return offsets
