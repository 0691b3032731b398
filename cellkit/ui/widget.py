"""
Widget Base Class

Core widget tree with:
- Selector context (type, class, id) for theming
- Per-widget resolved style cache (filled by Theme.apply)
- Box model geometry (bounds <-> content) driven by the resolved style
- Hint/layout phases

The base class composes its collaborators (StyleCache for styles, a Rect
for bounds) and forwards to them explicitly. Layout and rendering code
is written against the narrow capability protocols below rather than
against Widget itself.
"""

from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Protocol, Tuple
from enum import Enum, auto
from cellkit.ui.style import Style
from cellkit.ui.layout import Rect


# =============================================================================
# Capabilities
# =============================================================================

class Styleable(Protocol):
    def style(self, key: str = "") -> Style: ...

    def set_style(self, key: str, style: Optional[Style]) -> None: ...


class Boundable(Protocol):
    def bounds(self) -> Rect: ...

    def set_bounds(self, x: int, y: int, w: int, h: int) -> None: ...

    def content(self) -> Rect: ...


class Hinted(Protocol):
    def hint(self) -> Tuple[int, int]: ...


# =============================================================================
# Kinds and States
# =============================================================================

class WidgetKind(Enum):
    """Closed set of widget variants; the renderer dispatches on this."""
    WIDGET = auto()
    STATIC = auto()
    FLEX = auto()
    BOX = auto()
    GRID = auto()
    THEME_SWITCH = auto()


class WidgetState(Enum):
    """Interactive state; the value is the selector state suffix."""
    NORMAL = ""
    FOCUSED = "focus"
    HOVERED = "hover"
    DISABLED = "disabled"


# =============================================================================
# Style Cache
# =============================================================================

_EMPTY_STYLE = Style()


class StyleCache:
    """
    Resolved styles of one widget, keyed by part/state suffix.

    Keys are "" (the widget itself), ":state", "part" and "part:state".
    Lookups of missing keys fall back to "" and then to an empty Style.
    """

    def __init__(self):
        self._styles: Dict[str, Style] = {}

    def get(self, key: str = "") -> Style:
        style = self._styles.get(key)
        if style is None:
            style = self._styles.get("")
        return style if style is not None else _EMPTY_STYLE

    def set(self, key: str, style: Optional[Style]):
        if style is None:
            self._styles.pop(key, None)
        else:
            self._styles[key] = style

    def keys(self) -> List[str]:
        return sorted(self._styles)

    def clear(self):
        self._styles.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._styles

    def __len__(self) -> int:
        return len(self._styles)


# =============================================================================
# Widget
# =============================================================================

class Widget:
    """
    Base class for all widgets.

    Lifecycle:
    1. Theme.apply_tree(root) -> fill every widget's style cache
    2. hint() -> intrinsic preferred content size
    3. set_bounds()/layout() -> outer bounds, recursively for containers
    4. Renderer paints using the style for the current state

    Bounds are absolute screen cells (outer box including margin).
    """

    kind: WidgetKind = WidgetKind.WIDGET
    type_name: str = "widget"
    parts: Tuple[str, ...] = ()
    states: Tuple[str, ...] = ("focus", "hover", "disabled")

    def __init__(self, id: str = "", cls: str = "", style: Style = None):
        self.id = id
        self.cls = cls
        self.parent: Optional[Widget] = None
        self._children: List[Widget] = []

        self._styles = StyleCache()
        if style is not None:
            self._styles.set("", style)
        self._bounds = Rect()

        self._focused = False
        self._hovered = False
        self._enabled = True
        self._visible = True

    # -------------------------------------------------------------------------
    # Tree Management
    # -------------------------------------------------------------------------

    @property
    def children(self) -> List[Widget]:
        return self._children

    def add_child(self, child: Widget):
        """Add a child widget."""
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self._children.append(child)

    def remove_child(self, child: Widget):
        """Remove a child widget."""
        if child in self._children:
            self._children.remove(child)
            child.parent = None

    def clear_children(self):
        """Remove all children."""
        for child in self._children:
            child.parent = None
        self._children.clear()

    def walk(self) -> Iterator[Widget]:
        """Depth-first iteration over this widget and its descendants."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, id: str) -> Optional[Widget]:
        """Find a descendant (or self) by id."""
        for widget in self.walk():
            if widget.id == id:
                return widget
        return None

    # -------------------------------------------------------------------------
    # Selector
    # -------------------------------------------------------------------------

    def selector(self, part: str = "") -> str:
        """Theme selector for this widget, or for one of its parts."""
        text = self.type_name
        if part:
            text += "/" + part
        if self.cls:
            text += "." + self.cls
        if self.id:
            text += "#" + self.id
        return text

    # -------------------------------------------------------------------------
    # Style
    # -------------------------------------------------------------------------

    def style(self, key: str = "") -> Style:
        """Resolved style for a part/state key, falling back to the base style."""
        return self._styles.get(key)

    def set_style(self, key: str, style: Optional[Style]):
        """Install (or remove, with None) a resolved style."""
        self._styles.set(key, style)

    def style_keys(self) -> List[str]:
        return self._styles.keys()

    def current_style(self, part: str = "") -> Style:
        """Style for the current interactive state."""
        state = self.state.value
        if state:
            key = f"{part}:{state}"
            if key in self._styles:
                return self._styles.get(key)
        return self._styles.get(part)

    # -------------------------------------------------------------------------
    # Box Model
    # -------------------------------------------------------------------------

    def bounds(self) -> Rect:
        return self._bounds.copy()

    def set_bounds(self, x: int, y: int, w: int, h: int):
        self._bounds = Rect(x, y, w, h)

    def set_position(self, x: int, y: int):
        self._bounds = Rect(x, y, self._bounds.w, self._bounds.h)

    def set_size(self, width: int, height: int):
        """Set the outer size from a content size."""
        w, h = self.style("").outer_size(width, height)
        self._bounds = Rect(self._bounds.x, self._bounds.y, w, h)

    def size(self) -> Tuple[int, int]:
        """Content size derived from the outer bounds."""
        return self.style("").inner_size(self._bounds.w, self._bounds.h)

    def content(self) -> Rect:
        """Content rect in screen cells."""
        return self.style("").content_rect(self._bounds)

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def hint(self) -> Tuple[int, int]:
        """Intrinsic preferred content size. Default: the style's fixed hints."""
        style = self.style("")
        return (max(0, style.width), max(0, style.height))

    def layout(self):
        """Lay out children inside the current bounds. Leaves do nothing."""
        pass

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> WidgetState:
        """Get current interactive state."""
        if not self._enabled:
            return WidgetState.DISABLED
        if self._focused:
            return WidgetState.FOCUSED
        if self._hovered:
            return WidgetState.HOVERED
        return WidgetState.NORMAL

    def set_focused(self, focused: bool):
        self._focused = focused

    def set_hovered(self, hovered: bool):
        self._hovered = hovered

    def set_enabled(self, enabled: bool):
        self._enabled = enabled

    def set_visible(self, visible: bool):
        self._visible = visible

    @property
    def focused(self) -> bool:
        return self._focused

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def visible(self) -> bool:
        return self._visible

    # -------------------------------------------------------------------------
    # Debug
    # -------------------------------------------------------------------------

    def info(self) -> str:
        b = self._bounds
        c = self.content()
        return (
            f"{self.selector()} @{b.x}.{b.y} {b.w}:{b.h} "
            f"({c.x}.{c.y} {c.w}:{c.h}) styles={len(self._styles)}"
        )

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(id={self.id!r}, bounds={self._bounds}, children={len(self.children)})"

    def print_tree(self, indent: int = 0):
        """Print widget tree for debugging."""
        prefix = "  " * indent
        print(f"{prefix}{self.info()}")
        for child in self.children:
            child.print_tree(indent + 1)
