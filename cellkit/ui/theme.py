"""
Theme

Selector -> Style store with side tables for color variables, border
glyph sets, boolean flags and special runes.

Themes are built once by a construction function (see themes.py) and
then only read while layout and rendering run. Switching themes means
swapping the Theme reference between passes, never mutating a live one.

Resolution cascades every matching key in ascending specificity (see
selector.cascade_keys) over the theme's default style. Lookups never
fail: unknown selectors, colors and borders degrade to defaults.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Dict, Optional, TYPE_CHECKING
import logging

from cellkit.ui.style import Style
from cellkit.ui.insets import Insets
from cellkit.ui.borders import BorderStyle
from cellkit.ui.selector import (
    Selector, SelectorError, tokenize_selector, cascade_keys,
)

if TYPE_CHECKING:
    from cellkit.ui.widget import Styleable, Widget

logger = logging.getLogger(__name__)

_EMPTY_BORDER = BorderStyle()


class Theme:
    """
    A complete visual theme.

    Example:

        theme = Theme("mono")
        theme.set_colors({"$fg": "#c0c0c0"})
        theme.set("", Style(foreground="$fg"))
        theme.set("button:focus", Style(border="double"))

        style = theme.resolve("button.primary:focus")
        fg = theme.color(style.foreground)  # "#c0c0c0"
    """

    def __init__(self, name: str = "", default: Style = None):
        self.name = name
        self._default = default or Style(margin=Insets(), padding=Insets())
        self._styles: Dict[str, Style] = {}
        self._colors: Dict[str, str] = {}
        self._borders: Dict[str, BorderStyle] = {}
        self._flags: Dict[str, bool] = {}
        self._runes: Dict[str, str] = {}

    def __repr__(self) -> str:
        return f"Theme(name={self.name!r}, styles={len(self._styles)})"

    # -------------------------------------------------------------------------
    # Styles
    # -------------------------------------------------------------------------

    def default(self) -> Style:
        """Base style every resolution starts from."""
        return self._default

    def set(self, selector: str, style: Style):
        """Declare the style for one selector. Malformed selectors are skipped."""
        try:
            tokenize_selector(selector)
        except SelectorError as e:
            logger.warning(f"Theme {self.name!r}: ignoring style: {e}")
            return
        self._styles[selector] = style

    def set_styles(self, styles: Dict[str, Style]):
        """Replace all style declarations."""
        self._styles = {}
        for selector, style in styles.items():
            self.set(selector, style)

    def get(self, selector: str) -> Optional[Style]:
        """The style declared for exactly this key, if any."""
        return self._styles.get(selector)

    def styles(self) -> Dict[str, Style]:
        return dict(self._styles)

    def resolve(self, selector: str) -> Style:
        """
        Cascade all declarations matching selector over the default style.

        Always returns a complete Style; a malformed selector resolves
        like the empty one.
        """
        try:
            parsed = tokenize_selector(selector)
        except SelectorError as e:
            logger.warning(f"Theme {self.name!r}: {e}; using universal style")
            parsed = Selector()

        result = self._default
        for key in cascade_keys(parsed):
            result = result.cascade(self._styles.get(key))
        return result

    # -------------------------------------------------------------------------
    # Colors
    # -------------------------------------------------------------------------

    def color(self, value: str) -> str:
        """Substitute a "$name" color variable; anything else passes through."""
        if value.startswith("$"):
            return self._colors.get(value, value)
        return value

    def colors(self) -> Dict[str, str]:
        return dict(self._colors)

    def set_colors(self, colors: Dict[str, str]):
        self._colors = dict(colors)

    # -------------------------------------------------------------------------
    # Borders
    # -------------------------------------------------------------------------

    def border(self, name: str) -> BorderStyle:
        """Glyph set for a border name; the empty set when unknown."""
        return self._borders.get(name, _EMPTY_BORDER)

    def borders(self) -> Dict[str, BorderStyle]:
        return dict(self._borders)

    def set_borders(self, borders: Dict[str, BorderStyle]):
        """Replace all border sets. Every glyph of every set must be present."""
        for name, border in borders.items():
            border.validate(name)
        self._borders = dict(borders)

    # -------------------------------------------------------------------------
    # Flags and Runes
    # -------------------------------------------------------------------------

    def flag(self, name: str) -> bool:
        return self._flags.get(name, False)

    def set_flags(self, flags: Dict[str, bool]):
        self._flags = dict(flags)

    def rune(self, name: str) -> str:
        """Special glyph by name, "" when unknown."""
        return self._runes.get(name, "")

    def set_runes(self, runes: Dict[str, str]):
        for name, rune in runes.items():
            if len(rune) != 1:
                raise ValueError(f"Rune {name!r} must be one character, got {rune!r}")
        self._runes = dict(runes)

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------

    def apply(self, widget: Styleable, selector: str, *states: str):
        """
        Resolve selector (and selector:state for each state) into the
        widget's style cache.

        Keys installed are the selector's part ("" for the widget itself)
        and "part:state". When a selector names both part1 and part2,
        part1 is the key.
        """
        try:
            parsed = tokenize_selector(selector)
        except SelectorError as e:
            logger.warning(f"Theme {self.name!r}: {e}; applying universal style")
            parsed = Selector()

        part = parsed.part
        widget.set_style(part, self.resolve(str(parsed)))
        for state in states:
            stateful = str(replace(parsed, state=state))
            widget.set_style(f"{part}:{state}", self.resolve(stateful))

    def apply_tree(self, root: Widget):
        """
        Apply this theme to a whole widget tree.

        Every widget gets its own selector and each of its declared parts,
        all with the widget's states. A widget carrying its own theme
        (ThemeSwitch) hands that theme to its subtree.
        """
        self.apply(root, root.selector(), *root.states)
        for part in root.parts:
            self.apply(root, root.selector(part), *root.states)

        theme = getattr(root, "theme", None)
        if not isinstance(theme, Theme):
            theme = self
        elif theme is not self:
            logger.debug(f"Theme switch at {root.selector()}: {self.name!r} -> {theme.name!r}")

        for child in root.children:
            theme.apply_tree(child)
