"""
Built-in Themes

Theme construction functions return a fresh, fully populated Theme.
THEMES maps names to these functions for theme switching.
"""

from __future__ import annotations
from typing import Callable, Dict
import logging

from cellkit.ui.style import Style
from cellkit.ui.theme import Theme
from cellkit.ui.borders import UNICODE_BORDERS

logger = logging.getLogger(__name__)


def default_theme() -> Theme:
    """Plain terminal colors with thin borders."""
    t = Theme("default", default=Style().with_margin(0).with_padding(0))
    t.set_borders(UNICODE_BORDERS)
    t.set_colors({
        "$bg": "black",
        "$fg": "silver",
        "$accent": "aqua",
        "$muted": "gray",
        "$alert": "red",
    })
    t.set_flags({"ellipsis": True})
    t.set_runes({"ellipsis": "…"})
    t.set_styles({
        "": Style(foreground="$fg", background="$bg"),
        "box": Style(border="thin"),
        "grid": Style(foreground="$muted", border="thin"),
        "label:disabled": Style(foreground="$muted"),
        "static:focus": Style(foreground="$bg", background="$accent"),
        ".header": Style(foreground="$bg", background="$accent"),
        ".error": Style(foreground="$alert"),
    })
    return t


def tokyo_night_theme() -> Theme:
    """Dark blue palette after the Tokyo Night editor theme."""
    t = Theme("tokyo-night")
    t.set_borders(UNICODE_BORDERS)
    t.set_colors({
        "$bg0": "#1a1b26",
        "$bg1": "#1e1e2e",
        "$bg2": "#1b263b",
        "$fg0": "#c0caf5",
        "$fg1": "#565f89",
        "$gray": "#414868",
        "$blue": "#7aa2f7",
        "$cyan": "#2ac3de",
        "$aqua": "#89ddff",
        "$magenta": "#bb9af7",
        "$red": "#f7768e",
        "$orange": "#ff9e64",
        "$yellow": "#e0af68",
        "$green": "#9ece6a",
    })
    t.set_flags({"ellipsis": True})
    t.set_runes({"ellipsis": "…"})
    t.set_styles({
        "": Style(foreground="$fg0", background="$bg0").with_margin(0).with_padding(0),
        "box": Style(foreground="$fg1", border="round"),
        "box:focus": Style(foreground="$blue"),
        "button": Style(foreground="$bg0", background="$blue", border="lines").with_padding(0, 2),
        "button:focus": Style(foreground="$fg0", background="$blue"),
        "button:hover": Style(foreground="$red", background="$blue"),
        "button.dialog": Style(foreground="$fg1", background="$bg2", border="none").with_padding(0, 2),
        "dialog": Style(foreground="$fg0", background="$blue", border="thick").with_padding(1, 2),
        "flex": Style(foreground="$fg0", background="$bg0"),
        "grid": Style(foreground="$fg1", background="$bg0", border="thin"),
        "label": Style(foreground="$fg0"),
        "list/highlight": Style(foreground="$bg0", background="$fg1"),
        "list/highlight:focus": Style(foreground="$bg0", background="$red"),
        "static": Style(foreground="$fg0"),
        "table/grid": Style(foreground="$fg1", background="$bg0", border="thin"),
        "table/header": Style(foreground="$fg0", background="$bg0"),
        ".dialog": Style(foreground="$fg0", background="$blue"),
        ".header": Style(foreground="$fg0", background="$fg1"),
        ".footer": Style(foreground="$fg0", background="$fg1"),
        ".shortcut": Style(foreground="$cyan", background="$fg1").with_padding(0, 1),
        "#debug-log": Style(foreground="$green", background="$bg1"),
    })
    return t


def nord_theme() -> Theme:
    """Arctic blue palette after Nord: colors and borders only."""
    t = Theme("nord")
    t.set_borders(UNICODE_BORDERS)
    t.set_colors({
        # Polar Night
        "$bg0": "#2e3440",
        "$bg1": "#3b4252",
        "$bg2": "#434c5e",
        "$bg3": "#4c566a",
        # Snow Storm
        "$fg0": "#eceff4",
        "$fg1": "#e5e9f0",
        "$fg2": "#d8dee9",
        # Frost
        "$frost1": "#8fbcbb",
        "$frost2": "#88c0d0",
        "$frost3": "#81a1c1",
        "$frost4": "#5e81ac",
        # Aurora
        "$red": "#bf616a",
        "$orange": "#d08770",
        "$yellow": "#ebcb8b",
        "$green": "#a3be8c",
        "$purple": "#b48ead",
        # Aliases
        "$blue": "#81a1c1",
        "$cyan": "#88c0d0",
        "$aqua": "#8fbcbb",
        "$magenta": "#b48ead",
        "$gray": "#4c566a",
    })
    return t


def gruvbox_theme() -> Theme:
    """Warm retro palette after Gruvbox Dark."""
    t = Theme("gruvbox")
    t.set_borders(UNICODE_BORDERS)
    t.set_colors({
        "$bg0": "#282828",
        "$bg1": "#3c3836",
        "$bg2": "#504945",
        "$bg3": "#665c54",
        "$bg4": "#7c6f64",
        "$fg0": "#fbf1c7",
        "$fg1": "#ebdbb2",
        "$fg2": "#d5c4a1",
        "$fg3": "#bdae93",
        "$fg4": "#a89984",
        "$gray": "#928374",
        "$red": "#fb4934",
        "$green": "#b8bb26",
        "$yellow": "#fabd2f",
        "$blue": "#83a598",
        "$purple": "#d3869b",
        "$aqua": "#8ec07c",
        "$orange": "#fe8019",
        # Faded
        "$red_dim": "#cc241d",
        "$green_dim": "#98971a",
        "$yellow_dim": "#d79921",
        "$blue_dim": "#458588",
        "$purple_dim": "#b16286",
        "$aqua_dim": "#689d6a",
        "$orange_dim": "#d65d0e",
        "$cyan": "#8ec07c",
        "$magenta": "#d3869b",
    })
    t.set_flags({"ellipsis": True})
    t.set_runes({"ellipsis": "…"})
    t.set_styles({
        "": Style(foreground="$fg1", background="$bg0").with_margin(0).with_padding(0),
        "button": Style(foreground="$bg0", background="$yellow", border="lines").with_padding(0, 2),
        "button:focus": Style(foreground="$bg0", background="$orange"),
        "button:hover": Style(foreground="$bg0", background="$yellow_dim"),
        "button:pressed": Style(foreground="$fg0", background="$orange_dim"),
        "button:disabled": Style(foreground="$bg3", background="$bg1"),
        "checkbox": Style(foreground="$fg1").with_padding(0),
        "checkbox:focus": Style(foreground="$yellow"),
        "checkbox:hover": Style(foreground="$orange"),
        "checkbox:disabled": Style(foreground="$bg3"),
        "input": Style(foreground="$fg0", background="$bg1", border="thin").with_cursor("*bar"),
        "input:focus": Style(foreground="$fg0", background="$bg0", border="double"),
        "input:placeholder": Style(foreground="$bg4", background="$bg1"),
        "label": Style(foreground="$fg1"),
        "list": Style(foreground="$fg1", background="$bg1", border="thin"),
        "list:focus": Style(foreground="$fg1", background="$bg1", border="double"),
        "list:disabled": Style(foreground="$bg3", background="$bg2"),
        "list/highlight": Style(foreground="$bg0", background="$bg3"),
        "list/highlight:focus": Style(foreground="$bg0", background="$yellow"),
        "progress-bar": Style(foreground="$bg3", background="$bg1", border="thin").with_render("unicode"),
        "progress-bar/bar": Style(foreground="$green"),
        "grid": Style(foreground="$bg3", background="$bg0", border="thin"),
        "box": Style(foreground="$fg1", border="round"),
        "box:focus": Style(foreground="$yellow", border="double"),
        "flex": Style(foreground="$fg1"),
        "scroller": Style(foreground="$fg2", background="$bg1", border="thin"),
        "scroller:focus": Style(foreground="$yellow", background="$bg1", border="double"),
        "tabs": Style(foreground="$fg2", background="$bg1"),
        "tabs:focus": Style(foreground="$yellow", background="$bg1"),
        "tabs/line": Style(foreground="$bg3"),
        "tabs/line:focus": Style(foreground="$yellow"),
        "tabs/highlight": Style(foreground="$bg0", background="$fg3"),
        "tabs/highlight:focus": Style(foreground="$bg0", background="$yellow"),
        "tabs/highlight-line": Style(foreground="$fg3"),
        "tabs/highlight-line:focus": Style(foreground="$yellow"),
        "separator": Style(foreground="$bg3"),
        "text": Style(foreground="$fg1", border="thin"),
        ".header": Style(foreground="$fg0", background="$bg2"),
        ".footer": Style(foreground="$fg2", background="$bg2"),
        ".inspector": Style(foreground="$fg1", background="$bg1", border="double"),
        "box.inspector": Style(foreground="$fg1", background="$bg1"),
        "box.inspector:title": Style(foreground="$yellow"),
        ".popup": Style(foreground="$fg1", background="$bg1", border="double"),
        "flex/shadow.popup": Style(foreground="$bg2", background="$bg0"),
        "button.popup": Style(foreground="$bg0", background="$yellow"),
        ".popup#title": Style(foreground="$bg0", background="$orange"),
        ".shortcut": Style(foreground="$orange", background="$bg2").with_padding(0, 1),
        "#debug-log": Style(foreground="$green", background="$bg1"),
        ".success": Style(foreground="$green"),
        ".warning": Style(foreground="$yellow"),
        ".error": Style(foreground="$red"),
        ".info": Style(foreground="$blue"),
        ":disabled": Style(foreground="$bg3", background="$bg1"),
        "spacer": Style(),
    })
    return t


def midnight_neon_theme() -> Theme:
    """Near-black background with neon accents: colors and borders only."""
    t = Theme("midnight-neon")
    t.set_borders(UNICODE_BORDERS)
    t.set_colors({
        "$bg0": "#0f1117",
        "$bg1": "#1a1c23",
        "$bg2": "#242730",
        "$bg3": "#2f323d",
        "$fg0": "#5ee9f0",
        "$fg1": "#c7ccd9",
        "$fg2": "#a0a4b3",
        "$fg3": "#6c7384",
        "$blue": "#5aaaff",
        "$cyan": "#40e000",
        "$green": "#4cd964",
        "$yellow": "#ffd866",
        "$orange": "#ff9f43",
        "$magenta": "#c792ea",
    })
    return t


THEMES: Dict[str, Callable[[], Theme]] = {
    "default": default_theme,
    "tokyo-night": tokyo_night_theme,
    "nord": nord_theme,
    "gruvbox": gruvbox_theme,
    "midnight-neon": midnight_neon_theme,
}


def get_theme(name: str) -> Theme:
    """Build the named theme, falling back to the default theme."""
    factory = THEMES.get(name)
    if factory is None:
        logger.warning(f"Unknown theme {name!r}, using default")
        factory = default_theme
    return factory()
