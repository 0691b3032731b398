import logging

import pytest

from cellkit.ui.borders import BorderStyle, UNICODE_BORDERS
from cellkit.ui.insets import Insets
from cellkit.ui.style import Style
from cellkit.ui.theme import Theme
from cellkit.ui.widgets import Column, Label, ThemeSwitch


def make_buttons():
    t = Theme("test")
    t.set("", Style(foreground="black", background="white"))
    t.set("button", Style(border="thin"))
    t.set("button.primary", Style(background="blue"))
    t.set("button.primary:focus", Style(foreground="white"))
    return t


def test_default_fallback():
    t = make_buttons()
    assert t.resolve("slider") == t.resolve("")
    assert t.resolve("slider.big#knob:hover") == t.resolve("")

def test_specificity_override():
    style = make_buttons().resolve("button.primary:focus")
    assert style.foreground == "white"
    assert style.background == "blue"
    assert style.border == "thin"

def test_id_outranks_everything():
    t = make_buttons()
    t.set("#ok", Style(background="green"))
    t.set(":focus", Style(background="red"))
    assert t.resolve("button.primary#ok:focus").background == "green"
    assert t.resolve("button.primary:focus").background == "red"

def test_part_state_key():
    t = Theme()
    t.set("list/highlight", Style(background="gray"))
    t.set("list/highlight:focus", Style(background="red"))
    assert t.resolve("list/highlight").background == "gray"
    assert t.resolve("list/highlight:focus").background == "red"

def test_resolve_without_declarations_is_default():
    t = Theme()
    assert t.resolve("anything") == t.default()
    assert t.default().margin == Insets()
    assert t.default().padding == Insets()

def test_malformed_selector(caplog):
    t = make_buttons()
    with caplog.at_level(logging.WARNING):
        assert t.resolve("button..primary") == t.resolve("")
        t.set("bad selector", Style(foreground="red"))
    assert t.get("bad selector") is None
    assert len(caplog.records) == 2

def test_get_and_styles_copy():
    t = make_buttons()
    assert t.get("button") == Style(border="thin")
    assert t.get("nope") is None
    styles = t.styles()
    styles.clear()
    assert t.get("button") is not None

def test_set_styles_replaces():
    t = make_buttons()
    t.set_styles({"label": Style(foreground="red")})
    assert t.get("button") is None
    assert t.get("label").foreground == "red"

def test_color_pass_through():
    t = Theme()
    t.set_colors({"$fg": "#c0c0c0"})
    assert t.color("$fg") == "#c0c0c0"
    assert t.color("$undefined") == "$undefined"
    assert t.color("#ff0000") == "#ff0000"
    assert t.color("red") == "red"

def test_border_lookup():
    t = Theme()
    t.set_borders(UNICODE_BORDERS)
    assert t.border("double").top_left == "╔"
    assert t.border("missing").empty

def test_set_borders_validates():
    t = Theme()
    with pytest.raises(ValueError):
        t.set_borders({"broken": BorderStyle(top="-")})
    assert t.borders() == {}

def test_flags_and_runes():
    t = Theme()
    t.set_flags({"ellipsis": True})
    t.set_runes({"ellipsis": "…"})
    assert t.flag("ellipsis")
    assert not t.flag("unknown")
    assert t.rune("ellipsis") == "…"
    assert t.rune("unknown") == ""
    with pytest.raises(ValueError):
        t.set_runes({"arrow": "->"})

def test_apply_fills_style_cache():
    t = make_buttons()
    w = Label("ok", cls="primary")
    t.apply(w, "button.primary", "focus", "hover")

    assert w.style_keys() == ["", ":focus", ":hover"]
    assert w.style("").background == "blue"
    assert w.style(":focus").foreground == "white"
    # No declaration for hover beyond the base
    assert w.style(":hover") == w.style("")

def test_apply_part_keys():
    t = Theme()
    t.set("list/highlight", Style(background="gray"))
    t.set("list/highlight:focus", Style(background="red"))
    w = Label()
    t.apply(w, "list/highlight", "focus")
    assert w.style_keys() == ["highlight", "highlight:focus"]
    assert w.style("highlight:focus").background == "red"

def test_apply_with_both_parts_keys_on_part1():
    t = Theme()
    t.set("table/header", Style(foreground="red"))
    t.set("#main/cell", Style(background="blue"))
    w = Label()
    t.apply(w, "table/header#main/cell")

    assert w.style_keys() == ["header"]
    # Both part families contribute to resolution
    assert w.style("header").foreground == "red"
    assert w.style("header").background == "blue"

def test_apply_tree(theme):
    error = Label("oops", cls="error")
    plain = Label("fine")
    root = Column([plain, error])
    theme.apply_tree(root)

    assert error.style("").foreground == "$alert"
    assert plain.style("").foreground == "$fg"
    assert plain.style(":disabled").foreground == "$muted"
    assert root.style_keys() == ["", ":disabled", ":focus", ":hover"]

def test_apply_tree_theme_switch(theme, tokyo):
    inner = Label("inner")
    outer = Label("outer")
    switch = ThemeSwitch(tokyo, inner)
    theme.apply_tree(Column([outer, switch]))

    assert outer.style("").foreground == "$fg"
    assert inner.style("").foreground == "$fg0"
    # The switch itself is styled by the enclosing theme
    assert switch.style("").foreground == "$fg"
