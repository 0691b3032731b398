import numpy as np
import pytest

from cellkit.ui.insets import Insets
from cellkit.ui.layout import Rect
from cellkit.ui.style import Style, parse_color, hex_to_color, color_to_array


def test_cascade_overwrites_declared_fields_only():
    base = Style(foreground="black", background="white", border="thin").with_margin(1)
    top = Style(foreground="red", width=10)
    result = base.cascade(top)

    assert result.foreground == "red"
    assert result.background == "white"
    assert result.border == "thin"
    assert result.margin == Insets.of(1)
    assert result.width == 10
    # Inputs untouched
    assert base.foreground == "black"
    assert base.width == 0

def test_cascade_none_is_identity():
    style = Style(foreground="red")
    assert style.cascade(None) is style
    assert style.cascade(Style()) == style

def test_cascade_replaces_insets_wholesale():
    base = Style().with_padding(1, 1, 1, 1)
    result = base.cascade(Style().with_padding(0, 2))
    assert result.padding == Insets(0, 2, 0, 2)

def test_box_model_overhead():
    style = Style(border="thin").with_margin(1).with_padding(0, 2)
    assert style.horizontal == 2 + 4 + 2
    assert style.vertical == 2 + 0 + 2
    assert style.outer_size(10, 3) == (18, 7)

def test_box_model_round_trip():
    styles = [
        Style(),
        Style(border="double"),
        Style().with_margin(1, 2, 3, 4),
        Style(border="thin").with_margin(2).with_padding(1, 3),
    ]
    for style in styles:
        for w, h in [(0, 0), (1, 1), (7, 3), (80, 24)]:
            assert style.inner_size(*style.outer_size(w, h)) == (w, h)

def test_content_rect():
    style = Style(border="thin").with_margin(1).with_padding(0, 2)
    c = style.content_rect(Rect(0, 0, 20, 10))
    assert c.as_tuple() == (4, 2, 12, 6)

    frame = style.border_rect(Rect(0, 0, 20, 10))
    assert frame.as_tuple() == (1, 1, 18, 8)

def test_none_border_overrides_inherited_border():
    assert not Style(border="none").bordered
    assert Style(border="none").horizontal == 0

    result = Style(border="thin").cascade(Style(border="none"))
    assert not result.bordered

def test_builders():
    style = Style().with_colors("red", "blue").with_size(4, -1).with_border("round")
    assert (style.foreground, style.background) == ("red", "blue")
    assert (style.width, style.height) == (4, -1)
    assert style.bordered
    assert "Border    : round" in style.info()

    tweaked = style.with_foreground("white").with_background("black")
    assert (tweaked.foreground, tweaked.background) == ("white", "black")
    styled = Style().with_cursor("*bar").with_render("unicode")
    assert (styled.cursor, styled.render) == ("*bar", "unicode")

def test_parse_color():
    assert parse_color("") is None
    assert parse_color("default") is None
    assert parse_color("#ff0000") == (1.0, 0.0, 0.0, 1.0)
    assert parse_color("#f00") == (1.0, 0.0, 0.0, 1.0)
    assert parse_color("rgb(0, 0, 255)") == (0.0, 0.0, 1.0, 1.0)
    assert parse_color("Red") == hex_to_color("#ff0000")

def test_parse_color_errors():
    for spec in ["$fg", "#12", "rgb(300, 0, 0)", "not-a-color"]:
        with pytest.raises(ValueError):
            parse_color(spec)

def test_color_to_array():
    arr = color_to_array(parse_color("white"))
    assert arr.dtype == np.float32
    assert arr.shape == (4,)
    assert np.allclose(arr, [1.0, 1.0, 1.0, 1.0])
    assert np.allclose(color_to_array(None), [0.0, 0.0, 0.0, 0.0])
