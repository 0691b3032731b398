import numpy as np

from cellkit.ui.root import RootWidget
from cellkit.ui.style import color_to_array, hex_to_color
from cellkit.ui.themes import default_theme, tokyo_night_theme
from cellkit.ui.widgets import Column, Label, ThemeSwitch


def test_refresh():
    root = RootWidget(Column([Label("a"), Label("b")]), width=5, height=3)
    surface = root.refresh()
    assert surface.lines() == ["a    ", "     ", "b    "]

def test_resize():
    label = Label("a")
    root = RootWidget(label, width=5, height=3)
    root.apply_theme()
    root.set_screen_size(8, 2)
    assert root.screen_size == (8, 2)
    assert label.bounds().as_tuple() == (0, 0, 8, 2)

def test_theme_switch_renders_with_inner_theme():
    inner = Label("x")
    root = RootWidget(ThemeSwitch(tokyo_night_theme(), inner), theme=default_theme(), width=3, height=1)
    surface = root.refresh()
    assert np.allclose(surface.fg[0, 0], color_to_array(hex_to_color("#c0caf5")))

def test_set_theme():
    label = Label("x")
    root = RootWidget(label, width=3, height=1)
    root.refresh()
    assert label.style("").foreground == "$fg"
    root.set_theme(tokyo_night_theme())
    root.refresh()
    assert label.style("").foreground == "$fg0"
