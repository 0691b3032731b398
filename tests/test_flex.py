from cellkit.ui.layout import Align
from cellkit.ui.style import Style
from cellkit.ui.widgets import Box, Column, Label, Row


def test_row_exact_distribution():
    children = [
        Label("fixed", style=Style(width=20)),
        Label("x" * 10),
        Label(style=Style(width=-1)),
        Label(style=Style(width=-3)),
    ]
    row = Row(children)
    row.set_bounds(0, 0, 100, 1)
    row.layout()

    assert [c.bounds().w for c in children] == [20, 10, 16, 51]
    assert [c.bounds().x for c in children] == [0, 21, 32, 49]
    assert children[-1].bounds().right == 100

def test_column_stacks_with_gap():
    labels = [Label("a"), Label("bb"), Label("ccc")]
    col = Column(labels)
    col.set_bounds(0, 0, 8, 10)
    col.layout()

    assert [l.bounds().y for l in labels] == [0, 2, 4]
    # Stretch fills the cross axis
    assert all(l.bounds().w == 8 for l in labels)

def test_zero_gap():
    labels = [Label("a"), Label("b")]
    row = Row(labels, gap=0)
    row.set_bounds(0, 0, 10, 1)
    row.layout()
    assert [l.bounds().x for l in labels] == [0, 1]

def test_cross_alignment():
    label = Label("abc")
    col = Column([label], alignment=Align.CENTER)
    col.set_bounds(0, 0, 9, 1)
    col.layout()
    assert label.bounds().as_tuple() == (3, 0, 3, 1)

    col.flex.align = Align.END
    col.layout()
    assert label.bounds().x == 6

def test_fractional_cross_takes_available():
    tall = Label("a", style=Style(height=-1))
    short = Label("b")
    row = Row([tall, short], alignment=Align.START)
    row.set_bounds(0, 0, 10, 5)
    row.layout()
    assert tall.bounds().h == 5
    assert short.bounds().h == 1

def test_overflow_clamps_to_zero():
    grow = Label(style=Style(width=-1))
    row = Row([Label("x" * 30), grow])
    row.set_bounds(0, 0, 20, 1)
    row.layout()
    assert grow.bounds().w == 0

def test_hints():
    assert Column([Label("abc"), Label("hello")]).hint() == (5, 3)
    assert Row([Label("abc"), Label("hello")]).hint() == (9, 1)
    assert Row().hint() == (0, 0)

def test_nested_in_box():
    label = Label("hi")
    box = Box(Column([label]), style=Style(border="thin"))
    box.set_bounds(0, 0, 10, 6)
    box.layout()
    assert box.child.bounds().as_tuple() == (1, 1, 8, 4)
    assert label.bounds().as_tuple() == (1, 1, 8, 1)
    assert box.hint() == (2, 1)
