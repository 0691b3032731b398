import pytest

from cellkit.ui.borders import (
    BorderStyle, UNICODE_BORDERS, JUNCTIONS, UP, RIGHT, DOWN, LEFT, junction,
)


def test_families_complete():
    for name, border in UNICODE_BORDERS.items():
        border.validate(name)
        assert not border.empty

def test_validate_rejects_missing_glyph():
    with pytest.raises(ValueError):
        BorderStyle(top="-").validate("partial")

def test_junction_total():
    thin = UNICODE_BORDERS["thin"]
    assert len(JUNCTIONS) == 16
    for mask in range(16):
        glyph = junction(thin, mask)
        assert isinstance(glyph, str)
        assert len(glyph) == (0 if mask == 0 else 1)

def test_junction_glyphs():
    thin = UNICODE_BORDERS["thin"]
    assert junction(thin, UP | DOWN) == "│"
    assert junction(thin, LEFT | RIGHT) == "─"
    assert junction(thin, RIGHT | DOWN) == "┌"
    assert junction(thin, UP | LEFT) == "┘"
    assert junction(thin, UP | RIGHT | DOWN) == "├"
    assert junction(thin, UP | DOWN | LEFT) == "┤"
    assert junction(thin, RIGHT | DOWN | LEFT) == "┬"
    assert junction(thin, UP | RIGHT | LEFT) == "┴"
    assert junction(thin, UP | RIGHT | DOWN | LEFT) == "┼"

def test_junction_empty_border():
    for mask in range(16):
        assert junction(BorderStyle(), mask) == ""

def test_junction_out_of_range():
    with pytest.raises(ValueError):
        junction(UNICODE_BORDERS["thin"], 16)
    with pytest.raises(ValueError):
        junction(UNICODE_BORDERS["thin"], -1)
