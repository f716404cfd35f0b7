"""Tests for the measurement collaborators."""

import pytest

from crooked_text.render.constants import (
    BOLD_WIDTH_FACTOR,
    CHAR_WIDTH_RATIO,
    LINE_HEIGHT_RATIO,
    NARROW_CHAR_WIDTH_RATIO,
    WIDE_CHAR_WIDTH_RATIO,
)
from crooked_text.render.measure import EstimatingMeasurer, FontMeasurer, measure_all
from crooked_text.text.style import TextStyle
from crooked_text.text.units import CharacterUnit, split_units


def test_estimating_widths_by_character_class():
    m = EstimatingMeasurer(font_size=10)
    style = TextStyle()
    assert m.measure(CharacterUnit(0, "a"), style).width == pytest.approx(10 * CHAR_WIDTH_RATIO)
    assert m.measure(CharacterUnit(0, "i"), style).width == pytest.approx(10 * NARROW_CHAR_WIDTH_RATIO)
    assert m.measure(CharacterUnit(0, "W"), style).width == pytest.approx(10 * WIDE_CHAR_WIDTH_RATIO)
    assert m.measure(CharacterUnit(0, "漢"), style).width == pytest.approx(10)


def test_estimating_height_and_baseline_offset():
    m = EstimatingMeasurer(font_size=20)
    plain = m.measure(CharacterUnit(0, "a"), TextStyle())
    raised = m.measure(CharacterUnit(0, "a"), TextStyle().with_baseline_offset(-4))
    assert plain.height == pytest.approx(20 * LINE_HEIGHT_RATIO)
    assert raised.height == pytest.approx(plain.height + 4)


def test_estimating_bold_is_wider():
    m = EstimatingMeasurer(font_size=10)
    unit = CharacterUnit(0, "a")
    regular = m.measure(unit, TextStyle())
    bold = m.measure(unit, TextStyle().bold())
    assert bold.width == pytest.approx(regular.width * BOLD_WIDTH_FACTOR)


def test_combining_mark_does_not_widen():
    m = EstimatingMeasurer(font_size=10)
    plain = m.measure(CharacterUnit(0, "e"), TextStyle())
    accented = m.measure(CharacterUnit(0, "e\u0301"), TextStyle())
    assert plain == accented


def test_measurer_rejects_bad_font_size():
    with pytest.raises(ValueError):
        EstimatingMeasurer(font_size=0)
    with pytest.raises(ValueError):
        FontMeasurer(font_size=-1)


def test_measure_all_keys_by_index():
    units = split_units("abc")
    sizes = measure_all(units, TextStyle(), EstimatingMeasurer(font_size=10))
    assert sorted(sizes) == [0, 1, 2]


def test_font_measurer_default_font():
    m = FontMeasurer(font_size=24)
    style = TextStyle()
    wide = m.measure(CharacterUnit(0, "W"), style)
    narrow = m.measure(CharacterUnit(1, "i"), style)
    assert wide.width > narrow.width > 0
    assert wide.height == narrow.height > 0


def test_font_measurer_caches_fonts():
    m = FontMeasurer(font_size=16)
    assert m.font() is m.font()


def test_font_measurer_missing_file():
    m = FontMeasurer(font_size=16, font_path="/nonexistent/font.ttf")
    with pytest.raises(OSError):
        m.measure(CharacterUnit(0, "a"), TextStyle())


def test_font_measurer_keeps_fractional_size():
    m = FontMeasurer(font_size=10.4)
    assert m.font().size == pytest.approx(10.4)
    narrow = FontMeasurer(font_size=10).measure(CharacterUnit(0, "W"), TextStyle())
    wider = m.measure(CharacterUnit(0, "W"), TextStyle())
    assert wider.width > narrow.width


def test_font_measurer_family_name():
    family = FontMeasurer(font_size=16).family_name
    assert isinstance(family, str) and family
