"""Tests for SVG rendering."""

import logging
import xml.etree.ElementTree as ET

from crooked_text.layout.engine import ArcLayout, ArcText, settle
from crooked_text.layout.measurements import Size
from crooked_text.render.measure import EstimatingMeasurer
from crooked_text.render.svg import canvas_size, render_svg, style_attributes
from crooked_text.text.style import TextStyle
from crooked_text.themes import DARK_THEME, LIGHT_THEME

SVG_NS = "{http://www.w3.org/2000/svg}"


def _render(arc_text, theme=DARK_THEME, **kwargs):
    layout = settle(arc_text, EstimatingMeasurer(theme.font_size))
    return render_svg(layout, theme, **kwargs)


def _text_elements(svg):
    root = ET.fromstring(svg)
    return [el for el in root.iter() if el.tag == f"{SVG_NS}text"]


def test_render_produces_valid_svg():
    svg = _render(ArcText("Around", radius=80))
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg") or "svg" in root.tag


def test_render_one_text_element_per_character():
    texts = _text_elements(_render(ArcText("Around", radius=80)))
    assert [t.text for t in texts] == list("Around")


def test_render_rotates_around_center():
    arc = ArcText("AB", radius=100)
    layout = ArcLayout(arc)
    layout.report_many({0: Size(10, 10), 1: Size(10, 10)})
    svg = render_svg(layout, DARK_THEME)
    size = canvas_size(layout, DARK_THEME)
    c = f"{size / 2:g}"
    texts = _text_elements(svg)
    # 0.05 rad is 2.8648 degrees
    assert texts[0].get("transform") == f"rotate(-2.8648 {c} {c})"
    assert texts[1].get("transform") == f"rotate(2.8648 {c} {c})"
    assert float(texts[0].get("y")) == size / 2 - 100


def test_render_skips_unmeasured_units():
    layout = ArcLayout(ArcText("abc", radius=60))
    layout.report(1, Size(8, 12))
    texts = _text_elements(render_svg(layout, DARK_THEME))
    assert [t.text for t in texts] == ["b"]


def test_render_empty_text():
    svg = _render(ArcText("", radius=50))
    assert "svg" in svg
    assert _text_elements(svg) == []


def test_render_theme_colors():
    svg = _render(ArcText("Hi", radius=50), theme=LIGHT_THEME)
    assert LIGHT_THEME.text_color in svg
    svg = _render(ArcText("Hi", radius=50), theme=DARK_THEME)
    assert DARK_THEME.background_color in svg


def test_render_guide_circle():
    with_guide = ET.fromstring(_render(ArcText("Hi", radius=50), show_guide=True))
    without = ET.fromstring(_render(ArcText("Hi", radius=50)))
    circles = [el for el in with_guide.iter() if el.tag == f"{SVG_NS}circle"]
    assert len(circles) == 1
    assert circles[0].get("r") == "50"
    assert not [el for el in without.iter() if el.tag == f"{SVG_NS}circle"]


def test_render_accessibility_label():
    svg = _render(ArcText("Read me", radius=70))
    root = ET.fromstring(svg)
    groups = [el for el in root.iter() if el.tag == f"{SVG_NS}g"]
    assert groups[0].get("aria-label") == "Read me"
    assert groups[0].get("role") == "img"


def test_render_style_attributes():
    arc = ArcText("ab", radius=60).italic().bold().underline().strikethrough()
    texts = _text_elements(_render(arc))
    for t in texts:
        assert t.get("font-style") == "italic"
        assert t.get("font-weight") == "bold"
        assert t.get("text-decoration") == "underline line-through"


def test_style_attributes_plain():
    assert style_attributes(TextStyle()) == {}


def test_style_attributes_decoration_color_and_baseline():
    attrs = style_attributes(
        TextStyle().with_underline(color="#ff0000").with_baseline_offset(2.5)
    )
    assert attrs["text_decoration"] == "underline"
    assert attrs["style"] == "text-decoration-color: #ff0000"
    assert attrs["baseline_shift"] == "2.5"


def test_canvas_grows_with_radius():
    small = settle(ArcText("x", radius=20), EstimatingMeasurer(10))
    large = settle(ArcText("x", radius=200), EstimatingMeasurer(10))
    assert canvas_size(large, DARK_THEME) - canvas_size(small, DARK_THEME) == 360


def test_render_escapes_markup_characters():
    svg = _render(ArcText("a<&>b", radius=60))
    texts = _text_elements(svg)
    assert [t.text for t in texts] == list("a<&>b")


def test_render_font_family_override():
    layout = settle(ArcText("ab", radius=60), EstimatingMeasurer(18))
    texts = _text_elements(render_svg(layout, DARK_THEME, font_family="'DejaVu Sans'"))
    assert all(t.get("font-family") == "'DejaVu Sans'" for t in texts)
    texts = _text_elements(render_svg(layout, DARK_THEME))
    assert all(t.get("font-family") == DARK_THEME.font_family for t in texts)


def test_conflicting_decoration_colors_warn(caplog):
    style = (
        TextStyle()
        .with_underline(color="#ff0000")
        .with_strikethrough(color="#0000ff")
    )
    with caplog.at_level(logging.WARNING, logger="crooked_text.render.svg"):
        attrs = style_attributes(style)
    assert attrs["text_decoration"] == "underline line-through"
    assert attrs["style"] == "text-decoration-color: #ff0000"
    assert "#0000ff" in caplog.text


def test_matching_decoration_colors_do_not_warn(caplog):
    style = TextStyle().with_underline(color="red").with_strikethrough(color="red")
    with caplog.at_level(logging.WARNING, logger="crooked_text.render.svg"):
        style_attributes(style)
    assert caplog.records == []
