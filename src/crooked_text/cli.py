"""CLI for crooked-text."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path

import click

from crooked_text import __version__
from crooked_text.layout import Alignment, ArcLayout, ArcText, settle
from crooked_text.layout.constants import DEFAULT_RADIUS, DEFAULT_SPACING
from crooked_text.render import EstimatingMeasurer, FontMeasurer, render_svg
from crooked_text.render.constants import DEFAULT_FONT_SIZE
from crooked_text.text import TextStyle
from crooked_text.themes import THEMES


def _layout_options(func):
    """Options shared by every command that lays out text."""
    options = [
        click.option("--radius", type=float, default=DEFAULT_RADIUS,
                     help=f"Circle radius (default: {DEFAULT_RADIUS:g})"),
        click.option("--spacing", type=float, default=DEFAULT_SPACING,
                     help="Extra arc length between characters, may be negative"),
        click.option("--alignment", type=click.Choice([a.value for a in Alignment]),
                     default=Alignment.CENTER.value,
                     help="Which edge of the text sits on the radius (default: center)"),
        click.option("--font", "font_path", type=click.Path(exists=True, path_type=Path),
                     default=None,
                     help="TrueType/OpenType font used to measure and draw characters"),
        click.option("--bold-font", "bold_font_path",
                     type=click.Path(exists=True, path_type=Path), default=None,
                     help="Bold face measured with --bold; without it bold text "
                          "is measured with the --font face"),
        click.option("--font-size", type=click.FloatRange(min=0, min_open=True),
                     default=None,
                     help="Font size (default: theme font size)"),
        click.option("--italic", is_flag=True, help="Italic text"),
        click.option("--bold", is_flag=True, help="Bold text"),
        click.option("--weight", default=None, help="Font weight, e.g. 300 or semibold"),
        click.option("--underline", is_flag=True, help="Underline every character"),
        click.option("--strikethrough", is_flag=True, help="Strike through every character"),
        click.option("--baseline-offset", type=float, default=0.0,
                     help="Raise (positive) or lower (negative) the baseline"),
        click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
                     help="Visual theme (default: dark)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_style(italic: bool, bold: bool, weight: str | None,
                 underline: bool, strikethrough: bool,
                 baseline_offset: float) -> TextStyle:
    style = TextStyle()
    if italic:
        style = style.with_italic()
    if bold:
        style = style.bold()
    if weight:
        style = style.with_font_weight(weight)
    if underline:
        style = style.with_underline()
    if strikethrough:
        style = style.with_strikethrough()
    if baseline_offset:
        style = style.with_baseline_offset(baseline_offset)
    return style


def _settle_from_options(
    text: str, opts: dict
) -> tuple[ArcLayout, float, str | None]:
    """Build and settle a layout from command options.

    Returns the layout, the font size it was measured at, and the font
    family to draw with when a font file was given.
    """
    theme = THEMES[opts["theme"]]
    font_size = opts["font_size"]
    if font_size is None:
        font_size = theme.font_size or DEFAULT_FONT_SIZE
    style = _build_style(opts["italic"], opts["bold"], opts["weight"],
                         opts["underline"], opts["strikethrough"],
                         opts["baseline_offset"])
    try:
        arc_text = ArcText(
            text=text,
            radius=opts["radius"],
            alignment=Alignment(opts["alignment"]),
            spacing=opts["spacing"],
            style=style,
        )
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--radius/--spacing")

    font_family = None
    try:
        if opts["font_path"] is not None:
            measurer = FontMeasurer(font_size, font_path=opts["font_path"],
                                    bold_font_path=opts["bold_font_path"])
            family = measurer.family_name
            if family:
                font_family = f"'{family}', {theme.font_family}"
        else:
            measurer = EstimatingMeasurer(font_size)
        layout = settle(arc_text, measurer)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--font-size")
    except OSError as e:
        raise click.ClickException(f"Could not load font: {e}")
    return layout, font_size, font_family


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout passes to stderr")
def cli(verbose: bool) -> None:
    """crooked-text: Lay out text along a circular arc and render it to SVG."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.argument("text")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to arc_text.svg")
@click.option("--guide/--no-guide", default=False,
              help="Draw the radius as a dashed guide circle")
@_layout_options
def render(text: str, output: Path | None, guide: bool, **opts) -> None:
    """Render TEXT along an arc to SVG."""
    layout, font_size, font_family = _settle_from_options(text, opts)
    svg = render_svg(layout, THEMES[opts["theme"]], font_size=font_size,
                     show_guide=guide, font_family=font_family)
    if not svg.endswith("\n"):
        svg += "\n"

    if output is None:
        output = Path("arc_text.svg")

    output.write_text(svg, encoding="utf-8")
    click.echo(f"Rendered {len(layout.units)} characters "
               f"on radius {layout.arc_text.radius:g} -> {output}")


@cli.command()
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Print placements as JSON")
@_layout_options
def layout(text: str, as_json: bool, **opts) -> None:
    """Print the angle and radial offset of every character of TEXT."""
    arc_layout, _, _ = _settle_from_options(text, opts)
    directives = arc_layout.directives

    if as_json:
        rows = [
            {
                "index": d.index,
                "character": d.character,
                "angle": d.angle,
                "angle_degrees": math.degrees(d.angle),
                "radial_offset": d.radial_offset,
                "width": d.frame_width,
                "height": d.frame_height,
            }
            for d in directives
        ]
        click.echo(json.dumps(rows, indent=2, ensure_ascii=False))
        return

    click.echo(f"{'#':>3}  {'char':<6} {'angle':>10}  {'offset':>9}")
    for d in directives:
        click.echo(f"{d.index:>3}  {d.character!r:<6} "
                   f"{math.degrees(d.angle):>9.3f}°  {d.radial_offset:>9.3f}")


@cli.command()
def info() -> None:
    """Show available themes and alignment modes."""
    click.echo(f"crooked-text {__version__}")
    click.echo("Themes:")
    for name, theme in THEMES.items():
        click.echo(f"  {name}: {theme.text_color} on {theme.background_color}, "
                   f"{theme.font_size:g}px")
    click.echo("Alignments:")
    for alignment in Alignment:
        click.echo(f"  {alignment.value}")
