"""Raster layout for EAN-13 barcodes.

Computes canvas geometry, bar rectangles and digit placements from an
encoded bar pattern. Nothing here touches a drawing surface, so the
layout can be checked without any rendering backend.

Geometry (fractions of the canvas height unless noted):
- Canvas: height = 60 * scale, width = 1.8 * height
- Bars: top at 0.025, bottom at 0.825; guards reach 0.15 further down
- First bar: bar_offset * width - scale, one module (= scale px) per bit
- Digits: font size 7 * scale, baseline at text_baseline, first digit at
  text_offset * width, half a font size extra after digits 1 and 7
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_OPTIONS, RenderOptions
from .encoder import is_guard

MIN_SCALE = 2
MAX_SCALE = 12
DEFAULT_SCALE = 2

HEIGHT_MODULES = 60  # Canvas height in modules
ASPECT_RATIO = 1.8  # Canvas width / height

BAR_TOP = 0.025
BAR_FLOOR = 0.825
GUARD_EXTENSION = 0.15

FONT_SCALE = 7  # Font size in modules
KERNING_GAP = 0.5  # Extra space after a guard, in font sizes
GAP_AFTER = (0, 6)  # Digit indexes followed by a guard


@dataclass(frozen=True)
class BarRect:
    """A filled bar rectangle in pixel space.

    ``right`` is exclusive: adjacent modules share an edge.
    """

    left: float
    top: float
    right: float
    bottom: float
    guard: bool = False


@dataclass(frozen=True)
class GlyphPlacement:
    """Where to draw one digit of the human-readable strip.

    Attributes:
        digit: The character to draw.
        x: Left edge of the glyph in pixels.
        y: Baseline of the glyph in pixels.
        font_size: Font size in pixels.
    """

    digit: str
    x: float
    y: float
    font_size: float


def prepare_scale(scale: float) -> float:
    """Clamp a module width to the supported range."""
    if scale < MIN_SCALE:
        return MIN_SCALE
    if scale > MAX_SCALE:
        return MAX_SCALE
    return scale


def canvas_size(scale: float) -> tuple[int, int]:
    """Compute the canvas (width, height) in pixels for a scale.

    The scale is clamped first.
    """
    height = prepare_scale(scale) * HEIGHT_MODULES
    width = ASPECT_RATIO * height
    return round(width), round(height)


def scale_from_dimensions(width: int, height: int, previous: float = DEFAULT_SCALE) -> float:
    """Back-derive the scale that an explicit canvas width implies.

    Only the width matters; height is accepted so callers can pass a
    full size pair. A width <= 0 is ignored and the previous scale is
    kept (clamped).
    """
    if width <= 0:
        return prepare_scale(previous)
    return prepare_scale(width / (ASPECT_RATIO * HEIGHT_MODULES))


def layout_bars(
    bars: list[str],
    canvas_width: int,
    canvas_height: int,
    scale: float,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> list[BarRect]:
    """Compute one filled rectangle per ink module.

    Args:
        bars: Encoded bar patterns, guards included.
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.
        scale: Module width in pixels.
        options: Layout ratios.

    Returns:
        Rectangles ordered left to right.
    """
    top = canvas_height * BAR_TOP
    floor = canvas_height * BAR_FLOOR
    guard_floor = floor + canvas_height * GUARD_EXTENSION

    rects: list[BarRect] = []
    x = canvas_width * options.bar_offset - scale
    for pattern in bars:
        guard = is_guard(pattern)
        bottom = guard_floor if guard else floor
        for bit in pattern:
            if bit == "1":
                rects.append(BarRect(x, top, x + scale, bottom, guard))
            x += scale

    return rects


def layout_text(
    number: str,
    canvas_width: int,
    canvas_height: int,
    scale: float,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> list[GlyphPlacement]:
    """Compute the placement of each digit under the bars.

    The placement is advisory: glyph shapes and exact advance widths
    are up to the font renderer.

    Args:
        number: The 13-digit number.
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.
        scale: Module width in pixels.
        options: Layout ratios.

    Returns:
        One placement per digit, left to right.
    """
    font_size = scale * FONT_SCALE
    x = canvas_width * options.text_offset
    y = canvas_height * options.text_baseline

    placements: list[GlyphPlacement] = []
    for i, digit in enumerate(number):
        placements.append(GlyphPlacement(digit, x, y, font_size))
        if i in GAP_AFTER:
            x += font_size * KERNING_GAP
        x += font_size

    return placements
