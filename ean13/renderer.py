"""PNG and SVG rendering for EAN-13 barcodes.

Turns the primitives computed by :mod:`ean13.layout` into an image:
- Canvas: background color at the configured alpha
- Bars: one filled rectangle per ink module, in the ink color
- Digits: drawn at their baseline placements, in the ink color

Raster output uses Pillow. Glyph outlines come from the configured
TrueType font, or Pillow's bundled default font when none is given.
"""

from __future__ import annotations

import io

import structlog
from PIL import Image, ImageDraw, ImageFont

from .config import DEFAULT_OPTIONS, RenderOptions
from .layout import layout_bars, layout_text

logger = structlog.get_logger(__name__)


def _hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert a hex color string to (r, g, b) tuple."""
    h = hex_color.lstrip("#")
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def _load_font(font_path: str | None, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    if font_path is None:
        return ImageFont.load_default(size=size)
    return ImageFont.truetype(font_path, size)


def draw_barcode(
    number: str,
    bars: list[str],
    width: int,
    height: int,
    scale: float,
    font_path: str | None = None,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> Image.Image:
    """Draw a barcode onto a new RGBA canvas.

    The caller owns the returned image and should close it when done.

    Args:
        number: The 13-digit number printed under the bars.
        bars: Encoded bar patterns.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        scale: Module width in pixels.
        font_path: TrueType font for the digits, or None for the default font.
        options: Colors and layout ratios.

    Returns:
        The rendered Pillow image.
    """
    ink = _hex_to_rgb(options.ink_color) + (255,)
    background = _hex_to_rgb(options.background_color) + (options.background_opacity,)

    rects = layout_bars(bars, width, height, scale, options)
    placements = layout_text(number, width, height, scale, options)
    font = _load_font(font_path, round(placements[0].font_size)) if placements else None

    image = Image.new("RGBA", (width, height), background)
    draw = ImageDraw.Draw(image)

    for rect in rects:
        # Pillow rectangles include the right edge; ours is exclusive
        draw.rectangle(
            (round(rect.left), round(rect.top), round(rect.right) - 1, round(rect.bottom)),
            fill=ink,
        )

    for placement in placements:
        draw.text((placement.x, placement.y), placement.digit, fill=ink, font=font, anchor="ls")

    logger.debug(
        "barcode_drawn",
        number=number,
        width=width,
        height=height,
        scale=scale,
        bar_count=len(rects),
        glyph_count=len(placements),
    )
    return image


def render_png(
    number: str,
    bars: list[str],
    width: int,
    height: int,
    scale: float,
    font_path: str | None = None,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> bytes:
    """Render a barcode as PNG bytes.

    Args:
        number: The 13-digit number.
        bars: Encoded bar patterns.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        scale: Module width in pixels.
        font_path: TrueType font for the digits, or None for the default font.
        options: Colors and layout ratios.

    Returns:
        PNG image bytes.
    """
    buf = io.BytesIO()
    with draw_barcode(number, bars, width, height, scale, font_path, options) as image:
        image.save(buf, format="PNG")
    png_bytes = buf.getvalue()

    logger.debug("png_rendered", number=number, bytes=len(png_bytes))
    return png_bytes


def render_svg(
    number: str,
    bars: list[str],
    width: int,
    height: int,
    scale: float,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> str:
    """Render a barcode as an SVG string with the same geometry as the PNG.

    Returns:
        Complete SVG document as a string.
    """
    ink = options.ink_color
    opacity = options.background_opacity / 255

    svg_parts: list[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="0 0 {width} {height}" '
        f'width="{width}" height="{height}">',
        f'  <rect width="{width}" height="{height}" '
        f'fill="{options.background_color}" fill-opacity="{opacity:.2f}"/>',
    ]

    for rect in layout_bars(bars, width, height, scale, options):
        svg_parts.append(
            f'  <rect x="{rect.left:.2f}" y="{rect.top:.2f}" '
            f'width="{rect.right - rect.left:.2f}" height="{rect.bottom - rect.top:.2f}" '
            f'fill="{ink}"/>'
        )

    for placement in layout_text(number, width, height, scale, options):
        svg_parts.append(
            f'  <text x="{placement.x:.2f}" y="{placement.y:.2f}" '
            f'font-family="sans-serif" font-size="{placement.font_size:.2f}" '
            f'fill="{ink}">{placement.digit}</text>'
        )

    svg_parts.append("</svg>")
    svg_content = "\n".join(svg_parts)

    logger.debug("svg_rendered", number=number, width=width, height=height)
    return svg_content
