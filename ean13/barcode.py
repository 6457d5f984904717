"""EAN-13 barcode component.

Ties the encoder, layout and renderer together behind one object:

    barcode = BarcodeEAN13("123456789012", "fonts/FreeSans.ttf", scale=6)
    barcode.save("out/barcode.png")

All validation (digits, font path) happens at construction, and the
save target is checked before a canvas is allocated, so a failure never
leaves a half-drawn image behind. Every render produces a fresh canvas.
"""

from __future__ import annotations

import os

import structlog
from PIL import Image

from .config import DEFAULT_OPTIONS, RenderOptions
from .digits import complete
from .encoder import encode, parity_key
from .errors import DirectoryNotFound, FontNotFound
from .layout import DEFAULT_SCALE, canvas_size, prepare_scale, scale_from_dimensions
from .renderer import draw_barcode, render_png, render_svg

logger = structlog.get_logger(__name__)


class BarcodeEAN13:
    """An EAN-13 barcode ready to be rendered.

    Attributes:
        number: The 13-digit number, check digit included.
        key: Parity key selected by the first digit.
        bars: Encoded bar patterns.
        font_path: TrueType font for the digits, or None for the default font.
        scale: Module width in pixels, within [2, 12].
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        options: Colors and layout ratios.
    """

    def __init__(
        self,
        number: str,
        font_path: str | None = None,
        scale: float = DEFAULT_SCALE,
        *,
        options: RenderOptions | None = None,
        verify_checksum: bool = False,
    ) -> None:
        """Validate the input and encode the number.

        Args:
            number: Up to 13 digits. Shorter numbers are zero-padded to
                12; a 12-digit number gets its check digit appended.
            font_path: TrueType font for the digits. None uses Pillow's
                bundled default font.
            scale: Module width in pixels, clamped to [2, 12].
            options: Colors and layout ratios.
            verify_checksum: Reject a supplied check digit that does not
                match the computed one.

        Raises:
            InvalidDigits: If number is not valid.
            FontNotFound: If font_path does not point to a file.
        """
        self.number = complete(number, verify=verify_checksum)
        if font_path is not None and not os.path.isfile(font_path):
            raise FontNotFound(font_path)

        self.key = parity_key(self.number)
        self.bars = encode(self.number)
        self.font_path = font_path
        self.options = options or DEFAULT_OPTIONS
        self.scale = prepare_scale(scale)
        self.width, self.height = canvas_size(self.scale)

        logger.debug(
            "barcode_created",
            number=self.number,
            parity_key=self.key,
            scale=self.scale,
            width=self.width,
            height=self.height,
        )

    def __repr__(self) -> str:
        return f"BarcodeEAN13({self.number!r}, scale={self.scale}, size={self.width}x{self.height})"

    def set_dimensions(self, width: int, height: int) -> None:
        """Override the canvas size.

        A width or height <= 0 keeps the current value. The scale is
        recomputed from the resulting width.
        """
        if width > 0:
            self.width = width
        if height > 0:
            self.height = height
        self.scale = scale_from_dimensions(self.width, self.height, self.scale)

        logger.debug(
            "dimensions_set",
            number=self.number,
            width=self.width,
            height=self.height,
            scale=self.scale,
        )

    def image(self) -> Image.Image:
        """Render onto a new canvas. The caller owns (and closes) the image."""
        return draw_barcode(
            self.number,
            self.bars,
            self.width,
            self.height,
            self.scale,
            self.font_path,
            self.options,
        )

    def save(self, path: str) -> None:
        """Render the barcode and write it to path as a PNG.

        Raises:
            DirectoryNotFound: If the parent directory of path does not exist.
        """
        directory = os.path.dirname(path) or "."
        if not os.path.isdir(directory):
            raise DirectoryNotFound(directory)

        with self.image() as image:
            image.save(path, format="PNG")

        logger.info("barcode_saved", number=self.number, path=path)

    def to_png(self) -> bytes:
        """Render the barcode as PNG bytes."""
        return render_png(
            self.number,
            self.bars,
            self.width,
            self.height,
            self.scale,
            self.font_path,
            self.options,
        )

    def to_svg(self) -> str:
        """Render the barcode as an SVG document."""
        return render_svg(self.number, self.bars, self.width, self.height, self.scale, self.options)
