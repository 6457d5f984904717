"""Rendering options for EAN-13 barcodes.

Options are immutable and validated on construction. Ratios are
fractions of the canvas height or width, so the same options work at
every scale.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Background alpha range, GD convention: 0 = opaque, 127 = fully transparent
MIN_ALPHA = 0
MAX_ALPHA = 127

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


@dataclass(frozen=True)
class RenderOptions:
    """Colors and layout ratios used when drawing a barcode.

    Attributes:
        ink_color: Hex color for bars and digits.
        background_color: Hex color for the canvas.
        alpha: Background transparency, 0 (opaque) to 127 (transparent).
        bar_offset: Left edge of the first bar as a fraction of the canvas width.
        text_offset: Left edge of the first digit as a fraction of the canvas width.
        text_baseline: Digit baseline as a fraction of the canvas height.
    """

    ink_color: str = "#000000"
    background_color: str = "#FFFFFF"
    alpha: int = 0
    bar_offset: float = 0.2 / 1.8
    text_offset: float = 0.05
    text_baseline: float = 0.96

    def __post_init__(self) -> None:
        if not MIN_ALPHA <= self.alpha <= MAX_ALPHA:
            raise ValueError(f"alpha must be {MIN_ALPHA}-{MAX_ALPHA}, got {self.alpha}")
        for name in ("ink_color", "background_color"):
            value = getattr(self, name)
            if not _HEX_COLOR.match(value):
                raise ValueError(f"{name} must be a #RRGGBB hex color, got {value!r}")

    @property
    def background_opacity(self) -> int:
        """Background alpha on Pillow's 0-255 opacity scale."""
        return round(255 * (MAX_ALPHA - self.alpha) / MAX_ALPHA)


DEFAULT_OPTIONS = RenderOptions()

VARIANTS: dict[str, RenderOptions] = {
    "opaque": DEFAULT_OPTIONS,
    "transparent": RenderOptions(alpha=MAX_ALPHA),
}


def select_variant(name: str) -> RenderOptions:
    """Select a named options preset.

    Raises:
        ValueError: If name is not a known variant.
    """
    if name not in VARIANTS:
        valid = ", ".join(VARIANTS.keys())
        raise ValueError(f"Unknown variant '{name}'. Valid variants: {valid}")
    return VARIANTS[name]
