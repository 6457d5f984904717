#!/usr/bin/env python3
"""Basic usage example for ean13.

Demonstrates encoding numbers into EAN-13 bar patterns and rendering
them as PNG and SVG images.

Usage:
    python examples/basic_usage.py [font.ttf]
"""

import os
import sys
import tempfile

# Add parent directory to path for direct script execution
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ean13.barcode import BarcodeEAN13
from ean13.config import select_variant
from ean13.digits import checksum
from ean13.encoder import encode, modules


def example_encode():
    """Complete a 12-digit number and show its bar patterns."""
    print("=" * 60)
    print("Example 1: Encode a Number")
    print("=" * 60)

    payload = "123456789012"
    print(f"  Payload:      {payload}")
    print(f"  Check digit:  {checksum(payload)}")

    bars = encode(payload)
    print(f"  Patterns:     {len(bars)}")
    print(f"  Modules:      {modules(bars)}")
    print()


def example_save_png(font_path):
    """Render barcodes at a few scales and save them as PNG files."""
    print("=" * 60)
    print("Example 2: Save PNG Files")
    print("=" * 60)

    out_dir = tempfile.mkdtemp(prefix="ean13_")
    for scale in (2, 6, 12):
        barcode = BarcodeEAN13("605589605589", font_path, scale=scale)
        path = os.path.join(out_dir, f"barcode_{barcode.number}_x{scale}.png")
        barcode.save(path)
        print(f"  Scale {scale:2d}: {barcode.width}x{barcode.height} -> {path}")

    print()


def example_explicit_size(font_path):
    """Fit a barcode to an explicit canvas size."""
    print("=" * 60)
    print("Example 3: Explicit Dimensions")
    print("=" * 60)

    barcode = BarcodeEAN13("4006381333931", font_path)
    barcode.set_dimensions(620, 400)
    png = barcode.to_png()
    print(f"  Size:         {barcode.width}x{barcode.height}")
    print(f"  Derived scale:{barcode.scale:.2f}")
    print(f"  PNG size:     {len(png)} bytes")
    print()


def example_transparent_svg():
    """Render an SVG on a transparent background."""
    print("=" * 60)
    print("Example 4: Transparent SVG")
    print("=" * 60)

    barcode = BarcodeEAN13("0000000123456", scale=4, options=select_variant("transparent"))
    svg = barcode.to_svg()
    print(f"  Number:       {barcode.number}")
    print(f"  SVG length:   {len(svg)} chars")
    print()


if __name__ == "__main__":
    font = sys.argv[1] if len(sys.argv) > 1 else None
    example_encode()
    example_save_png(font)
    example_explicit_size(font)
    example_transparent_svg()
    print("All examples completed successfully.")
