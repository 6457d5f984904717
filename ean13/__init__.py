"""ean13 -- EAN-13 barcode encoder and raster renderer.

Encodes a numeric product identifier (12 or 13 digits) into the bar
patterns of an EAN-13 symbol and renders them, with the human-readable
digit strip underneath, as a PNG or SVG image at any scale from 2 to 12
pixels per module.

See: https://www.gs1.org/standards/barcodes/ean-upc
"""
