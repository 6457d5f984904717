"""EAN-13 barcode microservice -- FastAPI application.

Endpoints:
    POST /encode        -- Encode a number to a PNG image
    POST /encode/svg    -- Encode a number to an SVG string
    POST /checksum      -- Complete a number with its check digit
    GET  /health        -- Health check

The digit font is read from the EAN13_FONT_PATH environment variable
and checked once at startup; when unset, Pillow's bundled default font
is used.
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager

import structlog
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel, Field

from .barcode import BarcodeEAN13
from .config import MAX_ALPHA, MIN_ALPHA, RenderOptions
from .digits import complete
from .encoder import encode
from .errors import FontNotFound
from .layout import DEFAULT_SCALE

structlog.configure(
    processors=[
        structlog.dev.ConsoleRenderer(),
    ],
)

logger = structlog.get_logger(__name__)

VERSION = "0.1.0"


def resolve_font_path() -> str | None:
    """Read the digit font from the environment.

    Raises:
        FontNotFound: If EAN13_FONT_PATH names a file that does not exist.
    """
    font_path = os.environ.get("EAN13_FONT_PATH")
    if font_path is not None and not os.path.isfile(font_path):
        raise FontNotFound(font_path)
    return font_path


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.font_path = resolve_font_path()
    logger.info("service_started", font_path=app.state.font_path)
    yield


app = FastAPI(
    title="ean13",
    description="EAN-13 barcode encoder and PNG/SVG renderer",
    version=VERSION,
    lifespan=lifespan,
)


# --------------------------------------------------------------------------
# Request / Response models
# --------------------------------------------------------------------------


class EncodeRequest(BaseModel):
    """Request body for /encode and /encode/svg."""

    number: str = Field(
        ...,
        description="Up to 13 digits; 12 digits get a computed check digit",
        examples=["123456789012", "4006381333931"],
    )
    scale: float = Field(
        default=DEFAULT_SCALE,
        description="Module width in pixels, clamped to 2-12",
    )
    width: int | None = Field(
        default=None,
        description="Explicit canvas width; overrides the scale. Values <= 0 are ignored",
    )
    height: int | None = Field(
        default=None,
        description="Explicit canvas height. Values <= 0 are ignored",
    )
    alpha: int = Field(
        default=0,
        ge=MIN_ALPHA,
        le=MAX_ALPHA,
        description="Background transparency: 0 opaque, 127 transparent",
    )
    ink_color: str = Field(default="#000000", description="Hex color for bars and digits")
    background_color: str = Field(default="#FFFFFF", description="Hex color for the background")
    verify_checksum: bool = Field(
        default=False,
        description="Reject a supplied 13th digit that is not the correct check digit",
    )


class ChecksumRequest(BaseModel):
    """Request body for /checksum."""

    number: str = Field(..., description="Up to 13 digits", examples=["123456789012"])


class ChecksumResponse(BaseModel):
    """Response body for /checksum."""

    number: str = Field(description="Full 13-digit number")
    check_digit: int = Field(description="Check digit (last digit of number)")
    bars: list[str] = Field(description="Encoded bar patterns, guards included")


class HealthResponse(BaseModel):
    """Response body for /health."""

    status: str
    service: str
    version: str


def get_font_path(http_request: Request) -> str | None:
    return http_request.app.state.font_path


def _build_barcode(request: EncodeRequest, font_path: str | None) -> BarcodeEAN13:
    options = RenderOptions(
        ink_color=request.ink_color,
        background_color=request.background_color,
        alpha=request.alpha,
    )
    barcode = BarcodeEAN13(
        request.number,
        font_path,
        request.scale,
        options=options,
        verify_checksum=request.verify_checksum,
    )
    if request.width is not None or request.height is not None:
        barcode.set_dimensions(request.width or 0, request.height or 0)
    return barcode


# --------------------------------------------------------------------------
# Endpoints
# --------------------------------------------------------------------------


@app.post(
    "/encode",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "PNG-encoded barcode"},
        422: {"description": "Invalid input"},
    },
)
async def encode_png(
    request: EncodeRequest, font_path: str | None = Depends(get_font_path)
) -> Response:
    """Encode a number into an EAN-13 PNG image."""
    try:
        png_bytes = _build_barcode(request, font_path).to_png()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("encode_png_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Encoding failed")

    return Response(content=png_bytes, media_type="image/png")


@app.post(
    "/encode/svg",
    response_class=Response,
    responses={
        200: {
            "content": {"image/svg+xml": {}},
            "description": "SVG-encoded barcode",
        },
        422: {"description": "Invalid input"},
    },
)
async def encode_svg_endpoint(
    request: EncodeRequest, font_path: str | None = Depends(get_font_path)
) -> Response:
    """Encode a number into an EAN-13 SVG image."""
    try:
        svg_content = _build_barcode(request, font_path).to_svg()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("encode_svg_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Encoding failed")

    return Response(content=svg_content, media_type="image/svg+xml")


@app.post("/checksum", response_model=ChecksumResponse)
async def checksum_endpoint(request: ChecksumRequest) -> ChecksumResponse:
    """Complete a number with its check digit and return its bar patterns."""
    try:
        number = complete(request.number)
        bars = encode(number)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return ChecksumResponse(
        number=number,
        check_digit=int(number[-1]),
        bars=bars,
    )


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for Docker and load balancers."""
    return HealthResponse(
        status="healthy",
        service="ean13",
        version=VERSION,
    )
