"""POST /api/convert: uploaded raster image to rectangle SVG."""

from __future__ import annotations

import asyncio
import logging
import time
from functools import partial

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from rasterrect.config import Settings
from rasterrect.dependencies import get_settings
from rasterrect.engine import ConversionConfig, ConversionResult, convert_with_stats
from rasterrect.models.responses import ConvertResponse, ErrorResponse
from rasterrect.utils.image_io import decode_image

logger = logging.getLogger(__name__)

router = APIRouter()


def _decode_and_convert(data: bytes, stride: int | None, settings: Settings) -> ConversionResult:
    """Sync decode + convert, run off the event loop."""
    buffer = decode_image(data, max_dimension=settings.max_dimension)
    config = ConversionConfig(stride_divisor=settings.stride_divisor)
    return convert_with_stats(buffer, stride=stride, config=config)


@router.post(
    "/convert",
    response_model=ConvertResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def convert_image(
    image: UploadFile | None = File(None, description="Raster image to convert"),
    stride: int | None = Form(None, ge=1, description="Sampling stride override"),
    settings: Settings = Depends(get_settings),
):
    if image is None:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="No image file provided").model_dump(),
        )

    start = time.perf_counter()
    data = await image.read()

    loop = asyncio.get_running_loop()
    try:
        result = await loop.run_in_executor(None, partial(_decode_and_convert, data, stride, settings))
    except Exception:
        # All failures collapse to one generic response
        logger.exception("Error converting image %r", image.filename)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Failed to convert image").model_dump(),
        )

    elapsed = (time.perf_counter() - start) * 1000
    doc = result.document
    return ConvertResponse(
        svg=doc.to_svg(),
        width=doc.width,
        height=doc.height,
        stride=result.stride,
        color_count=result.color_count,
        rect_count=result.rect_count,
        processing_time_ms=round(elapsed, 1),
    )
