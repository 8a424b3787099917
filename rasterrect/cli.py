"""Command-line entry point: convert an image file to a rectangle SVG."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rasterrect.config import settings
from rasterrect.engine import ConversionConfig, RasterRectError, convert_with_stats
from rasterrect.utils.image_io import decode_image

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rasterrect",
        description="Convert a raster image into an SVG made of colored rectangles.",
    )
    parser.add_argument("input", type=Path, help="Source image (any format Pillow reads)")
    parser.add_argument("-o", "--output", type=Path, default=None, help="SVG output path (default: stdout)")
    parser.add_argument("--stride", type=int, default=None, help="Sampling stride override (>= 1)")
    parser.add_argument(
        "--max-dimension",
        type=int,
        default=settings.max_dimension,
        help="Downsize so the longest side fits (0 keeps source size)",
    )
    parser.add_argument("--log-level", default=settings.rasterrect_log_level, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        data = args.input.read_bytes()
    except OSError as e:
        print(f"rasterrect: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    try:
        buffer = decode_image(data, max_dimension=args.max_dimension)
        config = ConversionConfig(stride_divisor=settings.stride_divisor)
        result = convert_with_stats(buffer, stride=args.stride, config=config)
    except RasterRectError as e:
        print(f"rasterrect: {e}", file=sys.stderr)
        return 1

    svg = result.document.to_svg()
    if args.output is None:
        sys.stdout.write(svg + "\n")
    else:
        args.output.write_text(svg, encoding="utf-8")
        logger.info(
            "Wrote %s: %d rects, %d colors, stride %d",
            args.output,
            result.rect_count,
            result.color_count,
            result.stride,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
