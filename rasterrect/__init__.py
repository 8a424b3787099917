"""rasterrect: raster images to rectangle-based SVG."""

__version__ = "0.1.0"
