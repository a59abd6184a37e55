"""
Matching subpackage exposes pixel grid extraction and exact template search.
"""

from .engine import MatchPoint, TemplateMatcher, find_images_in_image
from .grid import PixelGrid, PixelSource, extract_pixel_grid

__all__ = [
    "MatchPoint",
    "PixelGrid",
    "PixelSource",
    "TemplateMatcher",
    "extract_pixel_grid",
    "find_images_in_image",
]
