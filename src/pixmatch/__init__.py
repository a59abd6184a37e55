"""
Core package for locating exact copies of a template image inside a larger image.
"""

from .errors import DebugRenderError, InvalidImageError, PixmatchError
from .matching.engine import MatchPoint, TemplateMatcher, find_images_in_image
from .matching.grid import PixelGrid, PixelSource, extract_pixel_grid

__all__ = [
    "DebugRenderError",
    "InvalidImageError",
    "MatchPoint",
    "PixelGrid",
    "PixelSource",
    "PixmatchError",
    "TemplateMatcher",
    "extract_pixel_grid",
    "find_images_in_image",
]
