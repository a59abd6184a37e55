"""
IO helpers for loading region and template images from disk.
"""

from .image_loader import load_color, load_grayscale, load_unchanged

__all__ = ["load_color", "load_grayscale", "load_unchanged"]
