from __future__ import annotations

from pathlib import Path
from typing import Union

import cv2
import numpy as np

PathLike = Union[str, Path]


def load_color(path: PathLike) -> np.ndarray:
    """
    Load an image as a BGR array, the layout screenshots are matched in.
    """
    return _read(path, cv2.IMREAD_COLOR)


def load_grayscale(path: PathLike) -> np.ndarray:
    """
    Load an image as a single-channel array.
    """
    return _read(path, cv2.IMREAD_GRAYSCALE)


def load_unchanged(path: PathLike) -> np.ndarray:
    # Keeps the alpha channel so BGRA templates compare channel for channel.
    return _read(path, cv2.IMREAD_UNCHANGED)


def _read(path: PathLike, flags: int) -> np.ndarray:
    image = cv2.imread(str(path), flags)
    if image is None:
        raise FileNotFoundError(f"Unable to load image at {path}")
    return image
