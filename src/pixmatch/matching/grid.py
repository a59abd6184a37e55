from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Tuple, Union, runtime_checkable

import numpy as np

from ..errors import InvalidImageError


@runtime_checkable
class PixelSource(Protocol):
    """
    Minimal image interface: dimensions plus a per-pixel colour accessor.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def pixel(self, x: int, y: int) -> Any: ...


@dataclass(frozen=True, slots=True)
class PixelGrid:
    """
    Read-only pixel colours of one image, addressed as ``grid[x, y]``.

    ``pixels`` keeps numpy's row-major layout: shape ``(height, width)`` for
    single-channel images and ``(height, width, channels)`` otherwise.
    """

    pixels: np.ndarray

    def __post_init__(self) -> None:
        if self.pixels.ndim not in (2, 3):
            raise InvalidImageError(f"pixel array must be 2D or 3D, got {self.pixels.ndim}D")
        height, width = self.pixels.shape[:2]
        if width <= 0 or height <= 0:
            raise InvalidImageError(f"image dimensions must be positive, got {width}x{height}")
        if self.pixels.ndim == 3 and self.pixels.shape[2] == 0:
            raise InvalidImageError("pixel array must have at least one channel")
        if self.pixels.flags.writeable:
            raise InvalidImageError("pixel array must be read-only")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def channels(self) -> int:
        return 1 if self.pixels.ndim == 2 else int(self.pixels.shape[2])

    def __getitem__(self, position: Tuple[int, int]) -> Any:
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} grid")
        return self.pixels[y, x]

    def row(self, y: int, x: int = 0, length: int | None = None) -> np.ndarray:
        """
        Horizontal run of ``length`` pixels on row ``y`` starting at column ``x``.
        """
        stop = self.width if length is None else x + length
        return self.pixels[y, x:stop]


ImageLike = Union[np.ndarray, PixelGrid, PixelSource]


def extract_pixel_grid(image: ImageLike) -> PixelGrid:
    """
    Convert an image into an immutable pixel grid of the same dimensions.

    Accepts numpy arrays as produced by OpenCV, objects implementing
    ``PixelSource``, or an existing grid (returned as is).
    """
    if isinstance(image, PixelGrid):
        return image
    if isinstance(image, np.ndarray):
        pixels = np.array(image, copy=True)
    elif isinstance(image, PixelSource):
        pixels = _read_pixel_source(image)
    else:
        raise TypeError(f"unsupported image type: {type(image).__name__}")

    pixels.setflags(write=False)
    return PixelGrid(pixels)


def _read_pixel_source(image: PixelSource) -> np.ndarray:
    width = int(image.width)
    height = int(image.height)
    if width <= 0 or height <= 0:
        raise InvalidImageError(f"image dimensions must be positive, got {width}x{height}")

    rows = [[image.pixel(x, y) for x in range(width)] for y in range(height)]
    try:
        pixels = np.asarray(rows)
    except ValueError as exc:
        raise InvalidImageError("pixel accessor returned values of inconsistent shape") from exc
    if pixels.ndim not in (2, 3):
        raise InvalidImageError("pixel accessor must return scalars or fixed-length channel tuples")
    return pixels


__all__ = ["ImageLike", "PixelGrid", "PixelSource", "extract_pixel_grid"]
