from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Protocol, Sequence, Tuple

import cv2
import numpy as np

from ..errors import DebugRenderError

logger = logging.getLogger(__name__)

# OpenCV colours are BGR; this is LawnGreen.
LAWN_GREEN = (0, 252, 124)


class OverlayRenderer(Protocol):
    """
    Receives the geometry of a finished search for out-of-band visualisation.
    """

    def render(
        self,
        pixels: np.ndarray,
        matches: Sequence[Tuple[int, int]],
        size: Tuple[int, int],
    ) -> Path | None: ...


@dataclass(slots=True)
class DebugImageWriter:
    """
    Outline every match on a copy of the region and save it under a timestamped name.
    """

    output_dir: Path = Path(".")
    color: Tuple[int, int, int] = LAWN_GREEN
    thickness: int = 3
    extension: str = ".bmp"

    def __post_init__(self) -> None:
        if self.thickness < 1:
            raise ValueError("thickness must be >= 1")
        if not self.extension.startswith("."):
            raise ValueError("extension must start with '.'")
        self.output_dir = Path(self.output_dir)

    def render(
        self,
        pixels: np.ndarray,
        matches: Sequence[Tuple[int, int]],
        size: Tuple[int, int],
    ) -> Path:
        annotated = self.annotate(pixels, matches, size)
        output_path = self._next_path()
        try:
            written = cv2.imwrite(str(output_path), annotated)
        except cv2.error as exc:
            raise DebugRenderError(f"Unable to encode debug image {output_path}") from exc
        if not written:
            raise DebugRenderError(f"Unable to write debug image to {output_path}")
        logger.info("Debug image saved as %s", output_path)
        return output_path

    def annotate(
        self,
        pixels: np.ndarray,
        matches: Sequence[Tuple[int, int]],
        size: Tuple[int, int],
    ) -> np.ndarray:
        """
        Return a BGR(A) copy of ``pixels`` with a rectangle outline at each match.
        """
        if pixels.dtype != np.uint8:
            pixels = np.clip(pixels, 0, 255).astype(np.uint8)
        if pixels.ndim == 3 and pixels.shape[2] == 1:
            pixels = pixels[:, :, 0]

        if pixels.ndim == 2:
            annotated = cv2.cvtColor(np.ascontiguousarray(pixels), cv2.COLOR_GRAY2BGR)
        else:
            annotated = np.ascontiguousarray(pixels).copy()

        width, height = size
        color = self.color if annotated.shape[2] != 4 else (*self.color, 255)
        for x, y in matches:
            # cv2.rectangle takes inclusive corners
            cv2.rectangle(annotated, (x, y), (x + width - 1, y + height - 1), color, self.thickness)
        return annotated

    def _next_path(self) -> Path:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        output_path = self.output_dir / f"{stamp}{self.extension}"
        counter = 1
        while output_path.exists():
            output_path = self.output_dir / f"{stamp}_{counter}{self.extension}"
            counter += 1
        return output_path


__all__ = ["DebugImageWriter", "LAWN_GREEN", "OverlayRenderer"]
