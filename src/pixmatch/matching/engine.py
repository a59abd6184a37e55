from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, NamedTuple

import numpy as np

from ..debug.overlay import DebugImageWriter, OverlayRenderer
from .grid import ImageLike, PixelGrid, extract_pixel_grid

logger = logging.getLogger(__name__)


class MatchPoint(NamedTuple):
    """
    Top-left corner of an exact template occurrence.
    """

    x: int
    y: int


@dataclass(slots=True)
class TemplateMatcher:
    """
    Exhaustive exact-pixel template search.

    Holds no per-search state, so one instance can serve any number of calls.
    ``renderer`` receives the match geometry when a debug dump is requested;
    when unset a ``DebugImageWriter`` targeting the working directory is used.
    """

    renderer: OverlayRenderer | None = None

    def find_images_in_image(
        self,
        region_image: ImageLike,
        template_image: ImageLike,
        stop_after_first: bool = False,
        dump_debug_image: bool = False,
    ) -> List[MatchPoint]:
        """
        Find every occurrence of ``template_image`` inside ``region_image``.

        Returns top-left corners in raster order. With ``stop_after_first``
        the scan ends at the first occurrence and at most one point is returned.
        """
        region = extract_pixel_grid(region_image)
        template = extract_pixel_grid(template_image)
        logger.debug("Image to search in: %dx%d pixel", region.width, region.height)
        logger.debug("Image to find: %dx%d pixel", template.width, template.height)

        start = time.perf_counter()
        matches = self.find_matches(region, template, stop_after_first)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.debug("Found %d match(es) in %.2f ms", len(matches), elapsed_ms)

        if dump_debug_image:
            self._dump_debug_image(region, template, matches)
        return matches

    def find_matches(
        self,
        region: PixelGrid,
        template: PixelGrid,
        stop_after_first: bool = False,
    ) -> List[MatchPoint]:
        """
        Scan ``region`` row by row for exact copies of ``template``.
        """
        matches: List[MatchPoint] = []
        if region.pixels.shape[2:] != template.pixels.shape[2:]:
            # Different channel layouts never hold equal pixels.
            logger.debug("Channel layouts differ (%d vs %d), no match possible", region.channels, template.channels)
            return matches

        region_width, region_height = region.size
        template_width, template_height = template.size
        rows = region_height - template_height + 1
        cols = region_width - template_width + 1
        if rows <= 0 or cols <= 0:
            return matches

        # Only positions where the template fits are anchor candidates; argwhere keeps raster order.
        anchor = template[0, 0]
        anchored = (region.pixels[:rows, :cols] == anchor).reshape(rows, cols, -1).all(axis=-1)
        for y, x in np.argwhere(anchored):
            x, y = int(x), int(y)
            if not self._matches_at(region, template, x, y):
                continue

            matches.append(MatchPoint(x, y))
            if stop_after_first:
                return matches

        return matches

    @staticmethod
    def _matches_at(region: PixelGrid, template: PixelGrid, x: int, y: int) -> bool:
        width = template.width
        if not np.array_equal(region.row(y, x, width), template.row(0)):
            return False
        for y2 in range(1, template.height):
            if not np.array_equal(region.row(y + y2, x, width), template.row(y2)):
                return False
        return True

    def _dump_debug_image(
        self,
        region: PixelGrid,
        template: PixelGrid,
        matches: List[MatchPoint],
    ) -> None:
        renderer = self.renderer if self.renderer is not None else DebugImageWriter()
        try:
            renderer.render(region.pixels, list(matches), template.size)
        except Exception:
            logger.exception("Debug overlay rendering failed; returning %d match(es) regardless", len(matches))


def find_images_in_image(
    region_image: ImageLike,
    template_image: ImageLike,
    stop_after_first: bool = False,
    dump_debug_image: bool = False,
    renderer: OverlayRenderer | None = None,
) -> List[MatchPoint]:
    """
    Convenience wrapper building a fresh ``TemplateMatcher`` for a single search.
    """
    matcher = TemplateMatcher(renderer=renderer)
    return matcher.find_images_in_image(
        region_image,
        template_image,
        stop_after_first=stop_after_first,
        dump_debug_image=dump_debug_image,
    )


__all__ = ["MatchPoint", "TemplateMatcher", "find_images_in_image"]
