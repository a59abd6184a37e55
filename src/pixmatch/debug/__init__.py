"""
Debug collaborators that visualise match results outside the search itself.
"""

from .overlay import LAWN_GREEN, DebugImageWriter, OverlayRenderer

__all__ = ["DebugImageWriter", "LAWN_GREEN", "OverlayRenderer"]
