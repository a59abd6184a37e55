"""
Exception hierarchy shared by the matching core and its collaborators.
"""


class PixmatchError(Exception):
    """Base exception for all pixmatch errors."""


class InvalidImageError(PixmatchError, ValueError):
    """An input image has a non-positive dimension or an unusable pixel layout."""


class DebugRenderError(PixmatchError):
    """The debug overlay could not be encoded or written."""


__all__ = ["DebugRenderError", "InvalidImageError", "PixmatchError"]
