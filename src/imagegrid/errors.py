"""Exception types raised by the grid pipeline."""


class ImageGridError(Exception):
    """Base class for errors raised by imagegrid itself."""


class GeometryError(ImageGridError, ValueError):
    """
    Raised when an image's bounds break the layout invariants.

    Every image fed to the layout must have bounds starting at (0, 0),
    and every placement must fit inside the canvas.
    """
