class RenderError(Exception):
    """Base class for every error raised by the render pipeline."""


class DegenerateVectorError(RenderError, ZeroDivisionError):
    """A vector was divided by zero, usually by normalizing a zero-length vector."""


class InvalidDimensionsError(RenderError, ValueError):
    """Frame width or height is below 2, which leaves the viewport mapping undefined."""

    def __init__(self, width, height):
        super().__init__(f"frame dimensions must both be integers >= 2, got {width}x{height}")
        self.width = width
        self.height = height


class BufferSizeError(RenderError, ValueError):
    """The pixel buffer handed to the renderer does not fit the frame."""
