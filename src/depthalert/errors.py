"""Exception types raised by the obstacle engine."""


class DepthAlertError(Exception):
    """Base class for depthalert errors."""


class FrameShapeError(DepthAlertError, ValueError):
    """A depth frame has a zero dimension or a buffer that doesn't match width x height."""

    def __init__(self, width: int, height: int, size: int) -> None:
        super().__init__(
            f"Malformed depth frame: {width}x{height} expects {width * height} samples, got {size}"
        )
        self.width = width
        self.height = height
        self.size = size
