class LiDARViewerError(Exception):
    """Base class for every error raised by the viewer."""


class InvalidFrameShape(LiDARViewerError, ValueError):
    """A depth frame's declared dimensions do not match its sample count."""

    def __init__(self, width, height, sample_count):
        self.width = width
        self.height = height
        self.sample_count = sample_count
        super().__init__(
            f"Depth frame declared as {width}x{height} does not match its {sample_count} samples"
        )


class SensorError(LiDARViewerError):
    """The sensing backend is unavailable or failed to deliver a frame."""
