from dataclasses import dataclass, field

import numpy as np

from lidarviewer.core.errors import InvalidFrameShape

BYTES_PER_SAMPLE = np.dtype(np.float32).itemsize


@dataclass(eq=False)
class RawDepthFrame:
    """One depth snapshot in meters, row-major.

    The samples usually alias a buffer owned by the sensor, so a frame is only
    valid inside the call (or ``with`` block) that produced it.
    """
    width: int
    height: int
    samples: np.ndarray

    def __post_init__(self):
        # No copy when the sensor already hands us contiguous float32
        self.samples = np.asarray(self.samples, dtype=np.float32).reshape(-1)

    @property
    def shape_is_valid(self) -> bool:
        return (self.width > 0 and self.height > 0
                and self.samples.size == self.width * self.height)

    @classmethod
    def from_buffer(cls, buffer, width: int, height: int, bytes_per_row: int = None) -> "RawDepthFrame":
        """
        Wraps a raw float32 pixel buffer, dropping any row padding.
        bytes_per_row: stride reported by the sensor, defaults to a packed row
        """
        raw = np.frombuffer(buffer, dtype=np.uint8)
        row_bytes = width * BYTES_PER_SAMPLE
        if bytes_per_row is None:
            bytes_per_row = row_bytes
        if width <= 0 or height <= 0 or bytes_per_row < row_bytes or bytes_per_row % BYTES_PER_SAMPLE:
            raise InvalidFrameShape(width, height, raw.size // BYTES_PER_SAMPLE)

        # The last row may stop right after its visible samples, or carry its padding
        needed = bytes_per_row * (height - 1) + row_bytes
        if raw.size < needed or raw.size > bytes_per_row * height:
            raise InvalidFrameShape(width, height, raw.size // BYTES_PER_SAMPLE)

        if bytes_per_row == row_bytes:
            samples = raw[:needed].view(np.float32)
        else:
            # Padding columns are not samples; keep only the visible part of each row
            stride = bytes_per_row // BYTES_PER_SAMPLE
            rows = np.zeros(bytes_per_row * height, dtype=np.uint8)
            rows[:needed] = raw[:needed]
            samples = rows.view(np.float32).reshape(height, stride)[:, :width].copy()
        return cls(width, height, samples)


@dataclass(eq=False)
class GrayscaleFrame:
    """Normalized 8-bit depth image, one intensity per source sample."""
    width: int
    height: int
    pixels: np.ndarray
    sequence: int = field(default=0)

    def __post_init__(self):
        if self.pixels.size != self.width * self.height:
            raise InvalidFrameShape(self.width, self.height, self.pixels.size)
        # Presentation transforms must never touch the pixel data
        self.pixels.flags.writeable = False

    @property
    def bytes_per_line(self) -> int:
        return self.width

    def as_image(self) -> np.ndarray:
        """(height, width) view of the pixels, as expected by image libraries."""
        return self.pixels.reshape(self.height, self.width)
