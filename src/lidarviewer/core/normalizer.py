import math

import numpy as np

from lidarviewer.core.errors import InvalidFrameShape
from lidarviewer.core.frames import GrayscaleFrame, RawDepthFrame

DEFAULT_MAX_DEPTH_METERS = 3.0

# Intensity gained per meter. Deliberately not rescaled by the ceiling:
# only [0, 1) m is linear, everything from 1 m up to the ceiling saturates.
INTENSITY_PER_METER = 255.0


def normalize(frame: RawDepthFrame, max_depth_meters: float = DEFAULT_MAX_DEPTH_METERS,
              sequence: int = 0) -> GrayscaleFrame:
    """
    Converts a depth frame in meters into an 8-bit grayscale frame.

    Each sample is clamped to max_depth_meters from above (there is no lower
    clamp), scaled by 255 per meter, clipped into [0, 255] and rounded half up.
    NaN samples map to 0, +inf saturates to 255 and -inf maps to 0.

    The frame's samples are read once and not retained, so the caller may
    release the sensor buffer as soon as this returns.
    """
    if not (math.isfinite(max_depth_meters) and max_depth_meters > 0):
        raise ValueError(f"max_depth_meters must be a positive number, got {max_depth_meters!r}")
    if not frame.shape_is_valid:
        raise InvalidFrameShape(frame.width, frame.height, frame.samples.size)

    # 1. Saturate far samples at the ceiling (allocates the only work buffer)
    depth = np.minimum(frame.samples, max_depth_meters, dtype=np.float64)

    # 2. Scale to intensity and clip, in place
    depth *= INTENSITY_PER_METER
    np.clip(depth, 0.0, 255.0, out=depth)

    # 3. Round half up; NaN survives clip and floor, so zero it last
    depth += 0.5
    np.floor(depth, out=depth)
    np.nan_to_num(depth, copy=False, nan=0.0)

    return GrayscaleFrame(frame.width, frame.height, depth.astype(np.uint8), sequence)
