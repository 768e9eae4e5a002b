import logging

import numpy as np

from lidarviewer.core.errors import SensorError

logger = logging.getLogger(__name__)


class KinectV1:
    """Kinect v1 depth stream through libfreenect, converted to meters."""

    def __init__(self, index=0):
        try:
            import freenect
        except ImportError as e:
            raise SensorError('Kinect v1 dependencies are not installed (libfreenect Python wrapper)') from e

        self._freenect = freenect
        self.name = 'kinect_v1'
        self.depth_width = 640
        self.depth_height = 480
        self.id = index
        self.frame_interval_ms = 0  # sync_get_depth blocks until the next frame
        self.depth = None
        logger.info("Kinect v1 #%d selected (%dx%d)", self.id, self.depth_width, self.depth_height)

    def get_frame(self) -> np.ndarray:
        result = self._freenect.sync_get_depth(index=self.id, format=self._freenect.DEPTH_MM)
        if result is None:
            raise SensorError(f"Kinect v1 #{self.id} returned no depth frame")

        depth_mm = result[0]
        self.depth = depth_mm.astype(np.float32)
        # freenect reports 0 for pixels without a reading
        self.depth[depth_mm == 0] = np.nan
        self.depth *= 0.001
        return self.depth

    def close(self):
        self._freenect.sync_stop()
