import logging
import math
from typing import Optional

from lidarviewer.core.errors import InvalidFrameShape
from lidarviewer.core.frames import GrayscaleFrame, RawDepthFrame
from lidarviewer.core.handoff import FrameHandoff
from lidarviewer.core.normalizer import DEFAULT_MAX_DEPTH_METERS, normalize

logger = logging.getLogger(__name__)


class DepthFrameProcessor:
    """
    Per-frame handler on the capture side: normalize, then publish.

    A frame that fails to normalize is skipped and counted; the previously
    published frame stays on screen and the capture loop carries on.
    """

    def __init__(self, handoff: FrameHandoff, max_depth_meters: float = DEFAULT_MAX_DEPTH_METERS):
        if not (math.isfinite(max_depth_meters) and max_depth_meters > 0):
            raise ValueError(f"max_depth_meters must be positive, got {max_depth_meters!r}")
        self.handoff = handoff
        self.max_depth_meters = max_depth_meters
        self.processed = 0
        self.skipped = 0

    def handle_frame(self, raw_frame: RawDepthFrame) -> Optional[GrayscaleFrame]:
        """Callback form, for sensors that push frames to a registered handler."""
        gray = self._normalize(raw_frame)
        if gray is not None:
            self._publish(gray)
        return gray

    def capture(self, sensor) -> Optional[GrayscaleFrame]:
        """Pulls one frame from the sensor; its buffer is released before publishing."""
        with sensor.locked_frame() as raw_frame:
            gray = self._normalize(raw_frame)
        if gray is not None:
            self._publish(gray)
        return gray

    def _normalize(self, raw_frame):
        try:
            return normalize(raw_frame, self.max_depth_meters, sequence=self.processed + 1)
        except InvalidFrameShape as e:
            self.skipped += 1
            logger.warning("Skipping depth frame: %s (%d skipped)", e, self.skipped)
            return None

    def _publish(self, gray):
        self.processed += 1
        self.handoff.publish(gray)
