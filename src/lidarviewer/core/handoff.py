import logging
import threading
from typing import Optional

from lidarviewer.core.frames import GrayscaleFrame
from lidarviewer.core.orientation import DEFAULT_ORIENTATION, DisplayOrientation

logger = logging.getLogger(__name__)


class FrameHandoff:
    """
    Single-slot, latest-wins handoff between the capture thread and the
    display thread.

    publish() replaces whatever frame is held; a frame the display never read
    is simply dropped. current_frame() returns None until the first publish
    and the newest frame from then on. Both sides only swap a reference under
    the lock, so neither can stall the other for longer than that.
    """

    def __init__(self, orientation: DisplayOrientation = DEFAULT_ORIENTATION):
        self.orientation = orientation
        self._lock = threading.Lock()
        self._frame: Optional[GrayscaleFrame] = None
        self._consumed = True
        self.published = 0
        self.dropped = 0

    @property
    def has_frame(self) -> bool:
        return self._frame is not None

    def publish(self, frame: GrayscaleFrame) -> None:
        with self._lock:
            if not self._consumed:
                self.dropped += 1
            self._frame = frame
            self._consumed = False
            self.published += 1
            count = self.published

        if count == 1 or count % 30 == 0:
            logger.debug("Published frame #%d (%dx%d), %d dropped so far",
                         count, frame.width, frame.height, self.dropped)

    def current_frame(self) -> Optional[GrayscaleFrame]:
        with self._lock:
            self._consumed = True
            return self._frame
