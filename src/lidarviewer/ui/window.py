import logging
import threading
import time

import cv2
import numpy as np

from lidarviewer.core.handoff import FrameHandoff
from lidarviewer.core.session import CaptureSession, run_capture_thread

logger = logging.getLogger(__name__)


class RenderWindow:
    """Plain OpenCV preview, for machines where a Qt window is not an option."""

    def __init__(self, name="LiDAR Viewer"):
        self.name = name
        cv2.namedWindow(self.name, cv2.WINDOW_NORMAL)

    def show(self, frame):
        cv2.imshow(self.name, frame)

    def process_input(self):
        key = cv2.waitKey(1) & 0xFF
        if key == 27 or key == ord('q'): # ESC or q
            return False
        return key

    def destroy(self):
        cv2.destroyAllWindows()


def run_opencv_viewer(session: CaptureSession, handoff: FrameHandoff, display_interval_ms=33):
    """
    Keys: space toggles start / pause, s stops, q or ESC quits.
    The session starts running immediately.
    """
    window = RenderWindow()
    stop_event = threading.Event()
    capture = run_capture_thread(session, stop_event)
    session.start()

    last_sequence = None
    try:
        while True:
            frame = handoff.current_frame()
            if frame is not None and frame.sequence != last_sequence:
                last_sequence = frame.sequence
                window.show(np.ascontiguousarray(handoff.orientation.apply(frame.as_image())))

            key = window.process_input()
            if key is False:
                break
            if key == ord(' '):
                if session.is_running:
                    session.pause()
                else:
                    session.start()
            elif key == ord('s'):
                session.stop()
            time.sleep(display_interval_ms / 1000.0)
    finally:
        stop_event.set()
        capture.join()
        window.destroy()
        logger.info("Viewer closed after %d frames (%d dropped before display)",
                    handoff.published, handoff.dropped)
