import enum
import logging
import threading

from lidarviewer.core.errors import SensorError
from lidarviewer.core.processor import DepthFrameProcessor

logger = logging.getLogger(__name__)

IDLE_POLL_MS = 20
SENSOR_RETRY_MS = 500


class SessionState(enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


class CaptureSession:
    """
    Start / pause / stop control over the flow of frames from a sensor into
    the processor. Outside RUNNING nothing is captured and the last published
    frame simply stays in the handoff.
    """

    def __init__(self, sensor, processor: DepthFrameProcessor, frame_interval_ms: int = 0):
        self.sensor = sensor
        self.processor = processor
        self.frame_interval_ms = frame_interval_ms
        self.state = SessionState.STOPPED
        self.last_error = None

    @property
    def is_running(self) -> bool:
        return self.state is SessionState.RUNNING

    def start(self):
        self._set_state(SessionState.RUNNING)

    def pause(self):
        self._set_state(SessionState.PAUSED)

    def stop(self):
        self._set_state(SessionState.STOPPED)

    def status_text(self) -> str:
        if self.last_error:
            return f"Sensor error: {self.last_error}"
        return f"Session: {self.state.value}"

    def _set_state(self, state):
        if state is not self.state:
            logger.info("Depth session %s -> %s", self.state.value, state.value)
            self.state = state

    def step(self):
        """
        Runs one capture iteration.
        Returns (frame or None, milliseconds to wait before the next step)
        """
        if not self.is_running:
            return None, IDLE_POLL_MS
        try:
            frame = self.processor.capture(self.sensor)
        except SensorError as e:
            logger.error("Depth sensor error: %s", e)
            self.last_error = str(e)
            return None, SENSOR_RETRY_MS
        except Exception as e:
            # Backend faults (USB, driver) must not end the capture loop
            logger.exception("Unexpected depth capture failure")
            self.last_error = f"{type(e).__name__}: {e}"
            return None, SENSOR_RETRY_MS
        self.last_error = None
        return frame, self.frame_interval_ms


def run_capture_thread(session: CaptureSession, stop_event: threading.Event) -> threading.Thread:
    """Steps the session on a daemon thread until stop_event is set."""
    def loop():
        while not stop_event.is_set():
            _, delay_ms = session.step()
            if delay_ms:
                stop_event.wait(delay_ms / 1000.0)

    thread = threading.Thread(target=loop, name="depth-capture", daemon=True)
    thread.start()
    return thread
