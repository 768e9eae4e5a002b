import logging

from PySide6.QtCore import QThread, Signal

from lidarviewer.core.session import CaptureSession

logger = logging.getLogger(__name__)


class DepthStreamWorker(QThread):
    """Capture thread: keeps stepping the session while the app is alive."""
    state_changed = Signal(str)

    def __init__(self, session: CaptureSession):
        super().__init__()
        self.session = session
        self.running = True

    def start_session(self):
        self.session.start()
        self.state_changed.emit(self.session.state.value)
        if not self.isRunning():
            self.start()

    def pause_session(self):
        self.session.pause()
        self.state_changed.emit(self.session.state.value)

    def stop_session(self):
        self.session.stop()
        self.state_changed.emit(self.session.state.value)

    def run(self):
        logger.info("Depth capture thread started")
        while self.running:
            _, delay_ms = self.session.step()
            if delay_ms:
                self.msleep(delay_ms)
        logger.info("Depth capture thread finished")

    def stop(self):
        self.running = False
        self.wait()
