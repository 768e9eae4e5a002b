import logging

from PySide6.QtWidgets import (QMainWindow, QLabel, QVBoxLayout, QWidget,
                             QPushButton, QHBoxLayout)
from PySide6.QtGui import QPixmap
from PySide6.QtCore import Qt, QTimer, Slot

from lidarviewer.core.handoff import FrameHandoff
from lidarviewer.ui.image import oriented_qimage
from lidarviewer.ui.worker import DepthStreamWorker

logger = logging.getLogger(__name__)


class ViewerMainWindow(QMainWindow):
    def __init__(self, handoff: FrameHandoff, worker: DepthStreamWorker, display_interval_ms=33):
        super().__init__()
        self.setWindowTitle("LiDAR Viewer")
        self.resize(900, 1000)
        self.setStyleSheet("""
        QMainWindow { background-color: #000000; }
        QLabel { color: #eee; }
        QPushButton {
            color: #fff;
            border-radius: 8px;
            padding: 10px 18px;
        }
        #StartBtn { background-color: #2e8b57; }
        #PauseBtn { background-color: #c9a227; }
        #StopBtn { background-color: #c0392b; }
    """)

        self.handoff = handoff
        self.worker = worker
        self.last_sequence = None

        # --- UI SETUP ---
        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(0, 0, 0, 0)

        # Viewport setup
        self.display_label = QLabel("Press Start to stream depth")
        self.display_label.setAlignment(Qt.AlignCenter)
        self.display_label.setStyleSheet("background-color: #000;")
        self.display_label.setMinimumSize(1, 1)

        self.status_label = QLabel("Session: stopped")
        self.status_label.setAlignment(Qt.AlignCenter)

        self.start_btn = QPushButton("Start")
        self.start_btn.setObjectName("StartBtn")
        self.start_btn.clicked.connect(self.worker.start_session)

        self.pause_btn = QPushButton("Pause")
        self.pause_btn.setObjectName("PauseBtn")
        self.pause_btn.clicked.connect(self.worker.pause_session)

        self.stop_btn = QPushButton("Stop")
        self.stop_btn.setObjectName("StopBtn")
        self.stop_btn.clicked.connect(self.worker.stop_session)

        button_row = QHBoxLayout()
        button_row.setContentsMargins(20, 10, 20, 20)
        button_row.addStretch()
        button_row.addWidget(self.start_btn)
        button_row.addWidget(self.pause_btn)
        button_row.addWidget(self.stop_btn)
        button_row.addStretch()

        main_layout.addWidget(self.display_label, 1) # 1 makes it expand
        main_layout.addWidget(self.status_label)
        main_layout.addLayout(button_row)

        container = QWidget()
        container.setLayout(main_layout)
        self.setCentralWidget(container)

        self.worker.state_changed.connect(self.on_state_changed)

        # Display refresh runs on the UI thread, independent of the capture rate
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.update_view)
        self.timer.start(display_interval_ms)

    @Slot(str)
    def on_state_changed(self, state):
        self.status_label.setText(self.worker.session.status_text())

    def update_view(self):
        # Shows a sensor error while it lasts, the session state otherwise
        self.status_label.setText(self.worker.session.status_text())

        frame = self.handoff.current_frame()
        if frame is None or frame.sequence == self.last_sequence:
            return
        self.last_sequence = frame.sequence

        pixmap = QPixmap.fromImage(oriented_qimage(frame, self.handoff.orientation))
        self.display_label.setPixmap(pixmap.scaled(
            self.display_label.size(), Qt.KeepAspectRatioByExpanding, Qt.FastTransformation))

    def closeEvent(self, event):
        self.timer.stop()
        self.worker.stop()
        logger.info("Viewer closed after %d frames (%d dropped before display)",
                    self.handoff.published, self.handoff.dropped)
        super().closeEvent(event)
