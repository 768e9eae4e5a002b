import argparse
import logging
import sys

from lidarviewer.core.config import CONFIG_FILE, VIEWERS, ConfigManager
from lidarviewer.core.errors import LiDARViewerError
from lidarviewer.core.handoff import FrameHandoff
from lidarviewer.core.processor import DepthFrameProcessor
from lidarviewer.core.session import CaptureSession
from lidarviewer.sensor import SENSOR_NAMES, DepthSensor

logger = logging.getLogger("lidarviewer")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Live grayscale depth viewer")
    parser.add_argument("--config", default=CONFIG_FILE, help="JSON settings file")
    parser.add_argument("--sensor", choices=SENSOR_NAMES, help="depth backend")
    parser.add_argument("--max-depth", type=float, dest="max_depth_meters",
                        help="saturation ceiling in meters")
    parser.add_argument("--viewer", choices=VIEWERS, help="display front-end")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_pipeline(config: ConfigManager):
    """Sensor -> processor -> handoff, wired into a capture session."""
    handoff = FrameHandoff()
    processor = DepthFrameProcessor(handoff, config.max_depth_meters)
    sensor = DepthSensor(config.sensor)
    session = CaptureSession(sensor, processor, frame_interval_ms=sensor.frame_interval_ms)
    return session, handoff


def run_qt(session, handoff, config):
    from PySide6.QtWidgets import QApplication
    from lidarviewer.ui.main_window import ViewerMainWindow
    from lidarviewer.ui.worker import DepthStreamWorker

    # 1. Initialize the Qt Application
    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    # 2. Window and capture thread; frames flow once Start is pressed
    worker = DepthStreamWorker(session)
    window = ViewerMainWindow(handoff, worker, config.display_interval_ms)
    window.show()

    # 3. Execute the Application loop
    return app.exec()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = ConfigManager(args.config)
        config.override(sensor=args.sensor, max_depth_meters=args.max_depth_meters,
                        viewer=args.viewer)
        session, handoff = build_pipeline(config)
    except (LiDARViewerError, ValueError) as e:
        logger.error("Cannot start viewer: %s", e)
        return 1

    logger.info("Sensor %s, %dx%d, ceiling %.2f m",
                session.sensor.s_name, session.sensor.s_width, session.sensor.s_height,
                config.max_depth_meters)
    try:
        if config.viewer == "opencv":
            from lidarviewer.ui.window import run_opencv_viewer
            run_opencv_viewer(session, handoff, config.display_interval_ms)
            return 0
        return run_qt(session, handoff, config)
    finally:
        session.sensor.close()


if __name__ == "__main__":
    sys.exit(main())
