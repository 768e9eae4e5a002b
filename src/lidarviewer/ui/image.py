from PySide6.QtGui import QImage, QTransform

from lidarviewer.core.frames import GrayscaleFrame
from lidarviewer.core.orientation import DEFAULT_ORIENTATION, DisplayOrientation


def frame_to_qimage(frame: GrayscaleFrame) -> QImage:
    # 8 bits per pixel, rows packed at `width` bytes
    q_img = QImage(frame.as_image().tobytes(), frame.width, frame.height,
                   frame.bytes_per_line, QImage.Format_Grayscale8)
    return q_img.copy()


def oriented_qimage(frame: GrayscaleFrame, orientation: DisplayOrientation = DEFAULT_ORIENTATION) -> QImage:
    """Mirror first, then rotate; both steps are exact pixel moves in Qt."""
    q_img = frame_to_qimage(frame)
    if orientation.mirror_horizontal:
        q_img = q_img.mirrored(True, False)
    return q_img.transformed(QTransform().rotate(orientation.rotation_degrees))
