from lidarviewer.core.errors import InvalidFrameShape, LiDARViewerError, SensorError
from lidarviewer.core.frames import GrayscaleFrame, RawDepthFrame
from lidarviewer.core.handoff import FrameHandoff
from lidarviewer.core.normalizer import DEFAULT_MAX_DEPTH_METERS, normalize
from lidarviewer.core.orientation import DEFAULT_ORIENTATION, DisplayOrientation

__all__ = [
    "DEFAULT_MAX_DEPTH_METERS",
    "DEFAULT_ORIENTATION",
    "DisplayOrientation",
    "FrameHandoff",
    "GrayscaleFrame",
    "InvalidFrameShape",
    "LiDARViewerError",
    "RawDepthFrame",
    "SensorError",
    "normalize",
]
