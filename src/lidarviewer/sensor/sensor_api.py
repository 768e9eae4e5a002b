import logging
import threading
from contextlib import contextmanager

from lidarviewer.core.errors import SensorError
from lidarviewer.core.frames import RawDepthFrame

logger = logging.getLogger(__name__)

SENSOR_NAMES = ('dummy', 'kinect_v1')


class DepthSensor:
    """
    Wrapping API-class around a depth backend.

    Frames are read through locked_frame(), which holds the sensor's buffer
    lock for the duration of the ``with`` block, like a locked pixel buffer.
    """

    def __init__(self, name: str = 'dummy', **kwargs):
        if name == 'dummy':
            from .dummy import DummySensor
            self.Sensor = DummySensor(**kwargs)
        elif name == 'kinect_v1':
            from .kinectv1 import KinectV1
            self.Sensor = KinectV1(**kwargs)
        else:
            raise SensorError(f"Unknown sensor '{name}', expected one of {', '.join(SENSOR_NAMES)}")

        self.s_name = self.Sensor.name
        self._lock = threading.Lock()

    @property
    def s_width(self):
        return self.Sensor.depth_width

    @property
    def s_height(self):
        return self.Sensor.depth_height

    @property
    def frame_interval_ms(self):
        return self.Sensor.frame_interval_ms

    @contextmanager
    def locked_frame(self):
        """Yields the next RawDepthFrame; it is only valid inside the block."""
        with self._lock:
            depth = self.Sensor.get_frame()
            height, width = depth.shape
            yield RawDepthFrame(width, height, depth)

    def close(self):
        with self._lock:
            self.Sensor.close()
        logger.info("Sensor %s closed", self.s_name)
