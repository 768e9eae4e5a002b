from lidarviewer.sensor.sensor_api import SENSOR_NAMES, DepthSensor

__all__ = ["DepthSensor", "SENSOR_NAMES"]
