import json
import logging
import math
import os

logger = logging.getLogger(__name__)

CONFIG_FILE = "assets/config/viewer.json"

VIEWERS = ("qt", "opencv")


class ConfigManager:
    def __init__(self, path=CONFIG_FILE):
        self.path = path
        self.default_config = {
            "max_depth_meters": 3.0,   # saturation ceiling
            "sensor": "dummy",
            "display_interval_ms": 33, # ~30 fps display refresh
            "viewer": "qt",
        }
        self.data = self.load()

    def load(self):
        if not os.path.exists(self.path):
            return dict(self.default_config)
        try:
            with open(self.path, 'r') as f:
                d = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read %s (%s), using defaults", self.path, e)
            return dict(self.default_config)

        if not isinstance(d, dict):
            logger.warning("Ignoring %s: expected a JSON object", self.path)
            return dict(self.default_config)
        data = dict(self.default_config)
        data.update({k: v for k, v in d.items() if k in self.default_config})
        validate(data)
        return data

    def override(self, **values):
        """Applies non-None values (e.g. from the command line) on top of the file."""
        self.data.update({k: v for k, v in values.items() if v is not None})
        validate(self.data)
        return self.data

    def save(self):
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump(self.data, f, indent=4)
        logger.info("Configuration saved to %s", self.path)

    @property
    def max_depth_meters(self) -> float:
        return float(self.data["max_depth_meters"])

    @property
    def sensor(self) -> str:
        return self.data["sensor"]

    @property
    def display_interval_ms(self) -> int:
        return int(self.data["display_interval_ms"])

    @property
    def viewer(self) -> str:
        return self.data["viewer"]


def validate(data):
    from lidarviewer.sensor import SENSOR_NAMES

    depth = data["max_depth_meters"]
    if isinstance(depth, bool) or not isinstance(depth, (int, float)) or not math.isfinite(depth) or depth <= 0:
        raise ValueError(f"max_depth_meters must be a positive number, got {depth!r}")
    if data["sensor"] not in SENSOR_NAMES:
        raise ValueError(f"sensor must be one of {SENSOR_NAMES}, got {data['sensor']!r}")
    interval = data["display_interval_ms"]
    if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
        raise ValueError(f"display_interval_ms must be a positive integer, got {interval!r}")
    if data["viewer"] not in VIEWERS:
        raise ValueError(f"viewer must be one of {VIEWERS}, got {data['viewer']!r}")
