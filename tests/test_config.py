import json

import pytest

from lidarviewer.core.config import ConfigManager


def test_defaults_when_file_missing(tmp_path):
    config = ConfigManager(str(tmp_path / "missing.json"))

    assert config.max_depth_meters == 3.0
    assert config.sensor == "dummy"
    assert config.display_interval_ms == 33
    assert config.viewer == "qt"


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "viewer.json"
    path.write_text(json.dumps({"max_depth_meters": 5, "viewer": "opencv", "unknown": 1}))

    config = ConfigManager(str(path))

    assert config.max_depth_meters == 5.0
    assert config.viewer == "opencv"
    assert config.sensor == "dummy"
    assert "unknown" not in config.data


def test_unreadable_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "viewer.json"
    path.write_text("{not json")

    config = ConfigManager(str(path))

    assert config.max_depth_meters == 3.0
    assert "using defaults" in caplog.text


@pytest.mark.parametrize("values", [
    {"max_depth_meters": 0},
    {"max_depth_meters": "far"},
    {"sensor": "kinect_v9"},
    {"display_interval_ms": 0},
    {"viewer": "tk"},
])
def test_invalid_values_are_rejected(tmp_path, values):
    path = tmp_path / "viewer.json"
    path.write_text(json.dumps(values))

    with pytest.raises(ValueError):
        ConfigManager(str(path))


def test_override_ignores_unset_values(tmp_path):
    config = ConfigManager(str(tmp_path / "viewer.json"))

    config.override(max_depth_meters=1.5, sensor=None, viewer=None)

    assert config.max_depth_meters == 1.5
    assert config.sensor == "dummy"
    with pytest.raises(ValueError):
        config.override(max_depth_meters=-1.0)


def test_save_writes_loadable_file(tmp_path):
    path = tmp_path / "nested" / "viewer.json"
    config = ConfigManager(str(path))
    config.override(max_depth_meters=2.0)

    config.save()

    assert ConfigManager(str(path)).max_depth_meters == 2.0
