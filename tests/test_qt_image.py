import numpy as np
import pytest

QtGui = pytest.importorskip("PySide6.QtGui")

from lidarviewer.core import DEFAULT_ORIENTATION, GrayscaleFrame  # noqa: E402
from lidarviewer.ui.image import frame_to_qimage, oriented_qimage  # noqa: E402


@pytest.fixture
def frame():
    return GrayscaleFrame(3, 2, np.array([10, 20, 30,
                                          40, 50, 60], dtype=np.uint8))


def test_qimage_keeps_dimensions_and_values(frame):
    image = frame_to_qimage(frame)

    assert (image.width(), image.height()) == (3, 2)
    assert image.format() == QtGui.QImage.Format_Grayscale8
    assert QtGui.qGray(image.pixel(2, 1)) == 60
    assert QtGui.qGray(image.pixel(0, 0)) == 10


def test_oriented_image_swaps_dimensions(frame):
    image = oriented_qimage(frame)

    assert (image.width(), image.height()) == (2, 3)


@pytest.mark.parametrize("width,height", [(3, 2), (5, 4), (1, 6)])
def test_oriented_image_matches_numpy_orientation(width, height):
    pixels = np.arange(width * height, dtype=np.uint8) * 7
    frame = GrayscaleFrame(width, height, pixels)

    image = oriented_qimage(frame)
    expected = DEFAULT_ORIENTATION.apply(frame.as_image())

    assert (image.height(), image.width()) == expected.shape
    for y in range(image.height()):
        for x in range(image.width()):
            assert QtGui.qGray(image.pixel(x, y)) == expected[y, x]
