import numpy as np
import pytest

from lidarviewer.core import GrayscaleFrame, InvalidFrameShape, RawDepthFrame


def test_samples_are_flattened_to_float32():
    frame = RawDepthFrame(3, 2, [[0, 1, 2], [3, 4, 5]])

    assert frame.samples.dtype == np.float32
    assert frame.samples.shape == (6,)
    assert frame.shape_is_valid


def test_contiguous_float32_samples_are_not_copied():
    depth = np.zeros((4, 5), dtype=np.float32)

    frame = RawDepthFrame(5, 4, depth)

    assert np.shares_memory(frame.samples, depth)


def test_from_packed_buffer():
    values = np.arange(6, dtype=np.float32) / 10

    frame = RawDepthFrame.from_buffer(values.tobytes(), width=3, height=2)

    assert frame.samples.tolist() == pytest.approx(values.tolist())


def test_from_buffer_strips_stride_padding():
    height, width, stride = 3, 2, 4  # two padding columns per row
    padded = np.full((height, stride), -9.0, dtype=np.float32)
    padded[:, :width] = [[0.1, 0.2], [0.3, 0.4], [0.5, 0.6]]
    # The sensor may omit padding after the last row
    buffer = padded.tobytes()[:-(stride - width) * 4]

    frame = RawDepthFrame.from_buffer(buffer, width, height, bytes_per_row=stride * 4)

    assert frame.shape_is_valid
    assert frame.samples.tolist() == pytest.approx([0.1, 0.2, 0.3, 0.4, 0.5, 0.6])


@pytest.mark.parametrize("bytes_per_row", [4, 10])
def test_from_buffer_rejects_bad_stride(bytes_per_row):
    with pytest.raises(InvalidFrameShape):
        RawDepthFrame.from_buffer(bytes(64), width=2, height=2, bytes_per_row=bytes_per_row)


def test_from_buffer_rejects_short_buffer():
    with pytest.raises(InvalidFrameShape):
        RawDepthFrame.from_buffer(bytes(4 * 5), width=3, height=2)


def test_grayscale_pixels_are_read_only():
    gray = GrayscaleFrame(2, 1, np.array([1, 2], dtype=np.uint8))

    with pytest.raises(ValueError):
        gray.pixels[0] = 9
    assert gray.bytes_per_line == 2


def test_grayscale_frame_checks_pixel_count():
    with pytest.raises(InvalidFrameShape):
        GrayscaleFrame(2, 2, np.zeros(3, dtype=np.uint8))


def test_from_packed_buffer_rejects_extra_samples():
    with pytest.raises(InvalidFrameShape):
        RawDepthFrame.from_buffer(np.arange(7, dtype=np.float32).tobytes(), width=3, height=2)


def test_from_buffer_accepts_padding_after_last_row():
    height, width, stride = 2, 2, 3
    padded = np.zeros((height, stride), dtype=np.float32)
    padded[:, :width] = [[0.1, 0.2], [0.3, 0.4]]

    frame = RawDepthFrame.from_buffer(padded.tobytes(), width, height, bytes_per_row=stride * 4)

    assert frame.samples.tolist() == pytest.approx([0.1, 0.2, 0.3, 0.4])


def test_from_buffer_rejects_bytes_past_last_padded_row():
    buffer = np.zeros(2 * 3 + 1, dtype=np.float32).tobytes()

    with pytest.raises(InvalidFrameShape):
        RawDepthFrame.from_buffer(buffer, width=2, height=2, bytes_per_row=3 * 4)
