import numpy as np
import scipy.ndimage


class DummySensor:
    """
    Synthetic depth source used when no camera is attached.

    Renders a floor tilted away from the camera (0.3 m at the bottom row to
    2.5 m at the top) with a box drifting across it, smoothed like a real
    sensor and with a sprinkle of dropout pixels (NaN).
    """

    def __init__(self, width=256, height=192, near=0.3, far=2.5,
                 dropout=0.002, gauss_sigma=1.5, seed=0):
        self.name = 'dummy'
        self.depth_width = width
        self.depth_height = height
        self.near = near
        self.far = far
        self.dropout = dropout
        self.frame_interval_ms = 33  # paced like a 30 fps stream
        self.sigma_gauss = gauss_sigma
        self._rng = np.random.default_rng(seed)
        self._tick = 0

        rows = np.linspace(far, near, height, dtype=np.float32)
        self._floor = np.repeat(rows[:, None], width, axis=1)
        self.depth = None

    def get_frame(self) -> np.ndarray:
        depth = self._floor.copy()

        # Box 0.4 m above the floor, bouncing left to right
        box_w, box_h = max(self.depth_width // 5, 1), max(self.depth_height // 4, 1)
        span = max(self.depth_width - box_w, 1)
        x = abs((self._tick * 3) % (2 * span) - span)
        y = (self.depth_height - box_h) // 2
        depth[y:y + box_h, x:x + box_w] -= 0.4
        self._tick += 1

        depth = scipy.ndimage.gaussian_filter(depth, self.sigma_gauss)
        depth += self._rng.normal(0.0, 0.005, depth.shape).astype(np.float32)

        holes = self._rng.random(depth.shape) < self.dropout
        depth[holes] = np.nan
        self.depth = depth.astype(np.float32, copy=False)
        return self.depth

    def close(self):
        pass
