import numpy as np


class DisplayOrientation:
    """
    Fixed presentation transform for the depth image: mirror horizontally,
    then rotate 90 degrees clockwise.

    The transform is only ever applied when rendering. apply() returns a
    read-only view, the source pixels are never rewritten.
    """
    mirror_horizontal = True
    rotation_degrees = 90  # clockwise, screen coordinates (y down)

    def output_size(self, width, height):
        """(width, height) of the image once oriented."""
        return height, width

    def apply(self, image: np.ndarray) -> np.ndarray:
        oriented = np.rot90(np.fliplr(image), k=-1)
        if oriented.flags.writeable:
            oriented = oriented.view()
            oriented.flags.writeable = False
        return oriented

    def source_pixel(self, x, y, width, height):
        """Maps an (x, y) on the oriented image back to the source frame."""
        # Inverse of (sx, sy) -> (height - 1 - sy, width - 1 - sx)
        return width - 1 - y, height - 1 - x


DEFAULT_ORIENTATION = DisplayOrientation()
