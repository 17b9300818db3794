"""Raster - Packed 1-bit-per-pixel bitmap with a fixed 256 pixel width."""

import numpy as np
from PIL import Image
from typing import Tuple

# Fixed output width, in pixels and in packed bytes
RASTER_WIDTH = 256
BYTES_PER_ROW = RASTER_WIDTH // 8


class Raster:
    """
    Packed monochrome bitmap using numpy.

    Each row is BYTES_PER_ROW bytes, most significant bit leftmost.
    A set bit is a black pixel, following the PBM convention.
    """

    def __init__(self, height: int):
        self.width = RASTER_WIDTH
        self.height = height
        # Shape: (height, bytes per row), uint8
        self.data = np.zeros((height, BYTES_PER_ROW), dtype=np.uint8)

    @property
    def size(self) -> Tuple[int, int]:
        """Return (width, height) tuple."""
        return (self.width, self.height)

    def get_pixel(self, x: int, y: int) -> int:
        """Get pixel at (x, y): 1 for black, 0 for white or out of bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return (int(self.data[y, x // 8]) >> (7 - x % 8)) & 1
        return 0

    def tobytes(self) -> bytes:
        """Packed raster rows, top to bottom."""
        return self.data.tobytes()

    def to_image(self) -> Image.Image:
        """
        Convert to a Pillow mode "1" image.

        Pillow stores mode "1" as 0 = black, so the packed bits are read
        through the inverting "1;I" raw mode, the same one its PBM reader uses.
        """
        return Image.frombytes("1", self.size, self.tobytes(), "raw", "1;I")

