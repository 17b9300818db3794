"""Layout engine - Arrange Commodore 64 glyph cells on a 256 pixel wide raster.

Font data is stored plane-interleaved: for a font of N characters at scale
(x, y), the first N cells hold sub-cell (0, 0) of every character, the next N
hold sub-cell (1, 0), and so on, with the column index varying fastest. Each
cell is 8 bytes, one per scan line.

With 256 pixels per line the raster fits 32 characters at scale 1x1 or 1x2,
and 16 characters at 2x1 or 2x2.
"""

import logging
from typing import Tuple

import numpy as np

from .errors import AllocationError
from .raster import BYTES_PER_ROW, RASTER_WIDTH, Raster

logger = logging.getLogger(__name__)

# Pixels (and bytes) per glyph cell edge
CELL_SIZE = 8

VALID_SCALES = (1, 2)


def chars_per_line(scale_x: int) -> int:
    """Number of characters that fit across the raster."""
    return RASTER_WIDTH // CELL_SIZE // scale_x


def raster_height(scale_x: int, scale_y: int, num_chars: int) -> int:
    """Height in pixels; an incomplete last line of characters is dropped."""
    return num_chars // chars_per_line(scale_x) * CELL_SIZE * scale_y


def font_size(scale_x: int, scale_y: int, num_chars: int) -> int:
    """Number of glyph bytes a font of num_chars characters occupies."""
    return num_chars * scale_x * scale_y * CELL_SIZE


def char_origin(index: int, scale_x: int, scale_y: int) -> Tuple[int, int]:
    """Top-left (row, column) pixel position of character `index`."""
    per_line = chars_per_line(scale_x)
    row = (index // per_line) * CELL_SIZE * scale_y
    col = (index % per_line) * CELL_SIZE * scale_x
    return row, col


def source_cell_offset(index: int, xc: int, yc: int, num_chars: int, scale_x: int) -> int:
    """Byte offset in the font data of sub-cell (xc, yc) of character `index`."""
    return (index + xc * num_chars + yc * num_chars * scale_x) * CELL_SIZE


def dest_byte_offset(row: int, col: int) -> int:
    """Byte offset in the packed raster of pixel (col, row); col is byte aligned."""
    return row * BYTES_PER_ROW + col // 8


def _check_arguments(scale_x, scale_y, num_chars):
    if scale_x not in VALID_SCALES or scale_y not in VALID_SCALES:
        raise ValueError(f"Unsupported scale {scale_x}x{scale_y}. Use 1 or 2 for each axis")
    if num_chars < 0:
        raise ValueError(f"Character count must not be negative, got {num_chars}")


def _cells(scale_x, scale_y, num_chars):
    """
    Yield (source offset, destination offset) for every glyph cell that lands
    inside the raster, in character order.
    """
    per_line = chars_per_line(scale_x)
    laid_out = num_chars // per_line * per_line

    for index in range(laid_out):
        row, col = char_origin(index, scale_x, scale_y)
        for xc in range(scale_x):
            for yc in range(scale_y):
                src = source_cell_offset(index, xc, yc, num_chars, scale_x)
                dst = dest_byte_offset(row + CELL_SIZE * yc, col + CELL_SIZE * xc)
                yield src, dst


def create_raster(scale_x: int, scale_y: int, glyph_data: bytes, num_chars: int) -> Raster:
    """
    Lay out a font as a grid of characters on a new raster.

    Args:
        scale_x: Glyph cells per character horizontally (1 or 2)
        scale_y: Glyph cells per character vertically (1 or 2)
        glyph_data: Plane-interleaved font data, at least
                    num_chars * scale_x * scale_y * 8 bytes
        num_chars: Number of characters in the font

    Returns:
        Raster of width 256 and height raster_height(scale_x, scale_y, num_chars)

    Raises:
        ValueError: Unsupported scale, negative count or short glyph data
        AllocationError: The raster could not be allocated
    """
    _check_arguments(scale_x, scale_y, num_chars)

    expected = font_size(scale_x, scale_y, num_chars)
    if len(glyph_data) < expected:
        raise ValueError(f"Glyph data holds {len(glyph_data)} bytes, {expected} needed")

    height = raster_height(scale_x, scale_y, num_chars)
    try:
        raster = Raster(height)
    except (MemoryError, ValueError) as e:
        raise AllocationError() from e

    dropped = num_chars % chars_per_line(scale_x)
    if dropped:
        logger.warning(f"{dropped} trailing characters do not fill a line and are left out")

    logger.debug(f"Laying out {num_chars} chars at {scale_x}x{scale_y} on a 256x{height} raster")
    if height == 0:
        return raster

    glyphs = np.frombuffer(glyph_data, dtype=np.uint8, count=expected)
    # Flat view, so a cell's scan lines are a strided slice
    pixels = raster.data.reshape(-1)
    stride = BYTES_PER_ROW

    for src, dst in _cells(scale_x, scale_y, num_chars):
        pixels[dst:dst + CELL_SIZE * stride:stride] = glyphs[src:src + CELL_SIZE]

    return raster


def extract_glyphs(raster: Raster, scale_x: int, scale_y: int, num_chars: int) -> bytes:
    """
    Read plane-interleaved font data back out of a raster.

    Inverse of create_raster for counts that fill whole lines. Cells of
    characters that were left out of the raster come back as zero bytes.
    """
    _check_arguments(scale_x, scale_y, num_chars)

    glyphs = np.zeros(font_size(scale_x, scale_y, num_chars), dtype=np.uint8)
    pixels = raster.data.reshape(-1)
    stride = BYTES_PER_ROW

    for src, dst in _cells(scale_x, scale_y, num_chars):
        glyphs[src:src + CELL_SIZE] = pixels[dst:dst + CELL_SIZE * stride:stride]

    return glyphs.tobytes()
