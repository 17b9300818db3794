#!/usr/bin/env python3
"""Test PBM output."""

import io
import sys
import os

import numpy as np
from PIL import Image

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from font2pbm import Raster, create_raster, format_header, write_pbm


def test_header():
    assert format_header(256, 64) == b"P4\n# Commodore 64 font converted by font2pbm\n256 64\n"


def test_write_pbm():
    raster = Raster(2)
    raster.data[0, 0] = 0xF0
    raster.data[1, 31] = 0x01

    out = io.BytesIO()
    write_pbm(raster, out)

    header = format_header(256, 2)
    payload = out.getvalue()
    assert payload.startswith(header)
    assert payload[len(header):] == raster.tobytes()
    assert len(payload) == len(header) + 64


def test_empty_image():
    out = io.BytesIO()
    write_pbm(Raster(0), out)
    assert out.getvalue() == format_header(256, 0)


def test_pillow_reads_output():
    """The emitted file decodes as a 256 pixel wide bilevel image."""
    cells = np.zeros((32, 8), dtype=np.uint8)
    cells[0] = 0xFF
    raster = create_raster(1, 1, cells.tobytes(), 32)

    out = io.BytesIO()
    write_pbm(raster, out)
    out.seek(0)

    img = Image.open(out)
    assert img.format == "PPM"
    assert img.mode == "1"
    assert img.size == (256, 8)
    # PBM set bits are black
    assert img.getpixel((0, 0)) == 0
    assert img.getpixel((7, 7)) == 0
    assert img.getpixel((8, 0)) == 255
    assert img.tobytes() == raster.to_image().tobytes()


def test_raster_to_image():
    raster = Raster(8)
    raster.data[3, 1] = 0x80
    img = raster.to_image()
    assert img.size == (256, 8)
    assert img.getpixel((8, 3)) == 0
    assert img.getpixel((9, 3)) == 255
    assert raster.get_pixel(8, 3) == 1
    assert raster.get_pixel(300, 3) == 0


if __name__ == '__main__':
    test_header()
    test_write_pbm()
    test_empty_image()
    test_pillow_reads_output()
    test_raster_to_image()
    print("All PBM tests passed!")
