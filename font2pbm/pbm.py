"""Emitter - Write a raster as a binary Portable Bitmap (P4)."""

import logging
from typing import BinaryIO

from .raster import Raster

logger = logging.getLogger(__name__)

MAGIC = b"P4"
COMMENT = b"# Commodore 64 font converted by font2pbm"


def format_header(width: int, height: int) -> bytes:
    """Three-line PBM header: magic, comment, dimensions."""
    return b"%s\n%s\n%d %d\n" % (MAGIC, COMMENT, width, height)


def encode_pbm(raster: Raster) -> bytes:
    """Complete PBM file contents for `raster`."""
    return format_header(raster.width, raster.height) + raster.tobytes()


def write_pbm(raster: Raster, stream: BinaryIO):
    """Write `raster` to `stream` in one piece and flush it."""
    payload = encode_pbm(raster)
    logger.debug(f"Writing {raster.width}x{raster.height} PBM, {len(payload)} bytes")
    stream.write(payload)
    stream.flush()
