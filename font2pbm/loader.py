"""Loader - Read raw font data from a file or a byte stream."""

import logging
import sys
from pathlib import Path
from typing import BinaryIO

from .errors import AllocationError, InputOpenError, InvalidInputError

logger = logging.getLogger(__name__)

# Commodore PRG files start with a little-endian load address
LOAD_ADDRESS_SIZE = 2

STDIN_NAME = "<stdin>"

# Largest single read; the declared font size may exceed what the input holds
READ_CHUNK = 65536


def open_input(path: str | Path) -> BinaryIO:
    """Open a font file for binary reading."""
    try:
        return open(path, "rb")
    except OSError as e:
        raise InputOpenError(str(path), e.strerror or str(e)) from e


def _read_exactly(stream: BinaryIO, size: int) -> bytes:
    """Read until `size` bytes are collected or the stream ends."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(min(remaining, READ_CHUNK))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_glyph_data(stream: BinaryIO, size: int, skip: int = LOAD_ADDRESS_SIZE,
                    source: str = STDIN_NAME) -> bytes:
    """
    Read `size` bytes of font data after skipping a `skip` byte prefix.

    Args:
        stream: Binary stream positioned at the start of the font file
        size: Number of glyph bytes the font occupies
        skip: Bytes to discard first (the load address, 0 for ROM images)
        source: Name of the input, used in error messages

    Raises:
        InvalidInputError: Fewer than `size` bytes follow the prefix
        AllocationError: The input does not fit in memory
    """
    try:
        skipped = _read_exactly(stream, skip)
        data = _read_exactly(stream, size)
    except (MemoryError, OverflowError) as e:
        raise AllocationError() from e

    if len(skipped) == LOAD_ADDRESS_SIZE:
        logger.debug(f"Skipped load address ${int.from_bytes(skipped, 'little'):04x}")
    if len(data) != size:
        logger.debug(f"Expected {size} bytes from {source}, got {len(data)}")
        raise InvalidInputError(source)

    logger.debug(f"Read {size} bytes of font data from {source}")
    return data


def load_font(path: str | Path | None, size: int, skip: int = LOAD_ADDRESS_SIZE,
              stdin: BinaryIO | None = None) -> bytes:
    """Read font data from `path`, or from `stdin` when no path is given."""
    if path is None:
        return read_glyph_data(stdin if stdin is not None else sys.stdin.buffer, size, skip)

    with open_input(path) as f:
        return read_glyph_data(f, size, skip, source=str(path))
