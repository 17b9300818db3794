#!/usr/bin/env python3
"""Test reading font data from streams and files."""

import io
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from font2pbm import InputOpenError, InvalidInputError, load_font, read_glyph_data
from font2pbm.loader import READ_CHUNK


class TrickleStream(io.RawIOBase):
    """Stream that hands out at most one byte per read, like a slow pipe."""

    def __init__(self, data):
        self._data = io.BytesIO(data)

    def readable(self):
        return True

    def read(self, size=-1):
        return self._data.read(min(size, 1) if size >= 0 else 1)


def test_skip_load_address():
    stream = io.BytesIO(b"\x00\x38" + bytes(range(16)) + b"tail")
    assert read_glyph_data(stream, 16) == bytes(range(16))
    # Trailing bytes are left in the stream
    assert stream.read() == b"tail"


def test_rom_image():
    data = bytes(range(8))
    assert read_glyph_data(io.BytesIO(data), 8, skip=0) == data


def test_short_input():
    stream = io.BytesIO(b"\x00\x38" + bytes(15))
    try:
        read_glyph_data(stream, 16)
    except InvalidInputError as e:
        assert str(e) == 'Invalid input from "<stdin>"'
    else:
        assert False, "Expected InvalidInputError"


def test_short_reads_are_collected():
    data = b"\x01\x08" + bytes(range(40))
    assert read_glyph_data(TrickleStream(data), 40) == bytes(range(40))


def test_empty_font():
    assert read_glyph_data(io.BytesIO(b""), 0) == b""


def test_load_font_file(tmp_path):
    path = tmp_path / "font.prg"
    path.write_bytes(b"\x00\x30" + bytes([0xAA]) * 8)
    assert load_font(path, 8) == bytes([0xAA]) * 8

    try:
        load_font(path, 16)
    except InvalidInputError as e:
        assert e.source == str(path)
    else:
        assert False, "Expected InvalidInputError"


def test_load_font_stdin():
    assert load_font(None, 2, skip=0, stdin=io.BytesIO(b"ab")) == b"ab"


def test_load_font_default_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"\x00\x20abcdefgh")))
    assert load_font(None, 8) == b"abcdefgh"


def test_huge_size_reads_in_chunks():
    """A declared size far beyond the stream never sizes a single read."""
    sizes = []

    class RecordingStream(io.BytesIO):
        def read(self, size=-1):
            sizes.append(size)
            return super().read(size)

    try:
        read_glyph_data(RecordingStream(b"\x00\x20" + bytes(100)), 10 ** 20)
    except InvalidInputError:
        pass
    else:
        assert False, "Expected InvalidInputError"
    assert max(sizes) <= READ_CHUNK


def test_missing_file(tmp_path):
    path = tmp_path / "missing.bin"
    try:
        load_font(path, 8)
    except InputOpenError as e:
        assert str(e) == f'Can\'t open "{path}": No such file or directory'
    else:
        assert False, "Expected InputOpenError"


if __name__ == '__main__':
    test_skip_load_address()
    test_rom_image()
    test_short_input()
    test_short_reads_are_collected()
    test_empty_font()
    test_load_font_stdin()
    test_huge_size_reads_in_chunks()
    print("All loader tests passed!")
