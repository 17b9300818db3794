"""font2pbm - Convert Commodore 64 bitmap fonts to Portable Bitmap images."""

from .config import ConversionConfig, parse_args, parse_count, parse_size
from .errors import (AllocationError, Font2PbmError, IllegalCountError,
                     IllegalSizeError, InputOpenError, InvalidInputError)
from .layout import (chars_per_line, create_raster, dest_byte_offset,
                     extract_glyphs, raster_height, source_cell_offset)
from .loader import load_font, read_glyph_data
from .pbm import format_header, write_pbm
from .raster import Raster

__all__ = [
    "ConversionConfig",
    "parse_args",
    "parse_size",
    "parse_count",
    "Raster",
    "create_raster",
    "extract_glyphs",
    "chars_per_line",
    "raster_height",
    "source_cell_offset",
    "dest_byte_offset",
    "read_glyph_data",
    "load_font",
    "format_header",
    "write_pbm",
    "Font2PbmError",
    "IllegalSizeError",
    "IllegalCountError",
    "InputOpenError",
    "InvalidInputError",
    "AllocationError",
]
