"""Preview a Commodore 64 font in the terminal.

Usage:
    python examples/preview_font.py chargen.rom 1x1 256 -r
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from font2pbm import create_raster, load_font, parse_count, parse_size
from font2pbm.loader import LOAD_ADDRESS_SIZE


def render_to_terminal(raster):
    """Render raster to terminal, two pixel rows per line using half blocks."""
    for y in range(0, raster.height, 2):
        line = []
        for x in range(raster.width):
            top = raster.get_pixel(x, y)
            bottom = raster.get_pixel(x, y + 1)
            line.append(" ▀▄█"[top | bottom << 1])
        print("".join(line))


def main():
    parser = argparse.ArgumentParser(description="Preview a C64 font in the terminal")
    parser.add_argument("filename", type=Path)
    parser.add_argument("size", help="1x1, 1x2, 2x1 or 2x2")
    parser.add_argument("num", help="Number of characters in font")
    parser.add_argument("-r", dest="rom", action="store_true", help="ROM image (no load address)")
    args = parser.parse_args()

    scale_x, scale_y = parse_size(args.size)
    num_chars = parse_count(args.num)
    data = load_font(args.filename, num_chars * scale_x * scale_y * 8,
                     skip=0 if args.rom else LOAD_ADDRESS_SIZE)

    render_to_terminal(create_raster(scale_x, scale_y, data, num_chars))


if __name__ == "__main__":
    main()
