"""Command-line configuration for a single font conversion."""

import argparse
import logging
import re
from typing import List, NamedTuple, Optional

from .errors import Font2PbmError, IllegalCountError, IllegalSizeError
from .layout import VALID_SCALES, font_size
from .loader import LOAD_ADDRESS_SIZE

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: {prog} [-r] size num [filename]\n"
    "\n"
    "  -r:        ROM image (no load address)\n"
    "  size:      1x1, 1x2, 2x1 or 2x2\n"
    "  num:       Number of characters in font\n"
    "  filename:  Name of file to read\n"
)

_SIZE_RE = re.compile(r"([0-9]+)x([0-9]+)")
_COUNT_RE = re.compile(r"[0-9]+")


class ArgumentError(Font2PbmError):
    """Raised for command-line tokens the parser does not recognise."""


class ConversionConfig(NamedTuple):
    """Everything one conversion needs, parsed once from the command line."""

    scale_x: int
    scale_y: int
    num_chars: int
    skip: int = LOAD_ADDRESS_SIZE
    input_path: Optional[str] = None

    @property
    def font_size(self) -> int:
        """Glyph bytes to read from the input."""
        return font_size(self.scale_x, self.scale_y, self.num_chars)


def parse_size(token: str):
    """Parse a "WxH" size token into (scale_x, scale_y)."""
    match = _SIZE_RE.fullmatch(token)
    if not match:
        raise IllegalSizeError(token)
    scale_x, scale_y = int(match.group(1)), int(match.group(2))
    if scale_x not in VALID_SCALES or scale_y not in VALID_SCALES:
        raise IllegalSizeError(token)
    return scale_x, scale_y


def parse_count(token: str) -> int:
    """Parse a non-negative decimal character count."""
    if not _COUNT_RE.fullmatch(token):
        raise IllegalCountError(token)
    return int(token)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentError(message)


def _build_parser(prog: str) -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=prog, add_help=False)
    parser.add_argument("-r", dest="rom", action="store_true",
                        help="ROM image (no load address)")
    parser.add_argument("tokens", nargs="*")
    return parser


def parse_args(argv: List[str], prog: str = "font2pbm") -> Optional[ConversionConfig]:
    """
    Build a ConversionConfig from command-line arguments (without the program name).

    Returns None when the number of arguments is wrong and usage should be shown.
    Size and count are validated here, before any input is opened.
    """
    args = _build_parser(prog).parse_intermixed_args(argv)
    tokens = args.tokens or []

    if not 2 <= len(tokens) <= 3:
        return None

    scale_x, scale_y = parse_size(tokens[0])
    num_chars = parse_count(tokens[1])
    input_path = tokens[2] if len(tokens) == 3 else None

    config = ConversionConfig(
        scale_x=scale_x,
        scale_y=scale_y,
        num_chars=num_chars,
        skip=0 if args.rom else LOAD_ADDRESS_SIZE,
        input_path=input_path,
    )
    logger.debug(f"Parsed {config}")
    return config
