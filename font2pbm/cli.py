"""Command-line entry point: font2pbm [-r] size num [filename]."""

import logging
import os
import sys
from typing import BinaryIO, List, Optional, TextIO

from .config import USAGE, parse_args
from .errors import Font2PbmError
from .layout import create_raster
from .loader import load_font
from .pbm import write_pbm

logger = logging.getLogger(__name__)


_handler = None


def setup_logging(stream: TextIO, level: int = logging.WARNING):
    """Send package log records to the error stream, leaving stdout for the image."""
    global _handler
    package_logger = logging.getLogger("font2pbm")

    # Replace the handler of an earlier run, which may hold another stream
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(logging.Formatter(
        "%(asctime)s.%(msecs)03d - %(name)s - %(message)s", datefmt="%H:%M:%S"))
    package_logger.addHandler(_handler)
    package_logger.setLevel(level)


def main(argv: Optional[List[str]] = None,
         stdin: Optional[BinaryIO] = None,
         stdout: Optional[BinaryIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    """
    Convert a Commodore 64 font to PBM.

    Args:
        argv: Full argument vector including the program name (default sys.argv)
        stdin: Binary input stream used when no filename is given
        stdout: Binary output stream for the PBM image
        stderr: Text stream for error messages

    Returns:
        Process exit code: 0 on success or usage, 1 on any error
    """
    if argv is None:
        argv = sys.argv
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer
    if stderr is None:
        stderr = sys.stderr

    setup_logging(stderr)
    prog = os.path.basename(argv[0]) if argv else "font2pbm"

    try:
        config = parse_args(list(argv[1:]), prog=prog)
        if config is None:
            stdout.write(USAGE.format(prog=prog).encode())
            stdout.flush()
            return 0

        data = load_font(config.input_path, config.font_size, config.skip, stdin=stdin)
        raster = create_raster(config.scale_x, config.scale_y, data, config.num_chars)
    except Font2PbmError as e:
        logger.debug(f"Conversion failed: {e!r}")
        print(f"{prog}: {e}", file=stderr)
        return 1

    write_pbm(raster, stdout)
    return 0


def run():
    """Console script wrapper."""
    sys.exit(main())
