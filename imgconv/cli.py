"""
Command-Line Interface (CLI) setup for imgconv.

This module uses Python's `argparse` to define and parse the command-line
arguments. Defaults for quality and log level can be supplied by the user
config file (see `imgconv.config.common`); explicit flags always win.
"""
import argparse
from typing import List, Optional

from . import __version__
from .config.common import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_QUALITY,
    LOG_LEVELS,
    load_user_config,
)
from .config.formats import FORMAT_NAMES

DESCRIPTION = """\
imgconv - Image Format Converter

A command-line tool for converting images between different formats.
Supports PNG, JPEG, GIF, BMP, ICO, TIFF, WebP, AVIF, PNM, TGA and DDS.
"""

EXAMPLES = """\
examples:
  # Simple conversion (format auto-detected from extension)
  imgconv input.webp output.png

  # With explicit input/output flags
  imgconv -i image.jpg -o image.webp

  # Specify quality for lossy formats
  imgconv input.png output.jpg -q 85

  # Force output format
  imgconv input.jpg output -f png

  # Paste from clipboard
  imgconv -c output_image

  # Paste and convert to a specific format
  imgconv -c output_image -e jpg

  # Batch conversion
  for f in *.webp; do imgconv "$f" "${f%.webp}.png"; done
"""


def build_parser(user_defaults: Optional[dict] = None) -> argparse.ArgumentParser:
    """
    Builds the argument parser.

    Args:
        user_defaults: Values loaded from the user config, overriding the
                       built-in defaults for `--quality` and `--log-level`.
    """
    user_defaults = user_defaults or {}
    parser = argparse.ArgumentParser(
        prog="imgconv",
        description=DESCRIPTION,
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "pos_input", nargs="?", metavar="INPUT", help="Input image file (alternative to -i)."
    )
    parser.add_argument(
        "pos_output", nargs="?", metavar="OUTPUT", help="Output image file (alternative to -o)."
    )
    parser.add_argument("-i", "--input", metavar="FILE", help="Input image file.")
    parser.add_argument("-o", "--output", metavar="FILE", help="Output image file.")
    parser.add_argument(
        "-c", "--clipboard", action="store_true", help="Paste the source image from the clipboard."
    )
    parser.add_argument(
        "-f", "--format", metavar="FORMAT", type=str.lower, choices=sorted(FORMAT_NAMES),
        help="Output format (auto-detected from extension if not specified). "
             f"One of: {', '.join(sorted(FORMAT_NAMES))}.",
    )
    parser.add_argument(
        "-e", "--extension", metavar="EXT",
        help="Extension for the output file (use with -c for conversion).",
    )
    parser.add_argument(
        "-q", "--quality", metavar="NUM", type=int,
        default=user_defaults.get("quality", DEFAULT_QUALITY),
        help="Quality for lossy formats like JPEG, WebP and AVIF (1-100). Default: %(default)s.",
    )
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS,
        default=user_defaults.get("log_level", DEFAULT_LOG_LEVEL),
        help="Set the logging level. Default: %(default)s.",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for imgconv.

    Args:
        argv: The argument list to parse. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: The parsed arguments. Input and output are kept as
                            given (`input`/`pos_input`, `output`/`pos_output`);
                            merging them is the argument resolver's job.
    """
    parser = build_parser(load_user_config())
    args = parser.parse_args(argv)

    # In clipboard mode the image source is fixed, so an input path is a user error.
    if args.clipboard:
        if args.input:
            parser.error("argument -i/--input: not allowed with argument -c/--clipboard")
        if args.pos_output:
            parser.error("only an OUTPUT path is accepted with -c/--clipboard")

    # Each of -i/-o fills one positional slot, so extra positionals would be dropped.
    open_slots = (0 if args.input or args.clipboard else 1) + (0 if args.output else 1)
    positionals = [value for value in (args.pos_input, args.pos_output) if value]
    if len(positionals) > open_slots:
        parser.error(f"unrecognized arguments: {' '.join(positionals[open_slots:])}")

    return args
