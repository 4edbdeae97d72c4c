"""
Main entry point for imgconv.

Parses the command line, resolves the conversion job, hands it to the
conversion service and turns any failure into an error message and a non-zero
exit status.
"""

import sys
from typing import List, Optional

from loguru import logger

from .cli import get_args
from .config.common import DEBUG_LOGGER_FORMAT, DEFAULT_LOG_LEVEL, LOGGER_FORMAT
from .domain.exceptions import ImgConvException
from .services.argument_resolver import resolve_job
from .services.conversion_service import ConversionService

EXIT_OK = 0
EXIT_FAILURE = 1


def configure_logger(log_level: str = DEFAULT_LOG_LEVEL):
    """Routes all log output to stderr, with call-site details at DEBUG level."""
    logger.remove()
    log_format = DEBUG_LOGGER_FORMAT if log_level == "DEBUG" else LOGGER_FORMAT
    logger.add(sys.stderr, level=log_level, format=log_format)


# Configure the logger for initial setup, e.g. warnings while reading the
# user config. The level is set again once the arguments are parsed.
configure_logger()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs a single conversion.

    Args:
        argv: Command-line arguments, defaults to `sys.argv[1:]`.

    Returns:
        The process exit status: 0 on success, 1 on any conversion error.
        Usage errors are reported by argparse, which exits with status 2.
    """
    configure_logger()
    args = get_args(argv)
    configure_logger(args.log_level)
    logger.debug(f"Parsed arguments: {args}")

    try:
        job = resolve_job(args)
        ConversionService(job).run()
    except ImgConvException as e:
        logger.error(str(e))
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
