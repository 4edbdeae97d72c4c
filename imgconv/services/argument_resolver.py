"""
Turns parsed command-line arguments into a `ConversionJob`.

Paths can be given positionally or through `-i/--input` and `-o/--output`,
and the output format can come from `-f/--format`, from `-e/--extension` in
clipboard mode, or from the output file's extension. This module merges all
of these into a single job description and validates it before any image is
decoded: an invalid quality, a missing input file or an undeterminable output
format all fail here without invoking the codec.
"""
import argparse
from pathlib import Path
from typing import Optional, Tuple

from loguru import logger

from ..config.common import QUALITY_MAX, QUALITY_MIN
from ..config.formats import (
    CLIPBOARD_FORMAT,
    ImageFormat,
    format_from_extension,
    format_from_name,
    format_from_path,
)
from ..domain.exceptions import (
    InputNotFoundException,
    InvalidQualityException,
    MissingArgumentException,
    UnrecognizedOutputFormatException,
)
from ..domain.job import ConversionJob
from ..utils.format_utils import extension_of, replace_extension, with_format_extension

USAGE_HINT = "Usage: imgconv <input> <output> OR imgconv -c <output>"


def validate_quality(quality: int) -> int:
    if not QUALITY_MIN <= quality <= QUALITY_MAX:
        raise InvalidQualityException(
            f"Quality must be between {QUALITY_MIN} and {QUALITY_MAX}, got: {quality}"
        )
    return quality


def resolve_explicit_format(format_name: Optional[str]) -> Optional[ImageFormat]:
    """Maps the `-f` value to an ImageFormat. None when the flag was not given."""
    if format_name is None:
        return None
    image_format = format_from_name(format_name)
    if image_format is None:
        raise UnrecognizedOutputFormatException(f"Unknown output format: {format_name}")
    return image_format


def resolve_input(args: argparse.Namespace) -> Path:
    """
    Picks the input path from `-i/--input` or the first positional argument.

    Raises:
        MissingArgumentException: If neither was given.
        InputNotFoundException: If the path does not exist or is not a file.
    """
    input_str = args.input or args.pos_input
    if not input_str:
        raise MissingArgumentException(f"Input file is required. {USAGE_HINT}")

    input_path = Path(input_str)
    if not input_path.is_file():
        raise InputNotFoundException(f"Input file not found: {input_path}")
    return input_path


def resolve_output_path(args: argparse.Namespace) -> Path:
    """
    Picks the output path from `-o/--output` or the positional arguments.

    When the input does not come from the positional arguments (clipboard mode
    or `-i/--input`), a lone positional argument is taken as the output.
    """
    output_str = args.output or args.pos_output
    if not output_str and (args.clipboard or args.input):
        output_str = args.pos_input
    if not output_str:
        raise MissingArgumentException(f"Output file is required. {USAGE_HINT}")

    output_path = Path(output_str)
    # ".", ".." and "/" name a directory, not a file an extension could be set on.
    if output_path.name in ("", "..") or output_str.endswith(("/", "\\")):
        raise MissingArgumentException(
            f"Output path '{output_str}' is a directory, not a file name. {USAGE_HINT}"
        )
    return output_path


def determine_output(output: Path, explicit_format: Optional[ImageFormat]) -> Tuple[Path, ImageFormat]:
    """
    Determines the output path and format for a file-to-file conversion.

    An explicit format wins and gets its extension appended when the output
    path lacks it. Without one, the output extension decides.

    Raises:
        UnrecognizedOutputFormatException: If no format is given and the
            output extension is missing or unknown.
    """
    if explicit_format:
        return with_format_extension(output, explicit_format), explicit_format

    detected_format = format_from_path(output)
    if detected_format is None:
        raise UnrecognizedOutputFormatException(
            f"Could not determine output format from '{output}'. "
            "Please specify --format or use a recognized extension"
        )
    return output, detected_format


def determine_clipboard_output(
    output: Path,
    explicit_format: Optional[ImageFormat],
    extension: Optional[str],
) -> Tuple[Path, ImageFormat]:
    """
    Determines the output path and format when the image comes from the clipboard.

    Priority: `--extension`, then `--format`, then the output's own extension,
    then the clipboard's native format (PNG) with its extension appended.
    """
    if extension:
        target_format = format_from_extension(extension)
        if target_format is None:
            raise UnrecognizedOutputFormatException(f"Unknown extension: {extension}")

        clean_extension = extension.lstrip(".")
        current_extension = extension_of(output)
        if current_extension != clean_extension.lower():
            if current_extension:
                logger.info(
                    f"Correcting extension from .{output.suffix.lstrip('.')} to .{clean_extension} (conversion mode)"
                )
            output = replace_extension(output, clean_extension)
        return output, target_format

    if explicit_format:
        return with_format_extension(output, explicit_format), explicit_format

    detected_format = format_from_path(output)
    if detected_format:
        return output, detected_format

    output = replace_extension(output, CLIPBOARD_FORMAT.extension)
    logger.info(f"Auto-adding extension: .{CLIPBOARD_FORMAT.extension}")
    return output, CLIPBOARD_FORMAT


def resolve_job(args: argparse.Namespace) -> ConversionJob:
    """
    Builds the conversion job from the parsed arguments.

    Validation order mirrors what a user would fix first: quality, then the
    input, then the output. Nothing here opens the image.

    Args:
        args: The namespace produced by `imgconv.cli.get_args`.

    Returns:
        A validated ConversionJob.

    Raises:
        InvalidQualityException: Quality outside 1-100.
        MissingArgumentException: Input or output path not given.
        InputNotFoundException: Input path does not exist.
        UnrecognizedOutputFormatException: Output format cannot be determined.
    """
    quality = validate_quality(args.quality)
    explicit_format = resolve_explicit_format(args.format)

    if args.clipboard:
        output_path, output_format = determine_clipboard_output(
            resolve_output_path(args), explicit_format, args.extension
        )
        job = ConversionJob(output_path, output_format, quality, from_clipboard=True)
    else:
        input_path = resolve_input(args)
        if args.extension:
            logger.warning("--extension only applies to clipboard mode (-c). Ignoring it.")
        output_path, output_format = determine_output(resolve_output_path(args), explicit_format)
        job = ConversionJob(output_path, output_format, quality, input_path=input_path)

    logger.debug(f"Resolved job: {job}")
    return job
