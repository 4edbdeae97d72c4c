"""
Defines custom exception types for imgconv.

Every failure the tool can report to the user is expressed as one of these
exceptions. The entry point catches the common base `ImgConvException`, prints
its message and exits with a non-zero status; nothing is retried.

Resolution errors are raised while turning command-line arguments into a
conversion job, before Pillow is touched. Conversion errors are raised while
decoding or encoding the image.
"""


class ImgConvException(Exception):
    """Base class for all custom exceptions in imgconv."""

    pass


# --- Argument Resolution Exceptions ---
class ResolutionException(ImgConvException):
    """Base class for errors found while resolving the conversion job."""

    pass


class MissingArgumentException(ResolutionException):
    """Raised when the input or output path was not given at all."""

    pass


class InputNotFoundException(ResolutionException):
    """
    Raised when the input path does not point to an existing file.

    The check happens before any decoding, so the codec is never invoked for
    a path that is not there.
    """

    pass


class UnrecognizedOutputFormatException(ResolutionException):
    """
    Raised when the output format cannot be determined.

    This happens when `--format` is not given and the output path has no
    extension or one that does not map to a supported format, or when an
    `--extension` value is unknown.
    """

    pass


class InvalidQualityException(ResolutionException):
    """Raised when the quality is outside the accepted 1-100 range."""

    pass


# --- Conversion Exceptions ---
class ConversionException(ImgConvException):
    """Base class for errors raised while decoding or encoding an image."""

    pass


class CodecDecodeFailureException(ConversionException):
    """Raised when Pillow cannot open or decode the input image."""

    pass


class CodecEncodeFailureException(ConversionException):
    """
    Raised when Pillow cannot encode the image into the output format.

    Typical causes are an encoder missing from the installed Pillow build
    (e.g. AVIF) or image data the encoder rejects.
    """

    pass


class OutputDirectoryException(ConversionException):
    """Raised when the parent directory of the output file cannot be created."""

    pass


class ClipboardException(ConversionException):
    """Raised when no image can be read from the system clipboard."""

    pass
