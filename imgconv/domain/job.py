"""
Defines the job description handed from argument resolution to conversion,
and the result reported back once the conversion is done.
"""

from pathlib import Path
from typing import Optional

from ..config.formats import ImageFormat


class ConversionJob:
    """
    A fully resolved conversion request.

    Instances are created by the argument resolver once every path, the target
    format and the quality have been validated. The conversion service only
    reads them.

    Attributes:
        input_path (Optional[Path]): The image to read. None when the source is the clipboard.
        output_path (Path): Where the converted image is written, including any
                            extension added during resolution.
        output_format (ImageFormat): The format to encode into.
        quality (int): Quality for lossy encoders, within 1-100.
        from_clipboard (bool): True when the image is taken from the clipboard.
    """

    def __init__(
        self,
        output_path: Path,
        output_format: ImageFormat,
        quality: int,
        input_path: Optional[Path] = None,
        from_clipboard: bool = False,
    ):
        if input_path is None and not from_clipboard:
            raise ValueError("ConversionJob needs an input_path unless reading from the clipboard.")
        self.input_path = input_path
        self.output_path = output_path
        self.output_format = output_format
        self.quality = quality
        self.from_clipboard = from_clipboard

    @property
    def source_label(self) -> str:
        return "clipboard" if self.from_clipboard else str(self.input_path)

    def __repr__(self) -> str:
        return (
            f"ConversionJob(source={self.source_label!r}, output={str(self.output_path)!r}, "
            f"format={self.output_format.name!r}, quality={self.quality})"
        )


class ConversionResult:
    """Outcome of a successful conversion."""

    def __init__(self, output_path: Path, output_format: ImageFormat, width: int, height: int, size: int):
        self.output_path = output_path
        self.output_format = output_format
        self.width = width
        self.height = height
        self.size = size

    def __repr__(self) -> str:
        return (
            f"ConversionResult(output={str(self.output_path)!r}, format={self.output_format.name!r}, "
            f"size={self.width}x{self.height}, bytes={self.size})"
        )
