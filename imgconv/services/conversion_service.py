"""
Runs a resolved `ConversionJob` through Pillow.

Decoding and encoding are entirely Pillow's work. This service opens the
source (a file or the clipboard), adapts the pixel mode when the target
encoder cannot store it, saves the image in the requested format and reports
what was written. Pillow errors are turned into the tool's own exceptions so
the entry point can print them uniformly.
"""
from pathlib import Path

from loguru import logger
from PIL import Image

from ..config.formats import CLIPBOARD_FORMAT
from ..domain.exceptions import (
    CodecDecodeFailureException,
    CodecEncodeFailureException,
    OutputDirectoryException,
)
from ..domain.job import ConversionJob, ConversionResult
from ..utils.format_utils import formatted_size
from .clipboard_service import grab_clipboard_image

# Errors Pillow raises for files it cannot identify, truncated data, broken
# headers or images above the decompression bomb limit.
DECODE_ERRORS = (OSError, ValueError, SyntaxError, Image.DecompressionBombError)

# KeyError is what Pillow raises when no encoder is registered for a format,
# e.g. AVIF on builds without libavif.
ENCODE_ERRORS = (OSError, ValueError, KeyError)

# Modes Pillow can only convert to 8-bit grayscale.
HIGH_DEPTH_MODES = ("I", "I;16", "I;16B", "I;16L", "I;16N", "F")

# Modes that keep their grayscale nature when reduced for encoders with a
# limited set of modes.
GRAYSCALE_MODES = ("1", "L", "LA", "La") + HIGH_DEPTH_MODES


class ConversionService:
    """
    Converts a single image as described by a ConversionJob.

    Usage:
        result = ConversionService(job).run()
    """

    def __init__(self, job: ConversionJob):
        self.job = job

    def run(self) -> ConversionResult:
        """
        Decodes the source, encodes it to the output path and reports the result.

        Returns:
            A ConversionResult describing the written file.

        Raises:
            CodecDecodeFailureException: The source could not be decoded.
            ClipboardException: Clipboard mode found no image.
            OutputDirectoryException: The output directory could not be created.
            CodecEncodeFailureException: Pillow could not write the output.
        """
        job = self.job
        if job.from_clipboard:
            logger.info("Reading image from clipboard...")
        else:
            logger.info(f"Reading image from: {job.input_path}")

        with self.load_image() as image:
            width, height = image.size
            source_format = image.format or CLIPBOARD_FORMAT.pil_format
            logger.success(f"Image loaded: {width}x{height} pixels, format: {source_format}")

            logger.info(f"Converting to format: {job.output_format}")
            self.ensure_output_dir()
            self.save_image(self.prepare_image(image))

        if job.output_format.lossy:
            logger.success(f"{job.output_format} quality: {job.quality}")

        size = job.output_path.stat().st_size
        logger.success(f"Output size: {formatted_size(size)}")
        logger.success(f"Successfully converted to: {job.output_path}")
        return ConversionResult(job.output_path, job.output_format, width, height, size)

    def load_image(self) -> Image.Image:
        """Opens and fully decodes the source image."""
        if self.job.from_clipboard:
            return grab_clipboard_image()

        input_path = self.job.input_path
        try:
            image = Image.open(input_path)
        except DECODE_ERRORS as e:
            raise CodecDecodeFailureException(f"Failed to open input file: {input_path} ({e})") from e

        try:
            image.load()
        except DECODE_ERRORS as e:
            image.close()
            raise CodecDecodeFailureException(f"Failed to decode image: {input_path} ({e})") from e
        return image

    def ensure_output_dir(self):
        output_dir = self.job.output_path.parent
        if output_dir.exists():
            return
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryException(f"Failed to create directory: {output_dir} ({e})") from e
        logger.debug(f"Created output directory '{output_dir}'")

    def target_mode(self, image: Image.Image) -> str:
        """
        Picks the closest mode the target encoder can store.

        Grayscale stays grayscale where the encoder allows it, and transparency
        is kept when the encoder has an alpha mode. Everything else becomes RGB.
        """
        save_modes = self.job.output_format.save_modes
        has_alpha = image.has_transparency_data
        if image.mode in GRAYSCALE_MODES:
            if has_alpha and "LA" in save_modes:
                return "LA"
            if "L" in save_modes:
                return "L"
        if has_alpha and "RGBA" in save_modes:
            return "RGBA"
        return "RGB"

    def prepare_image(self, image: Image.Image) -> Image.Image:
        """
        Converts the pixel mode if the target encoder cannot store the source mode.

        E.g. a CMYK JPEG becomes RGB before being saved as PNG, and an RGBA WebP
        becomes RGB before being saved as JPEG.
        """
        save_modes = self.job.output_format.save_modes
        if not save_modes or image.mode in save_modes:
            return image

        target_mode = self.target_mode(image)
        logger.debug(f"Converting mode {image.mode} to {target_mode} for {self.job.output_format}")
        # Pillow only reduces 16-bit and float data to 8-bit grayscale.
        if image.mode in HIGH_DEPTH_MODES and target_mode != "L":
            image = image.convert("L")
        return image.convert(target_mode)

    def save_options(self) -> dict:
        if self.job.output_format.lossy:
            return {"quality": self.job.quality}
        return {}

    def save_image(self, image: Image.Image):
        """
        Encodes `image` into the output file.

        On failure, an output file created by this attempt is removed so that no
        truncated image is left behind.
        """
        output_path: Path = self.job.output_path
        existed_before = output_path.exists()
        options = self.save_options()
        logger.debug(f"Saving '{output_path}' as {self.job.output_format} with options {options}")
        try:
            image.save(output_path, format=self.job.output_format.pil_format, **options)
        except ENCODE_ERRORS as e:
            if not existed_before:
                output_path.unlink(missing_ok=True)
            raise CodecEncodeFailureException(
                f"Failed to save image to: {output_path} as {self.job.output_format} ({e})"
            ) from e
