"""
Image format table.

Defines every output format imgconv can write, how it is named on the command
line, which file extensions map to it and which Pillow encoder handles it.
"""
from pathlib import Path
from typing import Dict, Optional, Tuple


class ImageFormat:
    """
    A target image format.

    Attributes:
        name (str): Canonical name, accepted by `-f/--format`.
        pil_format (str): The format identifier Pillow's `Image.save` expects.
        extension (str): Canonical file extension (without dot) appended to
                         extension-less output paths.
        aliases (tuple): Every file extension that maps to this format.
        lossy (bool): Whether the encoder accepts a `quality` option.
        save_modes (tuple | None): Pixel modes the encoder can store. None means
                                   Pillow takes care of any mode itself.
    """

    def __init__(
        self,
        name: str,
        pil_format: str,
        extension: str,
        aliases: Tuple[str, ...],
        lossy: bool = False,
        save_modes: Optional[Tuple[str, ...]] = None,
    ):
        self.name = name
        self.pil_format = pil_format
        self.extension = extension
        self.aliases = aliases
        self.lossy = lossy
        self.save_modes = save_modes

    def matches_extension(self, extension: str) -> bool:
        return extension.lower().lstrip(".") in self.aliases

    def __repr__(self) -> str:
        return f"ImageFormat({self.name!r})"

    def __str__(self) -> str:
        return self.pil_format


PNG = ImageFormat("png", "PNG", "png", ("png",), save_modes=("1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"))
JPEG = ImageFormat("jpeg", "JPEG", "jpg", ("jpg", "jpeg"), lossy=True, save_modes=("L", "RGB", "CMYK"))
GIF = ImageFormat("gif", "GIF", "gif", ("gif",), save_modes=("1", "L", "P", "RGB"))
BMP = ImageFormat("bmp", "BMP", "bmp", ("bmp",), save_modes=("1", "L", "P", "RGB", "RGBA"))
ICO = ImageFormat("ico", "ICO", "ico", ("ico",), save_modes=("L", "LA", "RGB", "RGBA"))
TIFF = ImageFormat(
    "tiff", "TIFF", "tiff", ("tiff", "tif"),
    save_modes=("1", "L", "LA", "I", "I;16", "F", "P", "RGB", "RGBA", "CMYK"),
)
WEBP = ImageFormat("webp", "WEBP", "webp", ("webp",), lossy=True, save_modes=("RGB", "RGBA"))
AVIF = ImageFormat("avif", "AVIF", "avif", ("avif",), lossy=True, save_modes=("RGB", "RGBA"))
PNM = ImageFormat("pnm", "PPM", "pnm", ("pnm", "pbm", "pgm", "ppm"), save_modes=("1", "L", "RGB"))
TGA = ImageFormat("tga", "TGA", "tga", ("tga",), save_modes=("1", "L", "LA", "P", "RGB", "RGBA"))
DDS = ImageFormat("dds", "DDS", "dds", ("dds",), save_modes=("L", "LA", "RGB", "RGBA"))

SUPPORTED_FORMATS = (PNG, JPEG, GIF, BMP, ICO, TIFF, WEBP, AVIF, PNM, TGA, DDS)

# Names accepted by `-f/--format`. "jpg" and "tif" are kept as spellings of
# the canonical names since users type them as often as the long forms.
FORMAT_NAMES: Dict[str, ImageFormat] = {fmt.name: fmt for fmt in SUPPORTED_FORMATS}
FORMAT_NAMES["jpg"] = JPEG
FORMAT_NAMES["tif"] = TIFF

EXTENSION_FORMATS: Dict[str, ImageFormat] = {
    alias: fmt for fmt in SUPPORTED_FORMATS for alias in fmt.aliases
}

# Format the clipboard delivers its image in.
CLIPBOARD_FORMAT = PNG


def format_from_name(name: str) -> Optional[ImageFormat]:
    """Looks up a format by its `-f` name (case-insensitive)."""
    return FORMAT_NAMES.get(name.lower())


def format_from_extension(extension: str) -> Optional[ImageFormat]:
    """Looks up a format by file extension, with or without the leading dot."""
    return EXTENSION_FORMATS.get(extension.lower().lstrip("."))


def format_from_path(path: Path) -> Optional[ImageFormat]:
    """
    Detects the output format from the extension of `path`.

    Returns:
        The matching ImageFormat, or None when the path has no extension or an
        extension imgconv does not know.
    """
    if not path.suffix:
        return None
    return format_from_extension(path.suffix)
