"""
This module contains helper functions for presenting data and handling file
extensions. They are used by the argument resolver to fix up output paths and
by the conversion service to report results.
"""

from pathlib import Path

from ..config.formats import ImageFormat


def formatted_size(size_bytes: int) -> str:
    """
    Converts a size in bytes to a human-readable string (B, KB, MB, GB, TB).

    Args:
        size_bytes: The size of the file in bytes.

    Returns:
        A formatted string with the appropriate unit.
        For example, 1536 becomes "1.50 KB", and 2097152 becomes "2 MB".
    """
    if size_bytes <= 0:
        return "0 B"

    units = ["B", "KB", "MB", "GB", "TB"]
    size = float(size_bytes)
    for unit in units:
        if size < 1024.0:
            if unit == "B":
                return f"{int(size)} {unit}"
            return f"{size:.2f} {unit}".replace(".00", "")
        size /= 1024.0

    return f"{size * 1024.0:.2f} {units[-1]}".replace(".00", "")


def extension_of(path: Path) -> str:
    """Returns the lowercase extension of `path` without the leading dot."""
    return path.suffix.lower().lstrip(".")


def with_format_extension(path: Path, image_format: ImageFormat) -> Path:
    """
    Makes sure `path` carries an extension belonging to `image_format`.

    A path that already ends in one of the format's aliases (e.g. ".jpeg" for
    JPEG) is returned unchanged. Otherwise the canonical extension is set,
    replacing any other suffix: `out` becomes `out.png`, `out.webp` becomes
    `out.png` when PNG was requested.
    """
    if image_format.matches_extension(path.suffix):
        return path
    return path.with_suffix(f".{image_format.extension}")


def replace_extension(path: Path, extension: str) -> Path:
    """Sets the suffix of `path` to `extension`, given with or without a dot."""
    return path.with_suffix(f".{extension.lstrip('.')}")
