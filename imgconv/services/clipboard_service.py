"""
Reads the source image from the system clipboard.

Pillow's `ImageGrab.grabclipboard()` either returns an image, a list of file
paths (when files were copied in a file manager) or None. On Linux it shells
out to `wl-paste` or `xclip`, which may not be installed.
"""
from pathlib import Path

from loguru import logger
from PIL import Image, ImageGrab

from ..domain.exceptions import ClipboardException


def grab_clipboard_image() -> Image.Image:
    """
    Returns the image currently held by the clipboard.

    If the clipboard holds copied files instead of image data, the first one
    that exists is opened and fully loaded.

    Raises:
        ClipboardException: If the clipboard cannot be accessed or holds no image.
    """
    try:
        content = ImageGrab.grabclipboard()
    except (OSError, NotImplementedError) as e:
        raise ClipboardException(f"Failed to access clipboard: {e}") from e

    if isinstance(content, Image.Image):
        return content

    if isinstance(content, list):
        for entry in content:
            path = Path(entry)
            if not path.is_file():
                continue
            logger.debug(f"Clipboard holds a file reference, opening '{path}'")
            try:
                with Image.open(path) as img:
                    img.load()
                    copied = img.copy()
                    copied.format = img.format
                    return copied
            except OSError as e:
                raise ClipboardException(f"Clipboard file '{path}' is not a readable image: {e}") from e

    raise ClipboardException("No image found in clipboard. Please copy an image first.")
