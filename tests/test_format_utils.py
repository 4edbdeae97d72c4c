from pathlib import Path

import pytest

from imgconv.config import formats
from imgconv.utils.format_utils import formatted_size, replace_extension, with_format_extension


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (-5, "0 B"),
        (512, "512 B"),
        (1536, "1.50 KB"),
        (2 * 1024 * 1024, "2 MB"),
    ],
)
def test_formatted_size(size, expected):
    assert formatted_size(size) == expected


def test_extension_added_when_missing():
    assert with_format_extension(Path("out"), formats.PNG) == Path("out.png")


def test_alias_extension_is_kept():
    assert with_format_extension(Path("out.jpeg"), formats.JPEG) == Path("out.jpeg")
    assert with_format_extension(Path("out.JPG"), formats.JPEG) == Path("out.JPG")


def test_foreign_extension_is_replaced():
    assert with_format_extension(Path("dir/out.webp"), formats.PNG) == Path("dir/out.png")


def test_replace_extension():
    assert replace_extension(Path("image.png"), ".jpg") == Path("image.jpg")
    assert replace_extension(Path("image"), "webp") == Path("image.webp")
