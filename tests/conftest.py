import argparse
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    """Keeps a real ~/.config/imgconv file from leaking into the tests."""
    config_path = tmp_path / "config.user.yaml"
    monkeypatch.setenv("IMGCONV_CONFIG", str(config_path))
    return config_path


@pytest.fixture(autouse=True)
def detach_logger():
    """Drops sinks bound to a captured stderr that no longer exists after the test."""
    yield
    logger.remove()


@pytest.fixture
def make_image(tmp_path):
    """Factory writing a small image in the given mode and Pillow format."""

    def _make_image(name: str, pil_format: str = None, mode: str = "RGB", size=(64, 48)) -> Path:
        image = Image.new("RGB", size)
        for x in range(size[0]):
            for y in range(size[1]):
                image.putpixel((x, y), (x * 4 % 256, y * 5 % 256, 128))
        if mode in ("RGBA", "LA"):
            image.putalpha(200)
        if mode in ("RGB", "RGBA", "LA", "L", "P", "1", "CMYK"):
            image = image.convert(mode)
        else:
            image = Image.new(mode, size, 1000)
        path = tmp_path / name
        image.save(path, format=pil_format)
        return path

    return _make_image


@pytest.fixture
def make_args():
    """Builds the namespace `imgconv.cli.get_args` would return."""

    def _make_args(**overrides) -> argparse.Namespace:
        values = {
            "pos_input": None,
            "pos_output": None,
            "input": None,
            "output": None,
            "clipboard": False,
            "format": None,
            "extension": None,
            "quality": 90,
            "log_level": "INFO",
        }
        values.update(overrides)
        return argparse.Namespace(**values)

    return _make_args
