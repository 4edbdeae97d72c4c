import pytest
from PIL import Image, ImageGrab

from imgconv.domain.exceptions import ClipboardException
from imgconv.services.clipboard_service import grab_clipboard_image


def test_image_on_clipboard(monkeypatch):
    pasted = Image.new("RGB", (5, 5))
    monkeypatch.setattr(ImageGrab, "grabclipboard", lambda: pasted)
    assert grab_clipboard_image() is pasted


def test_empty_clipboard(monkeypatch):
    monkeypatch.setattr(ImageGrab, "grabclipboard", lambda: None)
    with pytest.raises(ClipboardException, match="No image found in clipboard"):
        grab_clipboard_image()


def test_copied_file_is_opened(monkeypatch, make_image, tmp_path):
    path = make_image("copied.png", size=(7, 3))
    monkeypatch.setattr(ImageGrab, "grabclipboard", lambda: [str(tmp_path / "gone.png"), str(path)])
    assert grab_clipboard_image().size == (7, 3)


def test_copied_file_that_is_not_an_image(monkeypatch, tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello", encoding="utf-8")
    monkeypatch.setattr(ImageGrab, "grabclipboard", lambda: [str(path)])
    with pytest.raises(ClipboardException, match="not a readable image"):
        grab_clipboard_image()


def test_clipboard_tool_unavailable(monkeypatch):
    def no_clipboard():
        raise NotImplementedError("wl-paste or xclip is required")

    monkeypatch.setattr(ImageGrab, "grabclipboard", no_clipboard)
    with pytest.raises(ClipboardException, match="Failed to access clipboard"):
        grab_clipboard_image()


def test_copied_file_keeps_its_format(monkeypatch, make_image):
    path = make_image("copied.jpg")
    monkeypatch.setattr(ImageGrab, "grabclipboard", lambda: [str(path)])
    assert grab_clipboard_image().format == "JPEG"
