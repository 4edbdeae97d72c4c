from unittest import mock

import pytest
from PIL import Image

from imgconv import __version__
from imgconv.main import EXIT_FAILURE, EXIT_OK, main


def test_positional_conversion(make_image, tmp_path, capsys):
    source = make_image("photo.png")
    output = tmp_path / "photo.jpg"

    assert main([str(source), str(output), "-q", "85"]) == EXIT_OK

    with Image.open(output) as converted:
        assert converted.format == "JPEG"
    err = capsys.readouterr().err
    assert "JPEG quality: 85" in err
    assert f"Successfully converted to: {output}" in err


def test_flag_conversion_with_forced_format(make_image, tmp_path):
    source = make_image("photo.bmp")
    assert main(["-i", str(source), "-o", str(tmp_path / "photo"), "-f", "PNG"]) == EXIT_OK
    with Image.open(tmp_path / "photo.png") as converted:
        assert converted.format == "PNG"


def test_missing_input_never_reaches_codec(tmp_path, capsys):
    with mock.patch("imgconv.services.conversion_service.Image.open") as image_open:
        status = main([str(tmp_path / "ghost.webp"), str(tmp_path / "out.png")])
    assert status == EXIT_FAILURE
    image_open.assert_not_called()
    assert "Input file not found" in capsys.readouterr().err


@pytest.mark.parametrize("quality", ["0", "101"])
def test_bad_quality_never_reaches_codec(make_image, tmp_path, capsys, quality):
    source = make_image("photo.png")
    with mock.patch("imgconv.services.conversion_service.Image.open") as image_open:
        status = main([str(source), str(tmp_path / "out.jpg"), "-q", quality])
    assert status == EXIT_FAILURE
    image_open.assert_not_called()
    assert "Quality must be between 1 and 100" in capsys.readouterr().err


def test_output_without_extension(make_image, tmp_path, capsys):
    source = make_image("photo.png")
    assert main([str(source), str(tmp_path / "output")]) == EXIT_FAILURE
    assert "Could not determine output format" in capsys.readouterr().err


def test_decode_failure_is_reported(tmp_path, capsys):
    source = tmp_path / "fake.png"
    source.write_bytes(b"\x89PNG but not really")
    assert main([str(source), str(tmp_path / "out.jpg")]) == EXIT_FAILURE
    assert "Failed to open input file" in capsys.readouterr().err


def test_clipboard_conversion(tmp_path):
    pasted = Image.new("RGB", (16, 16), "red")
    with mock.patch("imgconv.services.conversion_service.grab_clipboard_image", return_value=pasted):
        assert main(["-c", str(tmp_path / "pasted"), "-e", "jpg"]) == EXIT_OK
    assert (tmp_path / "pasted.jpg").is_file()


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["-V"])
    assert exc_info.value.code == 0
    assert f"imgconv {__version__}" in capsys.readouterr().out


def test_unknown_format_is_a_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["in.png", str(tmp_path / "out"), "-f", "hdr"])
    assert exc_info.value.code == 2


def test_clipboard_rejects_input_path(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["-c", "-i", "in.png", str(tmp_path / "out.png")])
    assert exc_info.value.code == 2


def test_debug_log_level_shows_resolved_job(make_image, tmp_path, capsys):
    source = make_image("photo.png")
    assert main([str(source), str(tmp_path / "out.gif"), "--log-level", "debug"]) == EXIT_OK
    assert "Resolved job: ConversionJob(" in capsys.readouterr().err


@pytest.mark.parametrize("output", [".", "..", "/"])
def test_directory_as_output_is_reported(make_image, capsys, output):
    source = make_image("photo.png")
    assert main([str(source), output, "-f", "png"]) == EXIT_FAILURE
    assert "is a directory, not a file name" in capsys.readouterr().err


def test_clipboard_directory_as_output_is_reported(capsys):
    assert main(["-c", "."]) == EXIT_FAILURE
    assert "is a directory, not a file name" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        ["-i", "a.png", "b.png", "c.png"],
        ["a.png", "b.png", "-o", "c.png"],
        ["-c", "-o", "out.png", "extra.png"],
    ],
)
def test_leftover_positionals_are_usage_errors(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2
    assert "unrecognized arguments" in capsys.readouterr().err
