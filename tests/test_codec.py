"""Tests for decoding and resampling."""

import io

import pytest
from PIL import Image

from gitfit_compressor import decode, open_image, resample, scaled_height
from gitfit_shared import DecodeError

from .conftest import encode_png


def test_decode_roundtrips_dimensions(solid_image: Image.Image) -> None:
    decoded = decode(encode_png(solid_image))
    assert decoded.size == (640, 480)


def test_decode_rejects_garbage() -> None:
    with pytest.raises(DecodeError):
        decode(b"definitely not an image")


def test_decode_rejects_empty_input() -> None:
    with pytest.raises(DecodeError):
        decode(b"")


def test_decode_applies_exif_orientation() -> None:
    image = Image.new("RGB", (60, 30), (0, 0, 255))
    exif = Image.Exif()
    exif[0x0112] = 6  # rotate 90 CW on display
    buf = io.BytesIO()
    image.save(buf, format="JPEG", exif=exif)

    decoded = decode(buf.getvalue())
    assert decoded.size == (30, 60)


def test_open_image_missing_file(tmp_path) -> None:
    with pytest.raises(OSError):
        open_image(tmp_path / "missing.png")


def test_scaled_height_preserves_aspect() -> None:
    assert scaled_height(640, 480, 320) == 240
    assert scaled_height(640, 480, 100) == 75
    assert scaled_height(1000, 1, 10) == 1


def test_resample_width_and_height(solid_image: Image.Image) -> None:
    resized = resample(solid_image, 320)
    assert resized.size == (320, 240)
    assert solid_image.size == (640, 480)


def test_resample_palette_image_converts_mode() -> None:
    image = Image.new("P", (200, 100))
    resized = resample(image, 100)
    assert resized.mode == "RGB"
    assert resized.size == (100, 50)
