"""Tests for ImageFormat and the shared path helpers."""

import io
from pathlib import Path

import pytest
from PIL import Image

from gitfit_shared import ImageFormat, UnsupportedFormat
from gitfit_shared.files import is_valid_quality, safe_download_name, with_format_extension


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("jpeg", ImageFormat.JPEG),
        ("JPEG", ImageFormat.JPEG),
        ("jpg", ImageFormat.JPEG),
        ("png", ImageFormat.PNG),
        (" gif ", ImageFormat.GIF),
    ],
)
def test_parse_known_names(name: str, expected: ImageFormat) -> None:
    assert ImageFormat.parse(name) is expected


def test_parse_passes_members_through() -> None:
    assert ImageFormat.parse(ImageFormat.PNG) is ImageFormat.PNG


@pytest.mark.parametrize("name", ["bmp", "webp", "", "tiff"])
def test_parse_unknown_raises(name: str) -> None:
    with pytest.raises(UnsupportedFormat) as exc_info:
        ImageFormat.parse(name)
    assert exc_info.value.format_name == name


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("photo.png", ImageFormat.PNG),
        ("anim.GIF", ImageFormat.GIF),
        ("photo.jpeg", ImageFormat.JPEG),
        ("photo.bmp", ImageFormat.JPEG),
        ("noext", ImageFormat.JPEG),
    ],
)
def test_from_extension(path: str, expected: ImageFormat) -> None:
    assert ImageFormat.from_extension(path) is expected


def test_format_metadata() -> None:
    assert ImageFormat.JPEG.mime == "image/jpeg"
    assert ImageFormat.JPEG.extension == ".jpg"
    assert ImageFormat.GIF.mime == "image/gif"
    assert str(ImageFormat.PNG) == "png"
    assert ImageFormat.JPEG.uses_quality
    assert not ImageFormat.PNG.uses_quality


@pytest.mark.parametrize("fmt", list(ImageFormat))
def test_encode_produces_decodable_output(fmt: ImageFormat) -> None:
    image = Image.new("RGBA", (50, 40), (10, 20, 30, 128))
    data = fmt.encode(image, quality=80)
    with Image.open(io.BytesIO(data)) as decoded:
        assert decoded.format == fmt.pil_format
        assert decoded.size == (50, 40)


def test_jpeg_quality_changes_size(noise_image: Image.Image) -> None:
    low = ImageFormat.JPEG.encode(noise_image, quality=10)
    high = ImageFormat.JPEG.encode(noise_image, quality=95)
    assert len(low) < len(high)


def test_with_format_extension_appends_when_missing() -> None:
    assert with_format_extension(Path("out/avatar"), ImageFormat.PNG) == Path("out/avatar.png")


def test_with_format_extension_keeps_existing_suffix() -> None:
    assert with_format_extension(Path("avatar.jpg"), ImageFormat.PNG) == Path("avatar.jpg")


def test_safe_download_name() -> None:
    assert safe_download_name("my photo.png", ImageFormat.JPEG) == "my_photo-compressed.jpg"
    assert safe_download_name("../../etc/passwd", ImageFormat.GIF) == "etc_passwd-compressed.gif"
    assert safe_download_name(None, ImageFormat.PNG) == "gitfit-compressed.png"


def test_is_valid_quality() -> None:
    assert is_valid_quality(1)
    assert is_valid_quality(100)
    assert not is_valid_quality(0)
    assert not is_valid_quality(101)
