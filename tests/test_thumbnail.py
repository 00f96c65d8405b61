import base64
import io

import pytest
from PIL import Image

from photo_meta.thumbnail import (
    ThumbnailError,
    decode_data_url,
    generate_thumbnail,
    generate_thumbnail_from_file,
)


def _data_url(size, mode="RGB", fmt="PNG"):
    buf = io.BytesIO()
    Image.new(mode, size).save(buf, format=fmt)
    return f"data:image/{fmt.lower()};base64," + base64.b64encode(buf.getvalue()).decode()


def _open(data_url):
    assert data_url.startswith("data:image/jpeg;base64,")
    return Image.open(io.BytesIO(base64.b64decode(data_url.split(",", 1)[1])))


def test_large_image_is_fitted_keeping_aspect_ratio():
    with _open(generate_thumbnail(_data_url((1024, 512)))) as img:
        assert img.format == "JPEG"
        assert img.size == (512, 256)


def test_small_image_is_not_enlarged():
    with _open(generate_thumbnail(_data_url((40, 30)))) as img:
        assert img.size == (40, 30)


def test_alpha_image_is_converted_to_rgb():
    with _open(generate_thumbnail(_data_url((20, 20), mode="RGBA"), max_size=10)) as img:
        assert img.mode == "RGB"
        assert img.size == (10, 10)


def test_decode_data_url():
    mime, data = decode_data_url("data:image/png;base64," + base64.b64encode(b"abc").decode())
    assert (mime, data) == ("image/png", b"abc")


@pytest.mark.parametrize(
    "url, message",
    [
        ("image/png;base64,AAAA", "Invalid data URL format"),
        ("data:image/png;base64", "Invalid data URL: missing comma"),
        ("data:image/png;base64,@@@", "Failed to decode base64"),
    ],
)
def test_bad_data_urls(url, message):
    with pytest.raises(ThumbnailError, match=message):
        generate_thumbnail(url)


def test_undecodable_image():
    url = "data:image/png;base64," + base64.b64encode(b"not an image").decode()
    with pytest.raises(ThumbnailError, match="Failed to load image"):
        generate_thumbnail(url)


def test_from_file(image_file, tmp_path):
    with _open(generate_thumbnail_from_file(image_file, max_size=8)) as img:
        assert img.size == (8, 6)
    with pytest.raises(ThumbnailError, match="does not exist"):
        generate_thumbnail_from_file(tmp_path / "missing.jpg")
