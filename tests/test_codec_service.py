import io

import pytest
from PIL import Image

from resizer.services.codec_service import FORMATS, JPEG, PNG, SUPPORTED_EXTENSIONS, format_for, is_supported


def test_registry_maps_extensions():
    assert format_for(".jpg") is JPEG
    assert format_for(".jpeg") is JPEG
    assert format_for(".png") is PNG
    assert SUPPORTED_EXTENSIONS == {".jpg", ".jpeg", ".png"}
    assert set(FORMATS) == SUPPORTED_EXTENSIONS


@pytest.mark.parametrize("ext", [".JPG", ".Png", ".gif", "", "jpg"])
def test_unsupported_extensions(ext):
    assert not is_supported(ext)
    with pytest.raises(KeyError):
        format_for(ext)


def test_jpeg_decoder_rejects_png_content():
    buf = io.BytesIO()
    Image.new("RGB", (4, 4)).save(buf, format="PNG")
    buf.seek(0)
    with pytest.raises(OSError):
        JPEG.decode(buf)


def test_jpeg_encoder_converts_alpha():
    buf = io.BytesIO()
    JPEG.encode(Image.new("RGBA", (8, 8), (10, 20, 30, 40)), buf, 80)
    buf.seek(0)
    decoded = Image.open(buf)
    assert decoded.format == "JPEG"
    assert decoded.size == (8, 8)


def test_png_encoder_keeps_mode():
    buf = io.BytesIO()
    PNG.encode(Image.new("LA", (3, 5)), buf, 75)
    buf.seek(0)
    decoded = PNG.decode(buf)
    assert decoded.mode == "LA"
    assert decoded.size == (3, 5)
