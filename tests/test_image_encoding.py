import base64

import pytest

from errors import ImageEncodingError
from image_encoding import (
    DATA_URI_PREFIX,
    decode_image,
    encode_image_base64,
    from_data_uri,
    to_data_uri,
)


def test_encode_produces_jpeg_base64(png_bytes):
    jpeg = base64.b64decode(encode_image_base64(png_bytes, quality=80))
    assert jpeg[:2] == b"\xff\xd8"


def test_decode_keeps_dimensions(png_bytes):
    img = decode_image(png_bytes)
    assert img.shape == (32, 32, 3)


@pytest.mark.parametrize("payload", [b"", b"not an image at all", b"\x89PNG\r\n\x1a\n\x00\x00"])
def test_bad_payloads_raise(payload):
    with pytest.raises(ImageEncodingError):
        encode_image_base64(payload)


def test_data_uri_round_trip(png_bytes):
    b64 = encode_image_base64(png_bytes)
    uri = to_data_uri(b64)
    assert uri.startswith(DATA_URI_PREFIX)
    assert from_data_uri(uri) == base64.b64decode(b64)


def test_from_data_uri_rejects_other_prefixes():
    with pytest.raises(ImageEncodingError):
        from_data_uri("data:image/png;base64,AAAA")
