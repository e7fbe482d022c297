# image_encoding.py
import base64
import binascii

import cv2
import numpy as np

from errors import ImageEncodingError

DATA_URI_PREFIX = "data:image/jpeg;base64,"


def decode_image(data):
    """Decode compressed image bytes (JPEG, PNG, ...) into a BGR array."""
    if not data:
        raise ImageEncodingError("empty image payload")
    buf = np.frombuffer(data, dtype=np.uint8)
    try:
        img = cv2.imdecode(buf, cv2.IMREAD_COLOR)
    except cv2.error as e:
        raise ImageEncodingError(f"image payload could not be decoded: {e}") from e
    if img is None or img.size == 0:
        raise ImageEncodingError("image payload could not be decoded")
    return img


def encode_jpeg(img, quality=80):
    try:
        ok, buf = cv2.imencode(".jpg", img, [int(cv2.IMWRITE_JPEG_QUALITY), int(quality)])
    except cv2.error as e:
        raise ImageEncodingError(f"JPEG encoding failed: {e}") from e
    if not ok:
        raise ImageEncodingError("JPEG encoding failed")
    return buf.tobytes()


def encode_image_base64(data, quality=80):
    """
    Re-encode an uploaded image as JPEG at a fixed quality and return it as base64 text.
    Raises ImageEncodingError for empty or corrupt payloads.
    """
    jpeg = encode_jpeg(decode_image(data), quality)
    return base64.b64encode(jpeg).decode("ascii")


def to_data_uri(b64):
    return DATA_URI_PREFIX + b64


def from_data_uri(uri):
    """Return the JPEG bytes embedded in a data URI built by to_data_uri."""
    if not uri.startswith(DATA_URI_PREFIX):
        raise ImageEncodingError("not a JPEG data URI")
    try:
        return base64.b64decode(uri[len(DATA_URI_PREFIX):], validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageEncodingError(f"invalid base64 payload: {e}") from e
