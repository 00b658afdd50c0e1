from __future__ import annotations
import msgspec

from httpspec.core.errors import InvalidContentLength, MissingContentLength
from httpspec.core.structs import HttpResponse


def encode_body(data) -> bytes:
    if isinstance(data, bytes):
        return data
    return msgspec.json.encode(data)


def decode_body(body: bytes, response: HttpResponse, typ: type | None = None):
    """Decodes a JSON response body, reading only ``Content-Length`` bytes."""
    raw_length = response.header("content-length")
    if raw_length is None:
        raise MissingContentLength()
    try:
        length = int(raw_length)
    except ValueError:
        raise InvalidContentLength(raw_length) from None
    if length < 0:
        raise InvalidContentLength(raw_length)
    data = body[:length]
    if typ:
        return msgspec.json.decode(data, type=typ)
    return msgspec.json.decode(data)
