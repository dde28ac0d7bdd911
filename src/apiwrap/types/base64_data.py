"""Base64 data that encodes to URL-safe base64 but decodes from several variants.

Clients and libraries disagree on the base64 flavour they emit, so
:class:`Base64Data` accepts any of the following, tried in this order, and
keeps the first that decodes canonically:

1. standard alphabet, padded
2. URL-safe alphabet, padded
3. URL-safe alphabet, unpadded
4. MIME (standard alphabet, padded, line breaks and blanks ignored)
5. standard alphabet, unpadded

"Canonically" means re-encoding the bytes with the same variant gives back
the input: wrong padding or non-zero trailing bits reject a variant.
Encoding always produces URL-safe, unpadded text.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Callable, NamedTuple

from pydantic_core import core_schema

_MIME_IGNORED = str.maketrans("", "", " \t\r\n")


def _pad(text: str) -> str:
    if "=" in text:
        raise ValueError("unexpected padding")
    return text + "=" * (-len(text) % 4)


class _Variant(NamedTuple):
    name: str
    decode: Callable[[str], bytes]
    encode: Callable[[bytes], str]
    normalize: Callable[[str], str] = lambda text: text


def _std_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii")


_VARIANTS = (
    _Variant(
        "standard",
        lambda text: base64.b64decode(text, validate=True),
        _std_encode,
    ),
    _Variant(
        "url-safe",
        lambda text: base64.b64decode(text, altchars=b"-_", validate=True),
        _url_encode,
    ),
    _Variant(
        "url-safe unpadded",
        lambda text: base64.b64decode(_pad(text), altchars=b"-_", validate=True),
        lambda data: _url_encode(data).rstrip("="),
    ),
    _Variant(
        "mime",
        lambda text: base64.b64decode(text, validate=True),
        _std_encode,
        lambda text: text.translate(_MIME_IGNORED),
    ),
    _Variant(
        "standard unpadded",
        lambda text: base64.b64decode(_pad(text), validate=True),
        lambda data: _std_encode(data).rstrip("="),
    ),
)


def _decode_with(variant: _Variant, text: str) -> bytes:
    cleaned = variant.normalize(text)
    data = variant.decode(cleaned)
    if variant.encode(data) != cleaned:
        raise ValueError(f"not canonical {variant.name} base64")
    return data


def decode(text: str) -> bytes:
    """Decode *text* with the first variant that accepts it.

    Raises:
        ValueError: If none of the five variants decodes *text*.
    """
    for variant in _VARIANTS:
        try:
            return _decode_with(variant, text)
        except (binascii.Error, ValueError):
            continue
    raise ValueError(f"Could not decode base64 data: {text}")


def encode(data: bytes) -> str:
    """Encode *data* as URL-safe base64 without padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


class Base64Data:
    """Binary payload carried as base64 text in JSON.

    Example::

        >>> Base64Data.decode("aGVsbG8=")
        Base64Data(b'hello')
        >>> str(Base64Data(b"hello"))
        'aGVsbG8'
    """

    __slots__ = ("data",)

    def __init__(self, data: bytes = b"") -> None:
        self.data = bytes(data)

    @classmethod
    def decode(cls, text: str) -> Base64Data:
        return cls(decode(text))

    def encode(self) -> str:
        return encode(self.data)

    def is_empty(self) -> bool:
        return not self.data

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"Base64Data({self.data!r})"

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Base64Data):
            return self.data == other.data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.data)

    @classmethod
    def _validate(cls, value: Any) -> Base64Data:
        if isinstance(value, cls):
            return value
        if isinstance(value, (bytes, bytearray)):
            return cls(value)
        if isinstance(value, str):
            return cls.decode(value)
        raise ValueError("a base64 encoded string")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict[str, Any]:
        return {"type": "string", "format": "byte"}
