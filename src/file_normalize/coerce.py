"""Shape checks and text/bytes coercion.

Text is ``str``. Byte sequences are any of ``bytes``, ``bytearray`` or
``memoryview``. Conversions between the two use UTF-8 unless told otherwise.
"""

import codecs
from typing import Any, Union

from .errors import NormalizeTypeError

DEFAULT_ENCODING = "utf-8"

BYTES_TYPES = (bytes, bytearray, memoryview)

ByteSequence = Union[bytes, bytearray, memoryview]
TextOrBytes = Union[str, bytes, bytearray, memoryview]


def check_encoding(encoding: str) -> str:
    """Return the canonical codec name if it can join text and bytes safely.

    The codec must encode line endings as plain ASCII bytes and must not
    emit a byte-order mark, otherwise appended output would be corrupted.

    Raises:
        ValueError: If the codec is unknown or not ASCII-compatible
    """
    try:
        name = codecs.lookup(encoding).name
        sample = "a\r\n".encode(name)
    except (LookupError, UnicodeError):
        raise ValueError(f"unsupported encoding: {encoding}")
    if sample != b"a\r\n":
        raise ValueError(f"encoding is not ASCII-compatible: {encoding}")
    return name


def is_bytes(value: Any) -> bool:
    """Return True if value is a byte sequence."""
    return isinstance(value, BYTES_TYPES)


def ensure_text(value: Any, operation: str) -> str:
    """Return value if it is text, else raise NormalizeTypeError."""
    if not isinstance(value, str):
        raise NormalizeTypeError(operation, "a string", value)
    return value


def ensure_text_or_bytes(value: Any, operation: str) -> TextOrBytes:
    """Return value if it is text or a byte sequence, else raise NormalizeTypeError."""
    if not isinstance(value, str) and not is_bytes(value):
        raise NormalizeTypeError(operation, "a string or buffer", value)
    return value


def as_text(value: TextOrBytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode a byte sequence to text; text passes through."""
    if isinstance(value, str):
        return value
    return bytes(value).decode(encoding)


def as_bytes(value: TextOrBytes, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Encode text to bytes; byte sequences are copied into ``bytes``."""
    if isinstance(value, str):
        return value.encode(encoding)
    return bytes(value)


def like(template: ByteSequence, data: bytes) -> ByteSequence:
    """Return data in the same mutable/immutable form as template.

    A ``bytearray`` template yields a new ``bytearray``; anything else
    yields ``bytes``.
    """
    if isinstance(template, bytearray):
        return bytearray(data)
    return data
