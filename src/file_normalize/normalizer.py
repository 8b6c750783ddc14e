"""Line-ending, byte-order-mark and append normalization."""

import re
from typing import Optional

from .coerce import (
    DEFAULT_ENCODING,
    ByteSequence,
    TextOrBytes,
    as_bytes,
    as_text,
    check_encoding,
    ensure_text,
    ensure_text_or_bytes,
    is_bytes,
    like,
)
from .eol import CRLF, CRLF_BYTES, LF, LF_BYTES, platform_eol
from .config import NormalizeConfig, NormalizerConfig
from .errors import ConfigurationError, NormalizeTypeError
from .logging import get_logger
from .path_utils import normalize_slash

logger = get_logger(__name__)

# \r\n first so it is replaced as one unit
EOL_PATTERN = re.compile(r"\r\n?|\n")

BOM = "\ufeff"
BOM_BYTES = b"\xef\xbb\xbf"


class Normalizer:
    """Normalization operations bound to an explicit default line ending.

    The default EOL is used wherever an operation needs the platform line
    ending: as the target of :meth:`normalize_eol` when no marker is given,
    and as the separator :meth:`append` inserts when the prefix has no
    trailing line ending. It is resolved once, at construction.
    """

    def __init__(
        self,
        eol: Optional[str] = None,
        trailing_slash: bool = True,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        if eol is not None:
            ensure_text(eol, "Normalizer")
        self.eol = eol or platform_eol()
        self.trailing_slash = trailing_slash
        try:
            self.encoding = check_encoding(encoding)
        except ValueError as e:
            raise ConfigurationError(str(e), encoding=encoding) from e
        logger.debug(
            f"Normalizer created: eol={self.eol!r}, trailing_slash={trailing_slash}, "
            f"encoding={encoding}"
        )

    @classmethod
    def from_config(cls, config: NormalizerConfig | NormalizeConfig) -> "Normalizer":
        """Build a Normalizer from a NormalizerConfig or NormalizeConfig."""
        settings = getattr(config, "normalizer", config)
        return cls(
            eol=settings.resolve_eol(),
            trailing_slash=settings.trailing_slash,
            encoding=settings.encoding,
        )

    def __repr__(self) -> str:
        return (
            f"Normalizer(eol={self.eol!r}, trailing_slash={self.trailing_slash!r}, "
            f"encoding={self.encoding!r})"
        )

    def normalize_slash(self, path: str, trailing_slash: Optional[bool] = None) -> str:
        """Normalize path separators; see :func:`file_normalize.normalize_slash`."""
        if trailing_slash is None:
            trailing_slash = self.trailing_slash
        return normalize_slash(path, trailing_slash)

    def normalize_eol(self, text: str, eol: Optional[str] = None) -> str:
        """
        Replace every line ending in text with a single marker.

        ``\\r\\n``, a lone ``\\r`` and a lone ``\\n`` are each one line
        ending. The marker is ``eol`` when given and non-empty, otherwise
        the default EOL of this normalizer.

        Raises:
            NormalizeTypeError: If text is not a string
        """
        ensure_text(text, "normalize_eol")
        if eol is not None:
            ensure_text(eol, "normalize_eol")
        return EOL_PATTERN.sub(lambda _: eol or self.eol, text)

    def normalize_nl(self, text: str) -> str:
        """Normalize all line endings to unix newlines."""
        ensure_text(text, "normalize_nl")
        return self.normalize_eol(text, LF)

    def strip_bom(self, value: TextOrBytes) -> TextOrBytes:
        """
        Strip a leading byte-order mark.

        Byte sequences lose a leading UTF-8 BOM (``EF BB BF``); text loses a
        leading ``U+FEFF``. Values without a BOM pass through unchanged.

        Raises:
            NormalizeTypeError: If value is neither text nor a byte sequence
        """
        ensure_text_or_bytes(value, "strip_bom")

        if is_bytes(value):
            data = bytes(value)
            if data.startswith(BOM_BYTES):
                data = data[len(BOM_BYTES):]
            return like(value, data)

        if value.startswith(BOM):
            return value[len(BOM):]
        return value

    def append_string(self, prefix: str, suffix: Optional[TextOrBytes] = None) -> str:
        """
        Append suffix to a string, preserving its trailing line ending.

        If prefix ends with ``\\r\\n`` or ``\\n``, suffix goes in front of
        that ending. Otherwise the default EOL is placed between prefix
        and suffix. A byte-sequence suffix is decoded first. An empty
        suffix returns prefix unchanged.

        Examples:
            >>> Normalizer(eol="\\n").append_string("abc\\r\\n", "def")
            'abc\\r\\ndef\\r\\n'
            >>> Normalizer(eol="\\n").append_string("abc", "def")
            'abc\\ndef'
        """
        ensure_text(prefix, "append_string")
        if suffix is None:
            return prefix
        ensure_text_or_bytes(suffix, "append_string")

        text = as_text(suffix, self.encoding)
        if not text:
            return prefix

        if prefix.endswith(CRLF):
            eol = CRLF
        elif prefix.endswith(LF):
            eol = LF
        else:
            return "".join([prefix, self.eol, text])
        return "".join([prefix, text, eol])

    def append_buffer(
        self, prefix: ByteSequence, suffix: Optional[TextOrBytes] = None
    ) -> ByteSequence:
        """
        Append suffix to a byte sequence, preserving its trailing line ending.

        Same rules as :meth:`append_string`, applied to bytes. A text suffix
        is encoded first. The result is always a new object, so a
        ``bytearray`` prefix is never modified.
        """
        if not is_bytes(prefix):
            raise NormalizeTypeError("append_buffer", "a buffer", prefix)
        data = bytes(prefix)
        if suffix is None:
            return like(prefix, data)
        ensure_text_or_bytes(suffix, "append_buffer")

        tail = as_bytes(suffix, self.encoding)
        if not tail:
            return like(prefix, data)

        if data[-2:] == CRLF_BYTES:
            eol = CRLF_BYTES
        elif data[-1:] == LF_BYTES:
            eol = LF_BYTES
        else:
            return like(prefix, b"".join([data, self.eol.encode(self.encoding), tail]))
        return like(prefix, b"".join([data, tail, eol]))

    def append(
        self, prefix: TextOrBytes, suffix: Optional[TextOrBytes] = None
    ) -> TextOrBytes:
        """
        Append suffix to prefix, preserving the trailing line ending.

        Dispatches on the shape of prefix: a byte-sequence prefix gives a
        byte-sequence result, a text prefix gives text.

        Raises:
            NormalizeTypeError: If prefix or suffix is neither text nor a
                byte sequence
        """
        ensure_text_or_bytes(prefix, "append")
        if is_bytes(prefix):
            return self.append_buffer(prefix, suffix)
        return self.append_string(prefix, suffix)


# Shared instance behind the module-level functions, bound to os.linesep
default_normalizer = Normalizer()


def normalize_eol(text: str, eol: Optional[str] = None) -> str:
    """Normalize line endings to eol, or to the platform default."""
    return default_normalizer.normalize_eol(text, eol)


def normalize_nl(text: str) -> str:
    """Normalize line endings to unix newlines."""
    return default_normalizer.normalize_nl(text)


def strip_bom(value: TextOrBytes) -> TextOrBytes:
    """Strip a leading byte-order mark from text or a byte sequence."""
    return default_normalizer.strip_bom(value)


def append_string(prefix: str, suffix: Optional[TextOrBytes] = None) -> str:
    """Append suffix to a string, preserving its trailing line ending."""
    return default_normalizer.append_string(prefix, suffix)


def append_buffer(prefix: ByteSequence, suffix: Optional[TextOrBytes] = None) -> ByteSequence:
    """Append suffix to a byte sequence, preserving its trailing line ending."""
    return default_normalizer.append_buffer(prefix, suffix)


def append(prefix: TextOrBytes, suffix: Optional[TextOrBytes] = None) -> TextOrBytes:
    """Append suffix to prefix, preserving prefix's trailing line ending."""
    return default_normalizer.append(prefix, suffix)
