"""Normalize path slashes, line endings and byte-order marks."""

from .errors import FileNormalizeError, NormalizeTypeError, ConfigurationError
from .eol import CR, CRLF, LF, CRLF_BYTES, LF_BYTES, platform_eol
from .coerce import as_bytes, as_text
from .path_utils import normalize_slash
from .normalizer import (
    Normalizer,
    append,
    append_buffer,
    append_string,
    normalize_eol,
    normalize_nl,
    strip_bom,
)
from .config import (
    LoggingConfig,
    NormalizerConfig,
    NormalizeConfig,
    config_from_mapping,
    config_from_toml,
)
from .logging import setup_logging, setup_logging_from_config, get_logger

# Byte markers under their short names
cr = CRLF_BYTES
nl = LF_BYTES

__version__ = "0.1.0"

__all__ = [
    'FileNormalizeError',
    'NormalizeTypeError',
    'ConfigurationError',
    'CR',
    'CRLF',
    'LF',
    'CRLF_BYTES',
    'LF_BYTES',
    'cr',
    'nl',
    'platform_eol',
    'as_bytes',
    'as_text',
    'normalize_slash',
    'Normalizer',
    'append',
    'append_buffer',
    'append_string',
    'normalize_eol',
    'normalize_nl',
    'strip_bom',
    'LoggingConfig',
    'NormalizerConfig',
    'NormalizeConfig',
    'config_from_mapping',
    'config_from_toml',
    'setup_logging',
    'setup_logging_from_config',
    'get_logger',
]
