"""Path utilities for consistent path handling."""

from .coerce import ensure_text


def normalize_slash(path: str, trailing_slash: bool = True) -> str:
    """
    Normalize slashes in a filepath to forward slashes.

    This is a literal replacement of ``\\`` with ``/``. It does not look at
    drive letters, UNC prefixes or URL schemes, and does not collapse
    repeated separators.

    Args:
        path: Path string to normalize
        trailing_slash: When True (default), strip a single trailing slash
            after substitution. When False, keep it.

    Returns:
        Path string with forward slashes

    Raises:
        NormalizeTypeError: If path is not a string

    Examples:
        >>> normalize_slash("foo\\\\bar\\\\")
        'foo/bar'
        >>> normalize_slash("foo\\\\bar\\\\", False)
        'foo/bar/'
    """
    ensure_text(path, "normalize_slash")

    normalized = path.replace("\\", "/")

    # A bare root keeps its slash
    if trailing_slash is not False and len(normalized) > 1 and normalized.endswith("/"):
        normalized = normalized[:-1]

    return normalized
