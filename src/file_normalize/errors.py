"""Error definitions for file_normalize."""

from typing import Any, Dict


class FileNormalizeError(Exception):
    """Base exception for all file_normalize errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class NormalizeTypeError(FileNormalizeError, TypeError):
    """Argument has the wrong shape for the operation."""

    def __init__(self, operation: str, expected: str, value: Any) -> None:
        actual = type(value).__name__
        super().__init__(
            f"{operation}: expected {expected}, got {actual}",
            operation=operation,
            expected=expected,
            actual=actual,
        )


class ConfigurationError(FileNormalizeError):
    """Configuration is invalid or cannot be read."""
    pass
