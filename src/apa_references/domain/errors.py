"""Domain errors — custom exceptions for the APA reference engine.

These exceptions are raised by domain services and caught by application
or presentation layers. They carry no infrastructure dependencies.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of formatting errors raised by the engine."""

    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    UNSUPPORTED_TYPE = "UnsupportedType"


class APAFormatterError(Exception):
    """Base exception for all APA reference engine errors."""


class APAFormattingError(APAFormatterError):
    """Raised when a reference cannot be formatted.

    Carries the error ``kind``, the offending ``field`` and a
    human-readable ``message``.
    """

    kind: ErrorKind

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, field={self.field!r})"


class MissingRequiredFieldError(APAFormattingError):
    """Raised in strict mode when a required field is absent."""

    kind = ErrorKind.MISSING_REQUIRED_FIELD


class UnsupportedReferenceTypeError(APAFormattingError):
    """Raised when the kind tag does not match any known variant."""

    kind = ErrorKind.UNSUPPORTED_TYPE


class ConfigurationError(APAFormatterError):
    """Raised when configuration is invalid or missing."""
