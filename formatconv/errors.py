"""
Exception hierarchy for format detection and conversion.

All exceptions inherit from FormatConversionError so callers can catch
broadly or narrowly as needed. Each exception carries structured context
in ``details`` for logging/debugging.
"""

from __future__ import annotations

from typing import Any


class FormatConversionError(Exception):
    """Base exception for all detection and conversion errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


class DetectionError(FormatConversionError):
    """No format could be determined for a payload."""
    pass


class InvalidPayloadError(DetectionError, TypeError):
    """The payload handed to the detector is not a string."""

    def __init__(self, payload: Any) -> None:
        super().__init__(
            "Data must be a string",
            details={"payload_type": type(payload).__name__},
        )


class UnsupportedExtensionError(DetectionError):
    """A trailing extension was found but it names no known format."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(
            f"Unsupported file extension: {extension}",
            details={"extension": extension},
        )


class UnsupportedMimeTypeError(DetectionError):
    """The MIME hook resolved a type with no format mapping."""

    def __init__(self, mime_type: str) -> None:
        self.mime_type = mime_type
        super().__init__(
            f"Unsupported MIME type: {mime_type}",
            details={"mime_type": mime_type},
        )


class EmptyPayloadError(DetectionError):
    """The payload is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Data cannot be empty")


class CannotInferFormatError(DetectionError):
    """Content sniffing exhausted every structural cue."""

    def __init__(self) -> None:
        super().__init__("Cannot infer format")


class ConversionError(FormatConversionError):
    """The underlying parser or stringifier failed."""

    def __init__(self, format_type: Any, reason: str) -> None:
        self.format_type = str(format_type)
        self.reason = reason
        super().__init__(
            f"Cannot convert to {self.format_type}: {reason}",
            details={"format": self.format_type},
        )


class UnsupportedFormatError(FormatConversionError):
    """No converter is registered for the requested format tag."""

    def __init__(self, format_type: Any) -> None:
        self.format_type = format_type
        super().__init__(
            f"Unsupported format: {format_type}",
            details={"format": str(format_type)},
        )
