"""
Format detection and conversion for text payloads.

This package decides whether an opaque text payload is JSON, CSV or XML and
converts it with a format-specific converter.
"""

from .core import (
    convert_to_csv,
    convert_to_json,
    convert_to_xml,
    detect_format,
    format_conversion,
)
from .types import Format

__all__ = [
    "Format",
    "format_conversion",
    "detect_format",
    "convert_to_json",
    "convert_to_csv",
    "convert_to_xml",
]
