"""
Type definitions for format detection and conversion.
"""

from .common import Format, MimeDetector, StructuredValue

__all__ = ["Format", "MimeDetector", "StructuredValue"]
