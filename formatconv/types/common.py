"""
Common type definitions for formatconv.

This module provides the format tag and the type aliases shared by the
detector, the converters and the configuration layer.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union


class Format(str, Enum):
    """Serialization formats recognized by the detector."""

    JSON = "JSON"
    CSV = "CSV"
    XML = "XML"

    def __str__(self) -> str:
        return self.value


# Signature of a pluggable MIME sniffing hook: payload in, MIME type (or None) out
MimeDetector = Callable[[str], Optional[str]]

# Anything a JSON parse can produce
StructuredValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]
