"""
Core functionality for format conversion.

This module provides the primary entry point: detect which of JSON, CSV or
XML a payload represents, then hand it to the converter registered for that
format.

Usage Examples:
--------------
```python
import asyncio
from formatconv.core import format_conversion, detect_format

detect_format('{"foo": "bar"}')                          # Format.JSON
asyncio.run(format_conversion('{"foo": "bar"}'))         # {'foo': 'bar'}
asyncio.run(format_conversion('<root><a>1</a></root>'))  # normalized XML text
```
"""

import logging
from typing import Any, Optional

from formatconv.adapters import (
    convert_to_csv,
    convert_to_json,
    convert_to_xml,
    get_converter_for_format,
)
from formatconv.errors import ConversionError
from formatconv.utils.format_detector import FormatDetector, detect_format, get_default_detector

logger = logging.getLogger(__name__)


async def format_conversion(payload: str, detector: Optional[FormatDetector] = None) -> Any:
    """
    Detect the format of a payload and convert it with the matching converter.

    Detection errors are raised before any conversion starts. The payload is
    handed to the converter unchanged, so a payload detected as CSV must still
    be the JSON array the CSV converter expects.

    Args:
        payload: Text payload to convert
        detector: Detector to use instead of the process-wide default; its
            configuration is also handed to the converter

    Returns:
        The parsed value for JSON, CSV text for CSV, normalized XML text for XML

    Raises:
        DetectionError: If no format can be determined
        UnsupportedFormatError: If no converter is registered for the detected format
        ConversionError: If the converter fails
    """
    detector = detector or get_default_detector()
    format_type = detector.detect(payload)
    converter = get_converter_for_format(format_type, detector.config)

    logger.info(f"Converting payload as {format_type} with {converter.__class__.__name__}")

    try:
        return await converter.convert(payload)
    except ConversionError as e:
        logger.warning(f"Conversion to {format_type} failed: {e.reason}")
        raise


__all__ = [
    "format_conversion",
    "detect_format",
    "convert_to_json",
    "convert_to_csv",
    "convert_to_xml",
]
