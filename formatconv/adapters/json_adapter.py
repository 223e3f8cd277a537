"""
JSON converter.

Parses a payload as JSON text (RFC 8259). Python's json module also accepts
the JavaScript constants NaN, Infinity and -Infinity; those are rejected here
so only standard JSON gets through.
"""

import json
import logging
from typing import NoReturn

from formatconv.errors import ConversionError
from formatconv.types import Format, StructuredValue

from .base import BaseConverter
from .registry import register_converter

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Unexpected token {name} in JSON")


def parse_json(payload: str) -> StructuredValue:
    """
    Parse standard JSON text.

    Raises:
        ValueError: If the payload is not valid JSON
        TypeError: If the payload is not text
    """
    return json.loads(payload, parse_constant=_reject_constant)


class JSONConverter(BaseConverter):
    """Converter producing the parsed JSON value."""

    format_type = Format.JSON

    def parse(self, payload: str) -> StructuredValue:
        """
        Parse the payload, wrapping failures in ConversionError.

        Raises:
            ConversionError: If the payload is not valid JSON or nests too deeply
        """
        try:
            return parse_json(payload)
        except (ValueError, TypeError, RecursionError) as e:
            logger.debug(f"JSON parse failed: {e}")
            raise ConversionError(Format.JSON, str(e)) from e

    async def convert(self, payload: str) -> StructuredValue:
        return self.parse(payload)


def convert_to_json(payload: str) -> StructuredValue:
    """
    Convert a payload to its parsed JSON value.

    Args:
        payload: JSON text

    Returns:
        The parsed value (dict, list, str, int, float, bool or None)

    Raises:
        ConversionError: If the payload is not valid JSON
    """
    return JSONConverter().parse(payload)


# Register the converter
register_converter(Format.JSON, JSONConverter)
