"""
CSV converter.

Turns a JSON array of flat objects into CSV text: a header row taken from
the first object's keys, then one row per object.
"""

import asyncio
import csv
import io
import json
import logging
from typing import Any, Dict, List, Optional

from formatconv.config import ConverterConfig
from formatconv.errors import ConversionError
from formatconv.types import Format

from .base import BaseConverter
from .json_adapter import parse_json
from .registry import register_converter

logger = logging.getLogger(__name__)

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    type(None): "null",
}


def _json_type(value: Any) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


class CSVConverter(BaseConverter):
    """Converter from a JSON array of records to CSV text."""

    format_type = Format.CSV

    def __init__(self, config: Optional[ConverterConfig] = None):
        super().__init__(config)
        self.settings = self.config.csv

    def load_records(self, payload: str) -> Any:
        """
        Parse the payload as JSON.

        Raises:
            ConversionError: If the payload is not valid JSON or nests too deeply
        """
        try:
            return parse_json(payload)
        except (ValueError, TypeError, RecursionError) as e:
            logger.debug(f"CSV input is not valid JSON: {e}")
            raise ConversionError(Format.CSV, str(e)) from e

    def render_value(self, value: Any) -> str:
        """
        Render a single JSON value as a CSV field.

        Integral numbers drop the fractional part, booleans use the configured
        markers, null is empty and nested arrays/objects become compact JSON.
        """
        if value is None:
            return ""
        if isinstance(value, bool):
            return self.settings.boolean_true if value else self.settings.boolean_false
        if isinstance(value, float):
            return str(int(value)) if value.is_integer() else repr(value)
        if isinstance(value, (dict, list)):
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        return str(value)

    def stringify(self, records: Any) -> str:
        """
        Write records as CSV text.

        Args:
            records: Parsed JSON; must be a list of objects

        Returns:
            CSV text with a header row, every row terminated by the line terminator

        Raises:
            ValueError: If records is not a list of objects with at least one key
        """
        if not isinstance(records, list):
            raise ValueError(f"Invalid data: expected an array of records, got {_json_type(records)}")
        if not records:
            return ""

        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise ValueError(
                    f"Invalid record at index {index}: header requires object records, "
                    f"got {_json_type(record)}"
                )

        first: Dict[str, Any] = records[0]
        columns: List[str] = list(first.keys())
        if not columns:
            raise ValueError("Undiscoverable columns: first record has no keys")

        # QUOTE_MINIMAL only quotes characters found in the writer's line
        # terminator, so both \r and \n are added there and swapped for the
        # configured terminator after each row
        row_end = self.settings.line_terminator + "\r\n"
        buffer = io.StringIO(newline="")
        writer = csv.writer(
            buffer,
            delimiter=self.settings.delimiter,
            quotechar=self.settings.quote_char,
            lineterminator=row_end,
            quoting=csv.QUOTE_MINIMAL,
        )

        def write_row(row: List[str]) -> str:
            buffer.seek(0)
            buffer.truncate()
            writer.writerow(row)
            return buffer.getvalue()[: -len(row_end)] + self.settings.line_terminator

        lines = [write_row(columns)]
        for record in records:
            lines.append(write_row([self.render_value(record.get(column)) for column in columns]))

        logger.debug(f"Stringified {len(records)} records into {len(columns)} columns")
        return "".join(lines)

    async def convert(self, payload: str) -> str:
        records = self.load_records(payload)

        # Stringify off the event loop; the future resolves exactly once
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, self.stringify, records)
        except (ValueError, csv.Error, RecursionError) as e:
            logger.debug(f"CSV stringification failed: {e}")
            raise ConversionError(Format.CSV, str(e)) from e


async def convert_to_csv(payload: str) -> str:
    """
    Convert a JSON array of objects to CSV text.

    Args:
        payload: JSON text such as ``[{"name": "John", "age": 30}]``

    Returns:
        CSV text, e.g. ``"name,age\\nJohn,30\\n"``

    Raises:
        ConversionError: If the payload is not valid JSON or cannot be stringified
    """
    return await CSVConverter().convert(payload)


# Register the converter
register_converter(Format.CSV, CSVConverter)
