"""
Format converters.

This module provides converters for JSON, CSV and XML along with the
registry the dispatcher uses to find them.
"""

from .registry import (
    clear_registry,
    get_converter_class,
    get_converter_for_format,
    get_supported_formats,
    register_converter,
)
from .base import BaseConverter

# Import all converters to ensure they are registered
from .json_adapter import JSONConverter, convert_to_json
from .csv_adapter import CSVConverter, convert_to_csv
from .xml_adapter import XMLConverter, convert_to_xml

__all__ = [
    "BaseConverter",
    "register_converter",
    "get_converter_class",
    "get_converter_for_format",
    "get_supported_formats",
    "clear_registry",
    "JSONConverter",
    "CSVConverter",
    "XMLConverter",
    "convert_to_json",
    "convert_to_csv",
    "convert_to_xml",
]
