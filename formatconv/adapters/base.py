"""
Base converter interface.

This module defines the abstract base class that all format-specific
converters implement. A converter takes an opaque text payload and produces
the format's output: a parsed value for JSON, CSV text for CSV, normalized
XML text for XML.

Example:
    # Creating a format-specific converter
    class YAMLConverter(BaseConverter):
        format_type = "YAML"

        async def convert(self, payload):
            return yaml.safe_load(payload)

    # Registering the converter
    from formatconv.adapters.registry import register_converter
    register_converter("YAML", YAMLConverter)
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from formatconv.config import ConverterConfig, get_config
from formatconv.types import Format


class BaseConverter(ABC):
    """
    Base interface for all format converters.

    Converters are stateless apart from their configuration, so a single
    instance can serve any number of calls.
    """

    format_type: Format

    def __init__(self, config: Optional[ConverterConfig] = None):
        """
        Initialize the converter.

        Args:
            config: Converter configuration; defaults to ``get_config()``
        """
        self.config = config or get_config()

    @abstractmethod
    async def convert(self, payload: str) -> Any:
        """
        Convert a payload.

        Args:
            payload: Text payload to convert

        Returns:
            The converted value

        Raises:
            ConversionError: If the underlying parser or stringifier fails
        """
        pass
