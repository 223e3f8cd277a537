"""
XML converter.

Parses a payload with the standard non-validating ElementTree parser and
rebuilds it as canonical text: the configured XML declaration, a newline,
then the tree indented per depth level with no trailing newline.

The round trip normalizes rather than preserves. Comments, processing
instructions, the DOCTYPE and whitespace-only text between elements are
dropped, and namespace prefixes are regenerated by ElementTree.
"""

import asyncio
import logging
import xml.etree.ElementTree as ET
from typing import Optional

from formatconv.config import ConverterConfig
from formatconv.errors import ConversionError
from formatconv.types import Format

from .base import BaseConverter
from .registry import register_converter

logger = logging.getLogger(__name__)


def _strip_whitespace(root: ET.Element) -> None:
    """Drop whitespace-only text and tails so indentation can be rebuilt."""
    for element in root.iter():
        if element.text is not None and not element.text.strip():
            element.text = None
        if element.tail is not None and not element.tail.strip():
            element.tail = None


class XMLConverter(BaseConverter):
    """Converter that parses XML and rebuilds it in canonical layout."""

    format_type = Format.XML

    def __init__(self, config: Optional[ConverterConfig] = None):
        super().__init__(config)
        self.settings = self.config.xml

    def parse(self, payload: str) -> ET.Element:
        """
        Parse XML text into an element tree.

        Raises:
            xml.etree.ElementTree.ParseError: If the payload is not well-formed
        """
        root = ET.fromstring(payload)
        _strip_whitespace(root)
        return root

    def build(self, root: ET.Element) -> str:
        """
        Serialize an element tree with the configured declaration and indentation.
        """
        ET.indent(root, space=self.settings.indent)
        body = ET.tostring(root, encoding="unicode")
        if self.settings.headless:
            return body
        return f"{self.settings.declaration}\n{body}"

    async def convert(self, payload: str) -> str:
        # Parse off the event loop; the future resolves exactly once
        loop = asyncio.get_running_loop()
        try:
            root = await loop.run_in_executor(None, self.parse, payload)
            return self.build(root)
        except (ET.ParseError, ValueError, RecursionError) as e:
            # ValueError covers text expat cannot encode, such as lone surrogates
            logger.debug(f"XML conversion failed: {e}")
            raise ConversionError(Format.XML, str(e)) from e


async def convert_to_xml(payload: str) -> str:
    """
    Parse XML and rebuild it in canonical layout.

    Args:
        payload: XML text such as ``<root><foo>bar</foo></root>``

    Returns:
        Normalized XML text, e.g.::

            <?xml version="1.0" encoding="UTF-8" standalone="yes"?>
            <root>
              <foo>bar</foo>
            </root>

    Raises:
        ConversionError: If the payload is not well-formed XML, cannot be
            encoded, or nests too deeply to rebuild
    """
    return await XMLConverter().convert(payload)


# Register the converter
register_converter(Format.XML, XMLConverter)
