"""
Tests for the format conversion dispatcher.
"""

import logging

import pytest

import formatconv
from formatconv.adapters.registry import _CONVERTER_REGISTRY, clear_registry, register_converter
from formatconv.config import ConverterConfig, CSVSettings
from formatconv.core import format_conversion
from formatconv.errors import (
    CannotInferFormatError,
    ConversionError,
    EmptyPayloadError,
    UnsupportedExtensionError,
    UnsupportedFormatError,
)
from formatconv.types import Format
from formatconv.utils.format_detector import FormatDetector


@pytest.fixture
def saved_registry():
    saved = dict(_CONVERTER_REGISTRY)
    yield
    clear_registry()
    _CONVERTER_REGISTRY.update(saved)


def test_public_api():
    for name in ["format_conversion", "detect_format", "convert_to_json", "convert_to_csv", "convert_to_xml"]:
        assert callable(getattr(formatconv, name))
    assert formatconv.detect_format('{"foo": "bar"}') is formatconv.Format.JSON


@pytest.mark.asyncio
class TestFormatConversion:
    """Tests for format_conversion."""

    async def test_json(self, json_payload):
        assert await format_conversion(json_payload) == {"foo": "bar"}

    async def test_xml(self, xml_payload):
        result = await format_conversion(xml_payload)
        assert result == '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n<root>\n  <foo>bar</foo>\n</root>'

    async def test_csv_detected_payload_goes_to_csv_converter(self, csv_payload):
        # The CSV converter expects a JSON array, so plain CSV text fails conversion
        with pytest.raises(ConversionError, match="Cannot convert to CSV"):
            await format_conversion(csv_payload)

    async def test_csv_from_records(self, records_payload):
        assert await format_conversion(records_payload) == "name,age\nJohn,30\nJane,25\n"

    async def test_invalid_json(self):
        with pytest.raises(ConversionError, match="Cannot convert to JSON"):
            await format_conversion('{foo: "bar"}')

    async def test_invalid_xml(self):
        with pytest.raises(ConversionError, match="Cannot convert to XML"):
            await format_conversion("<root><foo>bar</bar></root>")

    async def test_detection_errors(self):
        with pytest.raises(EmptyPayloadError):
            await format_conversion("  ")
        with pytest.raises(CannotInferFormatError, match="Cannot infer"):
            await format_conversion("foo: bar")
        with pytest.raises(UnsupportedExtensionError):
            await format_conversion("readme.md")

    async def test_injected_detector_and_config(self, records_payload):
        config = ConverterConfig(csv=CSVSettings(delimiter="\t"))
        detector = FormatDetector(mime_detector=lambda data: "text/csv", config=config)
        assert await format_conversion(records_payload, detector=detector) == "name\tage\nJohn\t30\nJane\t25\n"

    async def test_unregistered_format(self, saved_registry, xml_payload):
        clear_registry()
        with pytest.raises(UnsupportedFormatError, match="Unsupported format: XML"):
            await format_conversion(xml_payload)

    async def test_custom_converter(self, saved_registry, json_payload):
        class UpperJSONConverter(formatconv.adapters.JSONConverter):
            async def convert(self, payload):
                return payload.upper()

        register_converter(Format.JSON, UpperJSONConverter)
        assert await format_conversion(json_payload) == '{"FOO": "BAR"}'

    async def test_logs_failures(self, caplog):
        with caplog.at_level(logging.WARNING, logger="formatconv.core"):
            with pytest.raises(ConversionError):
                await format_conversion('{"a": }')
        assert "Conversion to JSON failed" in caplog.text

    async def test_logs_dispatch(self, caplog, json_payload):
        with caplog.at_level(logging.INFO, logger="formatconv.core"):
            await format_conversion(json_payload)
        assert "Converting payload as JSON with JSONConverter" in caplog.text
