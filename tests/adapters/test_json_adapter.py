"""
Tests for the JSON converter.
"""

import pytest

from formatconv.adapters.json_adapter import JSONConverter, convert_to_json, parse_json
from formatconv.errors import ConversionError
from formatconv.types import Format


class TestConvertToJSON:
    """Tests for convert_to_json."""

    def test_valid_json(self, json_payload):
        assert convert_to_json(json_payload) == {"foo": "bar"}

    def test_invalid_json(self):
        with pytest.raises(ConversionError, match="Cannot convert to JSON"):
            convert_to_json('{foo: "bar"}')

    def test_error_wraps_parser_message(self):
        with pytest.raises(ConversionError) as exc_info:
            convert_to_json('{foo: "bar"}')
        assert exc_info.value.format_type == "JSON"
        assert "Expecting property name" in exc_info.value.reason
        assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.parametrize("payload, expected", [
        ("[1, 2, 3]", [1, 2, 3]),
        ('"text"', "text"),
        ("42", 42),
        ("2.5", 2.5),
        ("true", True),
        ("null", None),
        ('  {"a": {"b": [null]}}  ', {"a": {"b": [None]}}),
    ])
    def test_any_json_value(self, payload, expected):
        assert convert_to_json(payload) == expected

    @pytest.mark.parametrize("payload", ["NaN", "[Infinity]", '{"a": -Infinity}'])
    def test_rejects_non_standard_constants(self, payload):
        with pytest.raises(ConversionError, match="Cannot convert to JSON: Unexpected token"):
            convert_to_json(payload)

    def test_deeply_nested_input(self):
        with pytest.raises(ConversionError, match="Cannot convert to JSON") as exc_info:
            convert_to_json("[" * 100000 + "]" * 100000)
        assert isinstance(exc_info.value.__cause__, RecursionError)

    def test_empty_payload(self):
        with pytest.raises(ConversionError, match="Cannot convert to JSON"):
            convert_to_json("")

    def test_parse_json_raises_value_error(self):
        with pytest.raises(ValueError):
            parse_json("{")


@pytest.mark.asyncio
async def test_converter_convert(json_payload):
    converter = JSONConverter()
    assert converter.format_type == Format.JSON
    assert await converter.convert(json_payload) == {"foo": "bar"}


@pytest.mark.asyncio
async def test_converter_convert_failure():
    with pytest.raises(ConversionError, match="Cannot convert to JSON"):
        await JSONConverter().convert("{")
