"""
Registry for format converters.

This module provides functionality to register and retrieve format-specific converters.
"""

from typing import Dict, List, Optional, Type, TypeVar, Union, cast

from formatconv.config import ConverterConfig
from formatconv.errors import UnsupportedFormatError
from formatconv.types import Format

from .base import BaseConverter

T = TypeVar("T", bound=BaseConverter)

# Registry of format converters
_CONVERTER_REGISTRY: Dict[Format, Type[BaseConverter]] = {}


def _normalize(format_type: Union[Format, str]) -> Format:
    try:
        return Format(str(format_type).upper())
    except ValueError:
        raise UnsupportedFormatError(format_type) from None


def clear_registry() -> None:
    """
    Clear all registered converters from the registry.

    This is primarily useful for testing purposes.
    """
    _CONVERTER_REGISTRY.clear()


def register_converter(format_type: Union[Format, str], converter_class: Type[T]) -> None:
    """
    Register a converter for a specific format.

    Args:
        format_type: Format tag (``Format`` member or its string value)
        converter_class: Converter class to register

    Raises:
        UnsupportedFormatError: If format_type is not a known format
        ValueError: If converter_class is None
    """
    if converter_class is None:
        raise ValueError("Converter class cannot be None")

    _CONVERTER_REGISTRY[_normalize(format_type)] = converter_class


def get_converter_class(format_type: Union[Format, str]) -> Type[BaseConverter]:
    """
    Get the converter class for a specific format.

    Raises:
        UnsupportedFormatError: If no converter is registered for the format
    """
    key = _normalize(format_type)
    if key not in _CONVERTER_REGISTRY:
        raise UnsupportedFormatError(format_type)

    return cast(Type[BaseConverter], _CONVERTER_REGISTRY[key])


def get_converter_for_format(
    format_type: Union[Format, str],
    config: Optional[ConverterConfig] = None,
) -> BaseConverter:
    """
    Get an instance of the converter for a specific format.

    Args:
        format_type: Format tag
        config: Optional configuration handed to the converter

    Returns:
        Converter instance for the specified format
    """
    converter_class = get_converter_class(format_type)
    return converter_class(config)


def get_supported_formats() -> List[Format]:
    """
    Get a list of all formats with a registered converter.
    """
    return list(_CONVERTER_REGISTRY.keys())
