"""
Configuration for format detection and conversion.
"""

from .converter_config import (
    ConverterConfig,
    CSVSettings,
    DetectionSettings,
    XMLSettings,
    get_config,
    load_config,
)

__all__ = [
    "ConverterConfig",
    "CSVSettings",
    "DetectionSettings",
    "XMLSettings",
    "get_config",
    "load_config",
]
