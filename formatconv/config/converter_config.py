"""
Converter configuration module.

This module provides the configuration model for format detection and the
format converters. It loads the YAML configuration file and validates it
using Pydantic. Defaults reproduce the stock detection tables and output
layout, so a missing file changes nothing.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from formatconv.types import Format

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent / "converter_config.yaml"
CONFIG_ENV_VAR = "FORMATCONV_CONFIG"

DEFAULT_EXTENSIONS: Dict[str, Format] = {
    "JSON": Format.JSON,
    "CSV": Format.CSV,
    "XML": Format.XML,
}

DEFAULT_MIME_TYPES: Dict[str, Format] = {
    "application/json": Format.JSON,
    "text/csv": Format.CSV,
    "application/xml": Format.XML,
}


class DetectionSettings(BaseModel):
    """Lookup tables used by the extension and MIME sniff strategies."""

    extensions: Dict[str, Format] = Field(default_factory=lambda: dict(DEFAULT_EXTENSIONS))
    mime_types: Dict[str, Format] = Field(default_factory=lambda: dict(DEFAULT_MIME_TYPES))

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: Dict[str, Format]) -> Dict[str, Format]:
        """Extensions are matched upper-cased and without the leading dot."""
        return {key.lstrip(".").upper(): fmt for key, fmt in v.items()}

    @field_validator("mime_types")
    @classmethod
    def normalize_mime_types(cls, v: Dict[str, Format]) -> Dict[str, Format]:
        """MIME types are case-insensitive."""
        return {key.strip().lower(): fmt for key, fmt in v.items()}


class CSVSettings(BaseModel):
    """Output layout for the CSV stringifier."""

    delimiter: str = ","
    quote_char: str = '"'
    line_terminator: str = "\n"
    boolean_true: str = "1"
    boolean_false: str = ""

    @field_validator("delimiter", "quote_char")
    @classmethod
    def validate_single_char(cls, v: str) -> str:
        """The csv module only accepts one-character delimiters and quotes."""
        if len(v) != 1:
            raise ValueError(f"Expected a single character, got {v!r}")
        return v

    model_config = ConfigDict(extra="forbid")


class XMLSettings(BaseModel):
    """Declaration and indentation used when rebuilding XML."""

    indent: str = "  "
    version: str = "1.0"
    encoding: str = "UTF-8"
    standalone: Optional[bool] = True
    headless: bool = False

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: str) -> str:
        """Indentation must be whitespace so the rebuilt tree stays equivalent."""
        if v.strip():
            raise ValueError(f"Indent must be whitespace, got {v!r}")
        return v

    @property
    def declaration(self) -> str:
        """XML declaration line emitted ahead of the root element."""
        parts = [f'version="{self.version}"', f'encoding="{self.encoding}"']
        if self.standalone is not None:
            parts.append(f'standalone="{"yes" if self.standalone else "no"}"')
        return f"<?xml {' '.join(parts)}?>"

    model_config = ConfigDict(extra="forbid")


class ConverterConfig(BaseModel):
    """Configuration for detection and every converter."""

    version: int = 1
    detection: DetectionSettings = Field(default_factory=DetectionSettings)
    csv: CSVSettings = Field(default_factory=CSVSettings)
    xml: XMLSettings = Field(default_factory=XMLSettings)


def load_config(config_path: Optional[Union[str, Path]] = None) -> ConverterConfig:
    """
    Load and validate the converter configuration.

    Args:
        config_path: Path to the configuration file. If None, uses the
            ``FORMATCONV_CONFIG`` environment variable, then the packaged default.

    Returns:
        Validated converter configuration. Defaults are used when the file
        does not exist.

    Raises:
        pydantic.ValidationError: If the file contains invalid settings
        yaml.YAMLError: If the file is not valid YAML
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR) or CONFIG_PATH

    path = Path(config_path)
    if not path.exists():
        logger.warning(f"Converter configuration file not found at {path}, using defaults")
        return ConverterConfig()

    with open(path, "r") as f:
        config_dict = yaml.safe_load(f) or {}

    logger.debug(f"Loaded converter configuration from {path}")
    return ConverterConfig.model_validate(config_dict)


# Global configuration cache
_cached_config: Optional[ConverterConfig] = None


def get_config(reload: bool = False) -> ConverterConfig:
    """
    Get converter configuration, using the cached version if available.

    Args:
        reload: Force reload configuration from disk

    Returns:
        Converter configuration
    """
    global _cached_config

    if _cached_config is None or reload:
        _cached_config = load_config()

    return _cached_config
