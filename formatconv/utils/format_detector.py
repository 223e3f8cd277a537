"""
Format detection utilities.

This module decides which of JSON, CSV or XML a text payload represents.
Three sniff strategies run in a fixed order and the first one that produces
a format wins:

1. Extension sniff: a trailing ``.<letters>`` suffix on the payload itself
2. MIME sniff: a pluggable hook that may resolve a MIME type
3. Content sniff: structural cues in the payload text

The extension strategy looks at the payload, not at a separate filename. It
only fires for payloads that literally end in something like ``.json``.
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

from formatconv.config import ConverterConfig, get_config
from formatconv.errors import (
    CannotInferFormatError,
    EmptyPayloadError,
    InvalidPayloadError,
    UnsupportedExtensionError,
    UnsupportedMimeTypeError,
)
from formatconv.types import Format, MimeDetector

logger = logging.getLogger(__name__)

# \Z rather than $ so a trailing newline does not count as the end of input
EXTENSION_PATTERN = re.compile(r"\.([a-z]+)\Z", re.IGNORECASE | re.ASCII)

SniffStrategy = Callable[[str], Optional[Format]]


def _preview(data: str, limit: int = 40) -> str:
    """Short printable excerpt of a payload for log messages."""
    return repr(data if len(data) <= limit else data[:limit] + "...")


def detect_file_extension(data: str) -> Optional[str]:
    """
    Extract a trailing extension-like suffix from the payload.

    Args:
        data: Payload to examine

    Returns:
        The suffix upper-cased (e.g. ``"JSON"``), or None if not found
    """
    match = EXTENSION_PATTERN.search(data)
    return match.group(1).upper() if match else None


def map_file_extension_to_format(extension: str, config: Optional[ConverterConfig] = None) -> Format:
    """
    Map an upper-cased extension to its format.

    Raises:
        UnsupportedExtensionError: If the extension names no known format
    """
    extensions = (config or get_config()).detection.extensions
    try:
        return extensions[extension.upper()]
    except KeyError:
        raise UnsupportedExtensionError(extension) from None


def detect_mime_type(data: str) -> Optional[str]:
    """
    Default MIME hook. No MIME sniffing is performed, so this always returns None.

    Swap in a real implementation with ``FormatDetector(mime_detector=...)`` or
    ``set_default_mime_detector``.
    """
    return None


def map_mime_type_to_format(mime_type: str, config: Optional[ConverterConfig] = None) -> Format:
    """
    Map a MIME type to its format.

    Raises:
        UnsupportedMimeTypeError: If the MIME type has no mapping
    """
    mime_types = (config or get_config()).detection.mime_types
    try:
        return mime_types[mime_type.strip().lower()]
    except KeyError:
        raise UnsupportedMimeTypeError(mime_type) from None


def sniff_content(data: str) -> Format:
    """
    Infer the format from structural cues in the payload.

    Rules are checked in order against the untrimmed payload, so ``{a,b}``
    is JSON rather than CSV.

    Raises:
        InvalidPayloadError: If data is not a string
        EmptyPayloadError: If data is empty or whitespace only
        CannotInferFormatError: If no cue matches
    """
    if not isinstance(data, str):
        raise InvalidPayloadError(data)

    if data.strip() == "":
        raise EmptyPayloadError()

    if data.startswith("{") and data.endswith("}"):
        return Format.JSON

    if data.startswith("<") and data.endswith(">"):
        return Format.XML

    if "," in data:
        return Format.CSV

    raise CannotInferFormatError()


class FormatDetector:
    """
    Ordered-strategy format detector.

    Each strategy either returns a format, returns None to pass to the next
    strategy, or raises a DetectionError which ends detection.

    Example:
        >>> detector = FormatDetector(mime_detector=lambda data: "text/csv")
        >>> detector.detect("a;b")
        <Format.CSV: 'CSV'>
    """

    def __init__(
        self,
        mime_detector: Optional[MimeDetector] = None,
        config: Optional[ConverterConfig] = None,
    ):
        """
        Initialize the detector.

        Args:
            mime_detector: MIME hook; defaults to ``detect_mime_type``
            config: Configuration with the lookup tables; when omitted the
                detector follows ``get_config()``, including reloads
        """
        self.mime_detector = mime_detector or detect_mime_type
        self._config = config

    @property
    def config(self) -> ConverterConfig:
        """Injected configuration, or the current ``get_config()`` when none was given."""
        return self._config or get_config()

    @property
    def strategies(self) -> List[Tuple[str, SniffStrategy]]:
        return [
            ("extension", self._from_extension),
            ("mime", self._from_mime_type),
            ("content", self._from_content),
        ]

    def _from_extension(self, data: str) -> Optional[Format]:
        extension = detect_file_extension(data)
        if extension is None:
            return None
        return map_file_extension_to_format(extension, self.config)

    def _from_mime_type(self, data: str) -> Optional[Format]:
        mime_type = self.mime_detector(data)
        if not mime_type:
            return None
        return map_mime_type_to_format(mime_type, self.config)

    def _from_content(self, data: str) -> Optional[Format]:
        return sniff_content(data)

    def detect(self, data: str) -> Format:
        """
        Detect the format of a payload.

        Args:
            data: Payload to classify

        Returns:
            The detected format

        Raises:
            DetectionError: If no format can be determined
        """
        if not isinstance(data, str):
            raise InvalidPayloadError(data)

        for name, strategy in self.strategies:
            format_type = strategy(data)
            if format_type is not None:
                logger.debug(f"Detected {format_type} via {name} sniff for payload {_preview(data)}")
                return format_type

        # sniff_content never returns None
        raise CannotInferFormatError()


_default_detector: Optional[FormatDetector] = None
_default_mime_detector: MimeDetector = detect_mime_type


def get_default_detector() -> FormatDetector:
    """Return the process-wide detector, building it on first use."""
    global _default_detector
    if _default_detector is None:
        _default_detector = FormatDetector(mime_detector=_default_mime_detector)
    return _default_detector


def set_default_mime_detector(mime_detector: MimeDetector) -> None:
    """Install a MIME hook on the process-wide detector."""
    global _default_detector, _default_mime_detector
    _default_mime_detector = mime_detector
    _default_detector = None


def reset_default_detector() -> None:
    """Restore the stock MIME hook and drop the cached detector."""
    global _default_detector, _default_mime_detector
    _default_mime_detector = detect_mime_type
    _default_detector = None


def detect_format(data: str) -> Format:
    """
    Detect the format of a payload with the default detector.

    Args:
        data: Payload to classify

    Returns:
        One of Format.JSON, Format.CSV, Format.XML

    Raises:
        DetectionError: If no format can be determined
    """
    return get_default_detector().detect(data)
