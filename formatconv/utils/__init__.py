"""
Utility functions for format detection.
"""

from .format_detector import FormatDetector, detect_format

__all__ = ["FormatDetector", "detect_format"]
