"""
Configure pytest environment.

This file is automatically loaded by pytest and used to set up the test environment.
"""
import sys
from pathlib import Path

import pytest

# Add the project root directory to the Python path
# This allows tests to import formatconv without installing it
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from formatconv.config import converter_config
from formatconv.utils.format_detector import reset_default_detector


@pytest.fixture(autouse=True)
def reset_detection_state():
    """Drop the cached configuration and default detector after every test."""
    yield
    reset_default_detector()
    converter_config._cached_config = None


@pytest.fixture
def json_payload():
    """Simple JSON object payload."""
    return '{"foo": "bar"}'


@pytest.fixture
def records_payload():
    """JSON array of flat records, the input the CSV converter expects."""
    return '[{"name": "John", "age": 30}, {"name": "Jane", "age": 25}]'


@pytest.fixture
def xml_payload():
    """Small well-formed XML document."""
    return "<root><foo>bar</foo></root>"


@pytest.fixture
def csv_payload():
    """Comma separated text."""
    return "foo,bar\n1,2\n3,4"
