"""
Shared fixtures for the test suite.
"""

import logging
from pathlib import Path

import pytest

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_xml_path():
    """The sample document: root > level1 > level2 > level3 > level4."""
    return FIXTURE_DIR / "sample.xml"


@pytest.fixture
def write_xml(tmp_path):
    """Write an XML document to a temporary file and return its path."""
    def _write(content, name="doc.xml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_root_handlers():
    """Remove any handler a test attaches to the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
