"""
Pytest configuration and fixtures for acf-fields tests
"""

import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from acf_fields.i18n import reset_translator  # noqa: E402
from acf_fields.registry import FieldRegistry  # noqa: E402


@pytest.fixture(autouse=True)
def default_translator():
    """Every test starts and ends with the identity translator."""
    reset_translator()
    yield
    reset_translator()


@pytest.fixture
def registry():
    """An empty registry, independent of the global singleton."""
    return FieldRegistry()


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    package = logging.getLogger("acf_fields")
    handlers = list(root.handlers)
    level = root.level
    package_level = package.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)
