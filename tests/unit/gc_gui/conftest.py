"""Pytest configuration for gc_gui tests."""

from pathlib import Path

from tests.helpers.optional_imports import qt_available

# Skip collection of test files if GUI deps are missing.
if not qt_available():
    collect_ignore = [path.name for path in Path(__file__).parent.glob("test_*.py")]
