"""Pytest configuration for widget and window tests."""

from pathlib import Path

from tests.helpers.optional_imports import qt_available

_HERE = Path(__file__).parent

# Skip collection of test files if GUI deps are missing.
if not qt_available():
    collect_ignore = [str(path.relative_to(_HERE)) for path in _HERE.rglob("test_*.py")]
