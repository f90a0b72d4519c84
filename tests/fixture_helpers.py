"""Shared helpers for loading sample email bodies in tests.

Used by:
    - tests/test_reply_parser.py
    - tests/test_fragment_assembler.py
    - tests/test_run_parser.py
"""

from pathlib import Path

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def fixture_path(name: str) -> Path:
    """Return the path of a fixture file in tests/fixtures."""
    return FIXTURES_DIR / name


def load_fixture(name: str) -> str:
    """Read a fixture file as UTF-8 text.

    Args:
        name: File name inside tests/fixtures.

    Returns:
        The file contents, unmodified.
    """
    return fixture_path(name).read_text(encoding="utf-8")
