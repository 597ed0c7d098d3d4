"""Shared test fixtures for schematic-graph tests."""

from pathlib import Path

import logging

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_rows():
    """The reference engine schematic: part numbers sum to 4361, gear ratios to 467835."""
    return (FIXTURES_DIR / "sample_schematic.txt").read_text(encoding="utf-8").splitlines()


@pytest.fixture
def sample_file(tmp_path, sample_rows):
    """Sample schematic written to a temporary file."""
    path = tmp_path / "schematic.txt"
    path.write_text("\n".join(sample_rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no global/project config files and no SCHEMATIC_* variables."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in (
        "ENCODING",
        "STRIP_WHITESPACE",
        "ENABLE_VALIDATION",
        "VERBOSITY",
        "OUTPUT_FORMAT",
        "LOG_FILE",
    ):
        monkeypatch.delenv(f"SCHEMATIC_{key}", raising=False)
    return work


@pytest.fixture(autouse=True)
def detach_log_files():
    """Close any file handler a test attached to the package logger."""
    yield
    logger = logging.getLogger("schematic_graph")
    for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
        logger.removeHandler(handler)
        handler.close()
