"""
Schematic file reading.

Turns a text file into the list of grid rows the graph builder consumes.
"""

from pathlib import Path

from .exceptions import FileAccessError
from .logging_config import get_logger

logger = get_logger(__name__)


def read_schematic(
    filepath: Path,
    encoding: str = "utf-8",
    strip_whitespace: bool = False,
) -> list[str]:
    """
    Read a schematic file into rows without line terminators.

    Args:
        filepath: File to read
        encoding: Text encoding
        strip_whitespace: Also strip trailing spaces and tabs from each row

    Returns:
        One string per grid row; an empty file yields an empty list

    Raises:
        FileAccessError: If the file is missing, is a directory, or cannot be decoded
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileAccessError(filepath, "File does not exist")
    if not filepath.is_file():
        raise FileAccessError(filepath, "Not a regular file")

    try:
        # newline="" keeps \r and form feeds intact; rows break on \n only
        with open(filepath, encoding=encoding, newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Cannot decode as {encoding}: {e}")
    except OSError as e:
        raise FileAccessError(filepath, str(e))

    rows = [row.removesuffix("\r") for row in text.split("\n")]
    if rows[-1] == "":
        rows.pop()
    if strip_whitespace:
        rows = [row.rstrip() for row in rows]

    logger.debug(f"Read {len(rows)} rows from {filepath}")
    return rows
