"""Code table serialization.

Output format: plain text, one code word per line, digits concatenated
without separators, ``"\\n"`` after every row, no header::

    00
    01
    11
    10

Digits of 10 and above are written in decimal as-is, so rows of a
radix > 10 table are not uniquely decodable.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

import numpy as np

from graycode.errors import OutputWriteError
from graycode.utils import fs

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "gray.txt"


def format_row(row: Iterable[int]) -> str:
    """Concatenate a row's digits, e.g. ``[1, 0, 2]`` -> ``"102"``."""
    return "".join(str(int(digit)) for digit in row)


def iter_lines(table: np.ndarray) -> Iterator[str]:
    """Yield one newline-terminated line per row."""
    for row in table:
        yield format_row(row) + "\n"


def write_table(table: np.ndarray, path: str | Path = DEFAULT_OUTPUT) -> Path:
    """Write the code table to ``path``.

    Parameters
    ----------
    table : np.ndarray
        Code table, shape ``(rows, num_bits)``.
    path : str | Path
        Destination file, default ``gray.txt``.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    OutputWriteError
        If the file cannot be written.  The destination is left
        untouched and the temporary file removed.
    """
    path = Path(path)
    try:
        with fs.atomic_open_text(path) as f:
            f.writelines(iter_lines(table))
    except OSError as e:
        raise OutputWriteError(f"Failed to write {path}: {e}") from e

    logger.info("Wrote %d rows to %s", len(table), path)
    return path
