"""Generalized (mixed-radix) reflected gray code generation.

The code table is a ``numpy`` array of shape ``(radix ** num_bits,
num_bits)``.  Row ``i`` is the ``i``-th code word.  Rows are stored most
significant digit first, so array column ``num_bits - 1`` holds the
least significant digit and a row prints left to right as written.

Construction
------------
Each array column is filled independently.  Column ``col`` holds each
digit value for ``limit = radix ** (num_bits - col - 1)`` consecutive
rows, then moves one value up.  On reaching ``radix - 1`` it turns around
and walks back down to ``0`` instead of wrapping, then turns again::

    radix=3, limit=1:  0 1 2 2 1 0 0 1 2 ...
    radix=3, limit=3:  0 0 0 1 1 1 2 2 2 ...

Because every column reflects rather than wraps, consecutive rows differ
in exactly one digit by exactly one.  ``radix == 2`` gives the binary
reflected gray code.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import Iterator

import numpy as np

from graycode.errors import TableTooLargeError
from graycode.utils.validators import GrayCodeParams, validate_params

logger = logging.getLogger(__name__)

# Cells addressable by one numpy array (signed 64-bit index space)
MAX_CELLS_LOG2 = 63


# ---------------------------------------------------------------------------
# Column state machine
# ---------------------------------------------------------------------------


class Direction(enum.IntEnum):
    """Walking direction of a column's digit selector."""

    ASCENDING = 1
    DESCENDING = -1


def bounce_sequence(rows: int, limit: int, radix: int) -> Iterator[int]:
    """Yield one column's digit values, top row first.

    Parameters
    ----------
    rows : int
        Number of rows in the table.
    limit : int
        Run length: how many consecutive rows share a digit value.
    radix : int
        Number of digit values, ``0 .. radix - 1``.

    Yields
    ------
    int
        Digit value for each row.

    Notes
    -----
    Two states, ``ASCENDING`` and ``DESCENDING``.  The selector steps
    every ``limit`` rows; stepping past ``radix - 1`` or below ``0``
    clamps it back to the bound and flips the state, so the bound value
    is repeated for a second run before the walk reverses.
    """
    selector = 0
    direction = Direction.ASCENDING
    for row in range(rows):
        if row != 0 and row % limit == 0:
            selector += direction
        if selector == radix:
            selector = radix - 1
            direction = Direction.DESCENDING
        elif selector == -1:
            selector = 0
            direction = Direction.ASCENDING
        yield selector


# ---------------------------------------------------------------------------
# Table construction
# ---------------------------------------------------------------------------


def _digit_dtype(radix: int) -> np.dtype:
    """Smallest unsigned integer dtype that holds ``radix - 1``."""
    return np.min_scalar_type(radix - 1)


def row_count(num_bits: int, radix: int) -> int:
    """Number of code words for ``num_bits`` digits of base ``radix``.

    Raises
    ------
    InvalidParametersError
        If ``num_bits < 1`` or ``radix < 1``.
    """
    return validate_params(num_bits, radix).rows


def generate_from(params: GrayCodeParams) -> np.ndarray:
    """Build the code table for validated parameters.

    Parameters
    ----------
    params : GrayCodeParams
        Digit count and radix.

    Returns
    -------
    np.ndarray
        Read-only array of shape ``(params.rows, params.num_bits)``.

    Raises
    ------
    TableTooLargeError
        If the table exceeds numpy's index space or available memory.
    """
    num_bits, radix = params.num_bits, params.radix
    if num_bits * math.log2(radix) + math.log2(num_bits) >= MAX_CELLS_LOG2:
        raise TableTooLargeError(
            f"Table of {radix}^{num_bits} rows x {num_bits} digits is too large"
        )
    rows = params.rows
    logger.debug("Generating %d rows x %d digits (radix %d)", rows, num_bits, radix)

    dtype = _digit_dtype(radix)
    try:
        values = np.arange(radix, dtype=dtype)
        table = np.empty((rows, num_bits), dtype=dtype)
    except (ValueError, MemoryError) as e:
        raise TableTooLargeError(
            f"Cannot allocate {rows} rows x {num_bits} digits: {e}"
        ) from e

    for col in range(num_bits - 1, -1, -1):
        limit = radix ** (num_bits - col - 1)
        selectors = np.fromiter(bounce_sequence(rows, limit, radix), dtype=np.intp, count=rows)
        table[:, col] = values[selectors]

    table.setflags(write=False)
    return table


def generate(num_bits: int, radix: int) -> np.ndarray:
    """Generate the generalized reflected gray code table.

    Parameters
    ----------
    num_bits : int
        Number of digit positions, >= 1.
    radix : int
        Values per digit, >= 1.  ``radix == 1`` yields a single
        all-zero row.

    Returns
    -------
    np.ndarray
        Read-only array of shape ``(radix ** num_bits, num_bits)``,
        most significant digit first.

    Raises
    ------
    InvalidParametersError
        If ``num_bits < 1`` or ``radix < 1``.

    Examples
    --------
    >>> generate(2, 2).tolist()
    [[0, 0], [0, 1], [1, 1], [1, 0]]
    """
    return generate_from(validate_params(num_bits, radix))


def digit_column(table: np.ndarray, significance: int) -> np.ndarray:
    """Return the digits of one significance, ``0`` being least significant.

    Raises
    ------
    ValueError
        If ``significance`` is outside ``[0, num_bits)``.
    """
    num_bits = table.shape[1]
    if not 0 <= significance < num_bits:
        raise ValueError(
            f"significance must be in [0, {num_bits}), got {significance}"
        )
    return table[:, num_bits - 1 - significance]
