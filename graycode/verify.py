"""Invariant checks for a generated code table.

Checks that:
    - every cell holds a digit in ``[0, radix)``
    - consecutive rows differ in at most one digit, and by exactly one
      in that digit (reflection, never a wrap from ``radix - 1`` to ``0``)
    - all rows are distinct

Violations are collected as messages rather than raised one at a time,
so a single pass reports everything wrong with a table.

Usage:
    violations = find_violations(table, radix)
    verify_table(table, radix)   # raises VerificationError on any violation
"""

from __future__ import annotations

import logging

import numpy as np

from graycode.errors import VerificationError

logger = logging.getLogger(__name__)

# Cap on messages kept per check; counts are still exact.
MAX_REPORTED = 10


def _report(kind: str, indices: np.ndarray, describe) -> list[str]:
    messages = [describe(int(i)) for i in indices[:MAX_REPORTED]]
    if len(indices) > MAX_REPORTED:
        messages.append(f"... {len(indices) - MAX_REPORTED} more {kind} violations")
    return messages


def find_violations(table: np.ndarray, radix: int) -> list[str]:
    """Return human-readable descriptions of every broken invariant.

    Parameters
    ----------
    table : np.ndarray
        Code table, shape ``(rows, num_bits)``.
    radix : int
        Radix the table was generated with.

    Returns
    -------
    list[str]
        Empty when the table is a valid generalized gray code.
    """
    if table.ndim != 2:
        return [f"table must be 2-D, got shape {table.shape}"]
    if table.shape[1] == 0:
        return [] if len(table) <= 1 else [f"{len(table) - 1} duplicate rows"]

    violations: list[str] = []
    cells = table.astype(np.int64)

    bad_rows = np.flatnonzero(((cells < 0) | (cells >= radix)).any(axis=1))
    violations += _report(
        "range", bad_rows,
        lambda i: f"row {i}: digit outside [0, {radix}): {table[i].tolist()}",
    )

    if len(cells) > 1:
        diff = np.abs(np.diff(cells, axis=0))
        changed = np.count_nonzero(diff, axis=1)
        bad_steps = np.flatnonzero((changed > 1) | (diff.max(axis=1) > 1))
        violations += _report(
            "adjacency", bad_steps,
            lambda i: (
                f"rows {i}->{i + 1}: {table[i].tolist()} -> {table[i + 1].tolist()} "
                "is not a single +/-1 step"
            ),
        )

    unique_rows = np.unique(cells, axis=0)
    duplicates = len(cells) - len(unique_rows)
    if duplicates:
        violations.append(f"{duplicates} duplicate rows")

    if violations:
        logger.warning("Found %d gray code violations", len(violations))
    return violations


def verify_table(table: np.ndarray, radix: int) -> None:
    """Raise VerificationError if the table breaks any invariant."""
    violations = find_violations(table, radix)
    if violations:
        raise VerificationError(
            "Gray code verification failed: " + "; ".join(violations)
        )
    logger.debug("Verified %d rows", len(table))
