"""Tests for the gray code generator.

Validates table shape and digit range, the single +/-1 step between
consecutive rows, reflection at the radix bounds, run lengths per digit,
and the degenerate / invalid parameter cases.
"""

from __future__ import annotations

import numpy as np
import pytest

from graycode.errors import InvalidParametersError, TableTooLargeError
from graycode.generator import (
    Direction,
    bounce_sequence,
    digit_column,
    generate,
    generate_from,
    row_count,
)
from graycode.utils.validators import GrayCodeParams
from graycode.verify import find_violations

SIZES = [(1, 2), (3, 2), (4, 2), (1, 5), (2, 4), (3, 3), (2, 5), (4, 3)]


# ---------------------------------------------------------------------------
# Known sequences
# ---------------------------------------------------------------------------


class TestKnownSequences:
    def test_two_digit_binary(self) -> None:
        assert generate(2, 2).tolist() == [[0, 0], [0, 1], [1, 1], [1, 0]]

    def test_single_digit_ternary(self) -> None:
        assert generate(1, 3).tolist() == [[0], [1], [2]]

    def test_two_digit_ternary_rows(self) -> None:
        assert generate(2, 3).tolist() == [
            [0, 0], [0, 1], [0, 2],
            [1, 2], [1, 1], [1, 0],
            [2, 0], [2, 1], [2, 2],
        ]

    def test_two_digit_ternary_bounce(self) -> None:
        table = generate(2, 3)
        np.testing.assert_array_equal(digit_column(table, 0), [0, 1, 2, 2, 1, 0, 0, 1, 2])
        np.testing.assert_array_equal(digit_column(table, 1), [0, 0, 0, 1, 1, 1, 2, 2, 2])

    def test_binary_matches_xor_formula(self) -> None:
        table = generate(5, 2)
        weights = 1 << np.arange(4, -1, -1)
        as_ints = table.astype(np.int64) @ weights
        expected = [i ^ (i >> 1) for i in range(32)]
        assert as_ints.tolist() == expected


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestProperties:
    @pytest.mark.parametrize("num_bits,radix", SIZES)
    def test_shape_and_range(self, num_bits: int, radix: int) -> None:
        table = generate(num_bits, radix)
        assert table.shape == (radix ** num_bits, num_bits)
        assert np.issubdtype(table.dtype, np.integer)
        assert table.min() >= 0
        assert table.max() == radix - 1

    @pytest.mark.parametrize("num_bits,radix", SIZES)
    def test_adjacent_rows_differ_by_one_step(self, num_bits: int, radix: int) -> None:
        table = generate(num_bits, radix).astype(np.int64)
        diff = np.abs(np.diff(table, axis=0))
        assert (np.count_nonzero(diff, axis=1) == 1).all()
        assert diff.max() == 1

    @pytest.mark.parametrize("num_bits,radix", SIZES)
    def test_rows_distinct(self, num_bits: int, radix: int) -> None:
        table = generate(num_bits, radix)
        assert len(np.unique(table, axis=0)) == len(table)

    @pytest.mark.parametrize("num_bits,radix", SIZES)
    def test_no_violations(self, num_bits: int, radix: int) -> None:
        assert find_violations(generate(num_bits, radix), radix) == []

    def test_never_wraps(self) -> None:
        table = generate(3, 4)
        for j in range(3):
            column = digit_column(table, j).astype(np.int64)
            steps = np.abs(np.diff(column))
            assert (steps <= 1).all()

    @pytest.mark.parametrize("num_bits,radix", [(3, 3), (3, 2), (2, 4)])
    def test_run_lengths(self, num_bits: int, radix: int) -> None:
        table = generate(num_bits, radix)
        for j in range(num_bits):
            column = digit_column(table, j)
            change_rows = np.flatnonzero(np.diff(column)) + 1
            assert (change_rows % radix ** j == 0).all()

    def test_idempotent(self) -> None:
        np.testing.assert_array_equal(generate(3, 3), generate(3, 3))

    def test_generate_from_params(self) -> None:
        params = GrayCodeParams(num_bits=2, radix=3)
        np.testing.assert_array_equal(generate_from(params), generate(2, 3))

    def test_table_is_read_only(self) -> None:
        table = generate(2, 2)
        with pytest.raises(ValueError):
            table[0, 0] = 1


# ---------------------------------------------------------------------------
# Column state machine
# ---------------------------------------------------------------------------


class TestBounceSequence:
    def test_unit_runs(self) -> None:
        assert list(bounce_sequence(9, 1, 3)) == [0, 1, 2, 2, 1, 0, 0, 1, 2]

    def test_runs_of_two(self) -> None:
        assert list(bounce_sequence(8, 2, 2)) == [0, 0, 1, 1, 1, 1, 0, 0]

    def test_single_run(self) -> None:
        assert list(bounce_sequence(4, 4, 4)) == [0, 0, 0, 0]

    def test_radix_one(self) -> None:
        assert list(bounce_sequence(1, 1, 1)) == [0]

    def test_direction_values(self) -> None:
        assert Direction.ASCENDING == 1
        assert Direction.DESCENDING == -1


# ---------------------------------------------------------------------------
# Degenerate and invalid parameters
# ---------------------------------------------------------------------------


class TestParameters:
    def test_radix_one_single_zero_row(self) -> None:
        table = generate(4, 1)
        assert table.tolist() == [[0, 0, 0, 0]]

    def test_row_count(self) -> None:
        assert row_count(3, 4) == 64
        assert row_count(5, 1) == 1

    @pytest.mark.parametrize("num_bits,radix", [(2, 0), (0, 2), (-1, 3), (3, -2)])
    def test_invalid(self, num_bits: int, radix: int) -> None:
        with pytest.raises(InvalidParametersError):
            generate(num_bits, radix)

    def test_invalid_row_count(self) -> None:
        with pytest.raises(InvalidParametersError):
            row_count(2, 0)

    @pytest.mark.parametrize("num_bits,radix", [(64, 2), (40, 3), (2**31 - 1, 2)])
    def test_too_large(self, num_bits: int, radix: int) -> None:
        with pytest.raises(TableTooLargeError, match="too large") as exc_info:
            generate(num_bits, radix)
        assert isinstance(exc_info.value, InvalidParametersError)
        assert exc_info.value.exit_code == 1

    def test_allocation_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def no_memory(*args, **kwargs):
            raise MemoryError()

        monkeypatch.setattr(np, "empty", no_memory)
        with pytest.raises(TableTooLargeError, match="Cannot allocate"):
            generate(3, 2)


class TestDigitColumn:
    def test_least_significant_is_last_array_column(self) -> None:
        table = generate(3, 2)
        np.testing.assert_array_equal(digit_column(table, 0), table[:, 2])
        np.testing.assert_array_equal(digit_column(table, 2), table[:, 0])

    @pytest.mark.parametrize("significance", [-1, 3])
    def test_out_of_range(self, significance: int) -> None:
        with pytest.raises(ValueError, match="significance"):
            digit_column(generate(3, 2), significance)
