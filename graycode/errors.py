"""Exception hierarchy and process exit codes.

Modules raise these; only ``graycode.cli.main`` turns them into a
diagnostic and an exit status.

Exit codes:
    0  success, or malformed argument shape (soft exit)
    1  non-integer token or out-of-range parameters
    2  command-line usage error (argparse)
    3  I/O failure reading the input
    4  I/O failure writing the output
    5  configuration error
    6  verification failure
"""

from __future__ import annotations

EXIT_OK = 0
EXIT_BAD_VALUE = 1
EXIT_USAGE = 2
EXIT_READ_ERROR = 3
EXIT_WRITE_ERROR = 4
EXIT_CONFIG_ERROR = 5
EXIT_VERIFY_ERROR = 6


class GrayCodeError(Exception):
    """Base class for all errors raised by this package."""

    exit_code: int = EXIT_BAD_VALUE


class ArgumentShapeError(GrayCodeError):
    """Raised when the input does not split into exactly two tokens."""

    exit_code = EXIT_OK

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Unexpected number of arguments! Expected 2 but got {count}"
        )


class ArgumentValueError(GrayCodeError):
    """Raised when an input token is not an integer."""

    exit_code = EXIT_BAD_VALUE


class InvalidParametersError(GrayCodeError):
    """Raised when ``num_bits`` or ``radix`` is out of range."""

    exit_code = EXIT_BAD_VALUE


class InputReadError(GrayCodeError):
    """Raised when standard input cannot be read."""

    exit_code = EXIT_READ_ERROR


class OutputWriteError(GrayCodeError):
    """Raised when the code table cannot be written."""

    exit_code = EXIT_WRITE_ERROR


class ConfigError(GrayCodeError):
    """Raised when configuration validation fails."""

    exit_code = EXIT_CONFIG_ERROR


class VerificationError(GrayCodeError):
    """Raised when a generated table breaks the gray code adjacency rule."""

    exit_code = EXIT_VERIFY_ERROR


class TableTooLargeError(InvalidParametersError):
    """Raised when the code table cannot be allocated."""
