"""
graycode: generalized (mixed-radix) reflected gray code generator.

Modules:
    generator: code table construction (column state machine)
    verify: adjacency / distinctness checks over a table
    arguments: num_bits and radix from argv or stdin
    serializer: table to text file
    cli: command-line entry point with timing report
    errors: exception hierarchy and exit codes
    utils: logging, profiling, atomic I/O, validation

Usage:
    from graycode import generate, write_table
    table = generate(2, 3)
    write_table(table, "gray.txt")
"""

__version__ = "1.0.0"

from graycode.errors import GrayCodeError
from graycode.generator import digit_column, generate, generate_from, row_count
from graycode.serializer import format_row, write_table
from graycode.utils.validators import GrayCodeParams
from graycode.verify import find_violations, verify_table

__all__ = [
    "GrayCodeError",
    "GrayCodeParams",
    "__version__",
    "digit_column",
    "find_violations",
    "format_row",
    "generate",
    "generate_from",
    "row_count",
    "verify_table",
    "write_table",
]
