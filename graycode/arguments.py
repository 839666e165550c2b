"""Argument acquisition: obtain ``num_bits`` and ``radix`` from the caller.

Accepted shapes::

    graycode 4,3          # one combined argument, split on ","
    graycode 4 3          # two discrete arguments
    echo 4,3 | graycode   # no arguments: first line of stdin, split on ","

Each shape is a *line source*.  ``ArgvSource`` wraps the argument vector
and ``StdinSource`` wraps a text stream; ``select_source`` picks one by
argument count.  Whatever the source, the tokens must number exactly two
and parse as integers.
"""

from __future__ import annotations

import logging
import re
import sys
from abc import ABC, abstractmethod
from typing import Sequence, TextIO

from graycode.errors import ArgumentShapeError, ArgumentValueError, InputReadError
from graycode.utils.validators import GrayCodeParams, validate_params

logger = logging.getLogger(__name__)

SEPARATOR = ","
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Line sources
# ---------------------------------------------------------------------------


class LineSource(ABC):
    """Something that yields the raw input tokens."""

    @abstractmethod
    def tokens(self) -> list[str]:
        """Return the input split into tokens (not yet validated)."""


def split_line(text: str) -> list[str]:
    """Split on ``","``, dropping trailing empty tokens.

    Text without a separator is a single token, even when empty.

    Examples
    --------
    >>> split_line("4,3,")
    ['4', '3']
    >>> split_line(",")
    []
    >>> split_line("")
    ['']
    """
    if SEPARATOR not in text:
        return [text]
    tokens = text.split(SEPARATOR)
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


class ArgvSource(LineSource):
    """Tokens from command-line arguments.

    A single argument is split with ``split_line``; any other count is
    taken as-is, one token per argument.
    """

    def __init__(self, values: Sequence[str]) -> None:
        self._values = list(values)

    def tokens(self) -> list[str]:
        if len(self._values) == 1:
            return split_line(self._values[0])
        return list(self._values)

    def __repr__(self) -> str:
        return f"ArgvSource({self._values!r})"


class StdinSource(LineSource):
    """Tokens from the first line of a text stream.

    End of input before any line yields zero tokens.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def read_line(self) -> str | None:
        """Read the first line without its line terminator, or None at EOF.

        Raises
        ------
        InputReadError
            If the stream cannot be read or decoded.
        """
        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"Failed to read input: {e}") from e

        if not line:
            return None
        return line.rstrip("\r\n")

    def tokens(self) -> list[str]:
        line = self.read_line()
        if line is None:
            logger.debug("No input line on stdin")
            return []
        return split_line(line)

    def __repr__(self) -> str:
        return f"StdinSource({getattr(self._stream, 'name', self._stream)!r})"


def select_source(values: Sequence[str], stream: TextIO | None = None) -> LineSource:
    """Pick the line source for the given arguments.

    Parameters
    ----------
    values : Sequence[str]
        Positional command-line arguments.
    stream : TextIO, optional
        Stream used when ``values`` is empty; defaults to ``sys.stdin``.
    """
    if values:
        return ArgvSource(values)
    return StdinSource(sys.stdin if stream is None else stream)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_tokens(tokens: Sequence[str]) -> tuple[int, int]:
    """Convert exactly two tokens to ``(num_bits, radix)``.

    Raises
    ------
    ArgumentShapeError
        If there are not exactly two tokens.
    ArgumentValueError
        If a token is not an optionally signed run of ASCII digits.
    """
    if len(tokens) != 2:
        raise ArgumentShapeError(len(tokens))

    for token in tokens:
        if not INTEGER_TOKEN.fullmatch(token):
            raise ArgumentValueError(f"Not an integer: {token!r}")
    return int(tokens[0]), int(tokens[1])


def acquire_params(values: Sequence[str], stream: TextIO | None = None) -> GrayCodeParams:
    """Read, parse and validate the two generation parameters.

    Parameters
    ----------
    values : Sequence[str]
        Positional command-line arguments (zero, one or two).
    stream : TextIO, optional
        Input stream for the zero-argument case; defaults to ``sys.stdin``.

    Returns
    -------
    GrayCodeParams
        Validated ``num_bits`` and ``radix``.

    Raises
    ------
    ArgumentShapeError, ArgumentValueError, InputReadError,
    InvalidParametersError
    """
    source = select_source(values, stream)
    logger.debug("Reading parameters from %r", source)
    num_bits, radix = parse_tokens(source.tokens())
    return validate_params(num_bits, radix)
