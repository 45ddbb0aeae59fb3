"""Decimal text conversion and stream I/O for BigUint."""

from __future__ import annotations

import logging
from typing import TextIO, TypeVar

from biguint.core import BigUint
from biguint.exceptions import InvalidFormatError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse(text: str) -> BigUint:
    """
    Parse a decimal numeral.

    Args:
        text: Digits ``0``-``9`` only; leading zeros are accepted, signs and
            surrounding whitespace are not

    Returns:
        The parsed value

    Raises:
        InvalidFormatError: If text is not a decimal numeral
    """
    return BigUint(text)


def try_parse(text: str, default: T = None) -> BigUint | T:
    """
    Parse a decimal numeral, returning default if it is malformed.

    This is the non-throwing variant of parse for input that is expected
    to be dirty.
    """
    try:
        return BigUint(text)
    except InvalidFormatError:
        return default


def format_decimal(value: BigUint) -> str:
    """Render value in decimal, most-significant digit first."""
    return str(value)


def write(value: BigUint, stream: TextIO) -> int:
    """Write value's decimal form to stream; returns characters written."""
    return stream.write(str(value))


def _read_token(stream: TextIO) -> str:
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def read(stream: TextIO, default: T = None) -> BigUint | T:
    """
    Read one whitespace-delimited decimal numeral from stream.

    Leading whitespace is skipped and the token is consumed up to the next
    whitespace character or end of stream. A missing or malformed token is
    not an error: default is returned, the stream stays usable and the next
    call reads the following token.

    Example:
        >>> stream = io.StringIO("12 x 34")
        >>> read(stream), read(stream), read(stream)
        (BigUint('12'), None, BigUint('34'))
    """
    token = _read_token(stream)
    if not token:
        logger.debug("No numeral left on stream")
        return default
    value = try_parse(token)
    if value is None:
        logger.debug("Rejected malformed numeral %r", token)
        return default
    return value
