"""Input validation functions with strict type checking."""

from typing import Any

from biguint.exceptions import InvalidFormatError, InvalidInputError, OutOfRangeError

# Digit geometry
DIGIT_BITS = 32
BASE = 1 << DIGIT_BITS
DIGIT_MAX = BASE - 1
LONG_DIGIT_MAX = (1 << (2 * DIGIT_BITS)) - 1

DECIMAL_DIGITS = frozenset("0123456789")


def validate_non_negative(value: Any) -> int:
    """
    Validate that a value is a non-negative integer.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int or is negative
    """
    if not isinstance(value, int):
        raise InvalidInputError(value, f"Expected int, got {type(value).__name__}")

    if value < 0:
        raise InvalidInputError(value, "Value must be non-negative")

    return value


def validate_range(
    value: int,
    min_val: int | None = None,
    max_val: int | None = None,
) -> int:
    """
    Validate that an integer lies within an inclusive range.

    Args:
        value: The value to validate
        min_val: Minimum allowed value (None for no limit)
        max_val: Maximum allowed value (None for no limit)

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int
        OutOfRangeError: If value is outside the range
    """
    if not isinstance(value, int):
        raise InvalidInputError(value, f"Expected int, got {type(value).__name__}")

    if min_val is not None and value < min_val:
        raise OutOfRangeError(value, min_val, max_val)

    if max_val is not None and value > max_val:
        raise OutOfRangeError(value, min_val, max_val)

    return value


def validate_digit(value: Any) -> int:
    """
    Validate that a value fits a single base-2**32 digit.

    Raises:
        InvalidInputError: If value is not an int
        OutOfRangeError: If value is outside [0, DIGIT_MAX]
    """
    return validate_range(value, 0, DIGIT_MAX)


def validate_threshold(value: Any) -> int:
    """Validate a Karatsuba threshold: a digit count of at least one."""
    return validate_range(value, min_val=1)


def validate_numeral(text: Any) -> str:
    """
    Validate that text is a plain decimal numeral.

    Leading zeros are allowed. Signs, separators and surrounding
    whitespace are not.

    Args:
        text: The text to validate

    Returns:
        The validated text

    Raises:
        InvalidFormatError: If text is empty or holds a non-digit character
    """
    if not isinstance(text, str):
        raise InvalidFormatError(text, f"Expected str, got {type(text).__name__}")

    if not text:
        raise InvalidFormatError(text, "Empty numeral")

    for position, char in enumerate(text):
        if char not in DECIMAL_DIGITS:
            raise InvalidFormatError(text, f"Unexpected character {char!r} at {position}")

    return text
