"""
Arbitrary-precision unsigned integers.

This package provides:
- BigUint, an unsigned integer of unbounded magnitude in base 2**32
- School and Karatsuba multiplication behind a tunable crossover threshold
- Long division with remainder
- Decimal text parsing, rendering and stream I/O
"""

from biguint.core import BigUint
from biguint.exceptions import (
    BigUintError,
    DivisionByZeroError,
    InvalidFormatError,
    InvalidInputError,
    OutOfRangeError,
    PreconditionViolationError,
)
from biguint.policy import (
    DEFAULT_KARATSUBA_THRESHOLD,
    get_karatsuba_threshold,
    karatsuba_threshold,
    set_karatsuba_threshold,
)
from biguint.text import format_decimal, parse, read, try_parse, write
from biguint.validators import BASE, DIGIT_BITS, DIGIT_MAX, LONG_DIGIT_MAX

__all__ = [
    "BASE",
    "DEFAULT_KARATSUBA_THRESHOLD",
    "DIGIT_BITS",
    "DIGIT_MAX",
    "LONG_DIGIT_MAX",
    "BigUint",
    "BigUintError",
    "DivisionByZeroError",
    "InvalidFormatError",
    "InvalidInputError",
    "OutOfRangeError",
    "PreconditionViolationError",
    "format_decimal",
    "get_karatsuba_threshold",
    "karatsuba_threshold",
    "parse",
    "read",
    "set_karatsuba_threshold",
    "try_parse",
    "write",
]

__version__ = "0.1.0"
