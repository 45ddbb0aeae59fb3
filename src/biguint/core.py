"""BigUint: arbitrary-precision unsigned integer value type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from biguint import operations
from biguint.exceptions import (
    DivisionByZeroError,
    InvalidInputError,
    PreconditionViolationError,
)
from biguint.policy import get_karatsuba_threshold, set_karatsuba_threshold
from biguint.validators import (
    DIGIT_MAX,
    validate_digit,
    validate_non_negative,
    validate_numeral,
    validate_threshold,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


def _operand(other: Any) -> BigUint | int:
    """Sort a right-hand operand into a single digit or a BigUint."""
    if isinstance(other, BigUint):
        return other
    if isinstance(other, int):
        validate_non_negative(other)
        return other if other <= DIGIT_MAX else BigUint(other)
    return NotImplemented


def _derived(primitive: Callable[[BigUint, Any], BigUint]) -> Callable[[BigUint, Any], BigUint]:
    """Build ``a op b`` from the in-place primitive, leaving ``a`` untouched."""

    def binary(self: BigUint, other: Any) -> BigUint:
        return primitive(self.copy(), other)

    return binary


def _reflected(primitive: Callable[[BigUint, Any], BigUint]) -> Callable[[BigUint, Any], BigUint]:
    """Build ``int op BigUint`` from the in-place primitive."""

    def binary(self: BigUint, other: Any) -> BigUint:
        if not isinstance(other, int):
            return NotImplemented
        return primitive(BigUint(validate_non_negative(other)), self)

    return binary


def _relation(test: Callable[[int], bool]) -> Callable[[BigUint, Any], bool]:
    """Build a rich comparison from the three-way ``_compare``."""

    def relation(self: BigUint, other: Any) -> bool:
        order = self._compare(other)
        if order is NotImplemented:
            return NotImplemented
        return test(order)

    return relation


class BigUint:
    """
    Unsigned integer of unbounded magnitude.

    The value is held as base-2**32 digits, least-significant first. Every
    public operation leaves the digits normalized: non-empty, no leading
    zero digit, zero stored as a single 0.

    In-place operators (``+=``, ``-=``, ``*=``, ``//=``, ``%=``, ``**=``)
    mutate the value; plain operators return new values. An ``int`` operand
    that fits one digit takes the linear single-digit path. Results that
    would be negative raise ``PreconditionViolationError`` instead of
    wrapping around.

    Example:
        >>> x = BigUint(4294967295) + 1
        >>> x.digits
        (0, 1)
        >>> str(BigUint("123456789") * BigUint(987654321))
        '121932631112635269'
    """

    def __init__(self, value: BigUint | int | str = 0) -> None:
        """
        Initialize from an int, a decimal numeral or another BigUint.

        Args:
            value: A non-negative int, a decimal string without sign or
                surrounding whitespace, or a BigUint to copy (default 0)

        Raises:
            InvalidInputError: If value is negative or of another type
            InvalidFormatError: If a string is not a decimal numeral
        """
        if isinstance(value, BigUint):
            digits = list(value._digits)
        elif isinstance(value, str):
            digits = operations.from_decimal(validate_numeral(value))
        elif isinstance(value, int):
            digits = operations.from_int(validate_non_negative(value))
        else:
            raise InvalidInputError(value, f"Cannot build BigUint from {type(value).__name__}")
        self._digits: list[int] = digits

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> BigUint:
        """
        Build a value from digits given least-significant first.

        Superfluous most-significant zeros are dropped; all-zero input
        (or no digits at all) gives zero.

        Raises:
            InvalidInputError: If a digit is not an int
            OutOfRangeError: If a digit is outside [0, 2**32 - 1]
        """
        stored = [validate_digit(digit) for digit in digits]
        return cls._wrap(operations.normalize(stored))

    @classmethod
    def _wrap(cls, digits: list[int]) -> BigUint:
        result = cls.__new__(cls)
        result._digits = digits
        return result

    @property
    def digits(self) -> tuple[int, ...]:
        """Digits in base 2**32, least-significant first."""
        return tuple(self._digits)

    @staticmethod
    def set_karatsuba_threshold(threshold: int) -> int:
        """Set the process-wide Karatsuba threshold; returns the old one."""
        return set_karatsuba_threshold(threshold)

    def set(self, value: BigUint | int | str) -> BigUint:
        """Replace the value in place."""
        self._digits = BigUint(value)._digits
        return self

    def copy(self) -> BigUint:
        """Create an independent copy of this value."""
        return BigUint._wrap(list(self._digits))

    def satisfies_invariant(self) -> bool:
        """Check that the digits are a canonical representation."""
        return operations.is_normalized(self._digits)

    def is_zero(self) -> bool:
        return self._digits == [0]

    # In-place primitives

    def __iadd__(self, other: Any) -> BigUint:
        operand = _operand(other)
        if operand is NotImplemented:
            return NotImplemented
        if isinstance(operand, int):
            operations.add_digit(self._digits, operand)
        else:
            addend = list(operand._digits) if operand is self else operand._digits
            operations.add_with_shift(self._digits, addend, 0)
        return self

    def __isub__(self, other: Any) -> BigUint:
        operand = _operand(other)
        if operand is NotImplemented:
            return NotImplemented
        subtrahend = [operand] if isinstance(operand, int) else operand._digits
        if operations.compare(self._digits, subtrahend) < 0:
            raise PreconditionViolationError("subtraction", self.copy(), other)
        if isinstance(operand, int):
            operations.subtract_digit(self._digits, operand)
        else:
            operations.subtract(self._digits, subtrahend)
        return self

    def __imul__(self, other: Any) -> BigUint:
        operand = _operand(other)
        if operand is NotImplemented:
            return NotImplemented
        if isinstance(operand, int):
            operations.multiply_digit(self._digits, operand)
        else:
            self._digits = operations.karatsuba_multiply(
                self._digits, operand._digits, get_karatsuba_threshold()
            )
        return self

    def __ifloordiv__(self, other: Any) -> BigUint:
        operand = _operand(other)
        if operand is NotImplemented:
            return NotImplemented
        self._digits, _ = self._divide(operand)
        return self

    def __imod__(self, other: Any) -> BigUint:
        operand = _operand(other)
        if operand is NotImplemented:
            return NotImplemented
        _, self._digits = self._divide(operand)
        return self

    def __ipow__(self, exponent: Any) -> BigUint:
        if isinstance(exponent, BigUint):
            exponent = int(exponent)
        elif not isinstance(exponent, int):
            return NotImplemented
        validate_non_negative(exponent)
        self._digits = operations.power(self._digits, exponent, get_karatsuba_threshold())
        return self

    def _divide(self, operand: BigUint | int) -> tuple[list[int], list[int]]:
        """Quotient and remainder digits; the only place zero is rejected."""
        if isinstance(operand, int):
            if operand == 0:
                raise DivisionByZeroError(self.copy())
            quotient, remainder = operations.divmod_digit(self._digits, operand)
            return quotient, [remainder]
        if operand.is_zero():
            raise DivisionByZeroError(self.copy())
        return operations.divide(self._digits, operand._digits)

    # Derived operators

    __add__ = _derived(__iadd__)
    __sub__ = _derived(__isub__)
    __mul__ = _derived(__imul__)
    __floordiv__ = _derived(__ifloordiv__)
    __mod__ = _derived(__imod__)

    __radd__ = __add__
    __rmul__ = __mul__
    __rsub__ = _reflected(__isub__)
    __rfloordiv__ = _reflected(__ifloordiv__)
    __rmod__ = _reflected(__imod__)
    __rpow__ = _reflected(__ipow__)

    def __pow__(self, exponent: Any, modulo: Any = None) -> BigUint:
        if modulo is not None:
            return NotImplemented
        return self.copy().__ipow__(exponent)

    def __divmod__(self, other: Any) -> tuple[BigUint, BigUint]:
        operand = _operand(other)
        if operand is NotImplemented:
            return NotImplemented
        quotient, remainder = self._divide(operand)
        return BigUint._wrap(quotient), BigUint._wrap(remainder)

    def __rdivmod__(self, other: Any) -> tuple[BigUint, BigUint]:
        if not isinstance(other, int):
            return NotImplemented
        return divmod(BigUint(validate_non_negative(other)), self)

    def pow(self, exponent: int) -> BigUint:
        """Return ``self ** exponent``; ``x.pow(0)`` is 1 for every x."""
        return self ** exponent

    @staticmethod
    def div(dividend: BigUint | int, divisor: BigUint | int) -> BigUint:
        """Quotient of ``dividend / divisor``, remainder discarded."""
        quotient, _ = BigUint.div_rem(dividend, divisor)
        return quotient

    @staticmethod
    def div_rem(
        dividend: BigUint | int, divisor: BigUint | int
    ) -> tuple[BigUint, BigUint | int]:
        """
        Divide with remainder.

        Args:
            dividend: The value to divide
            divisor: A single digit or a BigUint

        Returns:
            ``(quotient, remainder)``; the remainder is an int when the
            divisor is a single-digit int, otherwise a BigUint

        Raises:
            DivisionByZeroError: If divisor is zero
        """
        operand = _operand(divisor)
        if operand is NotImplemented:
            raise InvalidInputError(divisor, f"Cannot divide by {type(divisor).__name__}")
        quotient, remainder = _as_big(dividend)._divide(operand)
        if isinstance(operand, int):
            return BigUint._wrap(quotient), remainder[0]
        return BigUint._wrap(quotient), BigUint._wrap(remainder)

    @staticmethod
    def school_multiply(lhs: BigUint | int, rhs: BigUint | int) -> BigUint:
        """Quadratic digit-grid product."""
        return BigUint._wrap(operations.school_multiply(_as_big(lhs)._digits, _as_big(rhs)._digits))

    @staticmethod
    def karatsuba_multiply(
        lhs: BigUint | int, rhs: BigUint | int, threshold: int | None = None
    ) -> BigUint:
        """
        Karatsuba product.

        Args:
            lhs: First factor
            rhs: Second factor
            threshold: Crossover digit count for this call only; the
                process-wide threshold is used when omitted

        Raises:
            OutOfRangeError: If threshold is below 1
        """
        if threshold is None:
            threshold = get_karatsuba_threshold()
        else:
            validate_threshold(threshold)
        return BigUint._wrap(
            operations.karatsuba_multiply(_as_big(lhs)._digits, _as_big(rhs)._digits, threshold)
        )

    # Increment and decrement

    def increment(self) -> BigUint:
        """Prefix increment: add one in place and return self."""
        operations.add_digit(self._digits, 1)
        return self

    def decrement(self) -> BigUint:
        """
        Prefix decrement: subtract one in place and return self.

        Raises:
            PreconditionViolationError: If the value is zero
        """
        if self.is_zero():
            raise PreconditionViolationError("decrement", self.copy())
        operations.subtract_digit(self._digits, 1)
        return self

    def post_increment(self) -> BigUint:
        """Postfix increment: add one in place, return the old value."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> BigUint:
        """Postfix decrement: subtract one in place, return the old value."""
        previous = self.copy()
        self.decrement()
        return previous

    # Comparison

    def _compare(self, other: Any) -> int:
        if isinstance(other, BigUint):
            return operations.compare(self._digits, other._digits)
        if isinstance(other, int):
            if other < 0:
                return 1
            return operations.compare(self._digits, operations.from_int(other))
        return NotImplemented

    __eq__ = _relation(lambda order: order == 0)
    __ne__ = _relation(lambda order: order != 0)
    __lt__ = _relation(lambda order: order < 0)
    __le__ = _relation(lambda order: order <= 0)
    __gt__ = _relation(lambda order: order > 0)
    __ge__ = _relation(lambda order: order >= 0)

    # Values change through in-place operators
    __hash__ = None  # type: ignore[assignment]

    # Conversion

    def __int__(self) -> int:
        return operations.to_int(self._digits)

    __index__ = __int__

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return operations.to_decimal(self._digits)

    def __repr__(self) -> str:
        return f"BigUint('{self}')"

    def __copy__(self) -> BigUint:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> BigUint:
        return self.copy()


def _as_big(value: BigUint | int) -> BigUint:
    return value if isinstance(value, BigUint) else BigUint(value)
