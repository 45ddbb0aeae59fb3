"""Custom exceptions for the biguint package."""

from typing import Any


class BigUintError(Exception):
    """Base exception for all biguint errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(BigUintError, ZeroDivisionError):
    """Raised when dividing or taking a remainder by zero."""

    def __init__(self, dividend: Any) -> None:
        super().__init__("Division by zero", dividend)
        self.dividend = dividend


class InvalidFormatError(BigUintError, ValueError):
    """Raised when text is not a decimal numeral."""

    def __init__(self, text: Any, reason: str = "invalid decimal numeral") -> None:
        super().__init__(reason, repr(text))
        self.text = text
        self.reason = reason


class PreconditionViolationError(BigUintError, ArithmeticError):
    """Raised when an operation would produce a negative magnitude."""

    def __init__(self, operation: str, *operands: Any) -> None:
        super().__init__(f"Negative result in {operation}", operands)
        self.operation = operation
        self.operands = operands


class InvalidInputError(BigUintError):
    """Raised when an operand has the wrong type or sign."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class OutOfRangeError(BigUintError):
    """Raised when a value is outside acceptable range."""

    def __init__(
        self, value: int, min_val: int | None = None, max_val: int | None = None
    ) -> None:
        range_str = f"[{min_val}, {max_val}]"
        super().__init__(f"Value out of range {range_str}", value)
        self.min_val = min_val
        self.max_val = max_val
