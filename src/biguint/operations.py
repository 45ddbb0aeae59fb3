"""
Arithmetic engine over base-2**32 digit lists.

Every function here works on plain ``list[int]`` digit sequences stored
least-significant-first. A sequence is *normalized* when it is non-empty,
has no most-significant zero digit (zero is ``[0]``) and every digit lies
in ``[0, BASE)``. Functions documented as in-place mutate and return their
first argument; the others leave their arguments untouched.

Preconditions (non-zero divisor, minuend not smaller than subtrahend) are
not rechecked here. ``BigUint`` enforces them before calling in.
"""

from biguint.validators import BASE, DIGIT_BITS, DIGIT_MAX

# Largest power of ten that fits one digit, used to chunk decimal text
DECIMAL_CHUNK_WIDTH = 9
DECIMAL_CHUNK = 10**DECIMAL_CHUNK_WIDTH


def normalize(digits: list[int]) -> list[int]:
    """Strip most-significant zero digits in place; empty becomes ``[0]``."""
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


def is_normalized(digits: list[int]) -> bool:
    """Check that ``digits`` is a canonical representation."""
    if not digits:
        return False
    if len(digits) > 1 and digits[-1] == 0:
        return False
    return all(isinstance(d, int) and 0 <= d <= DIGIT_MAX for d in digits)


def compare(lhs: list[int], rhs: list[int]) -> int:
    """
    Three-way comparison of two normalized digit lists.

    Returns:
        -1, 0 or 1 as ``lhs`` is smaller than, equal to or greater than ``rhs``
    """
    if len(lhs) != len(rhs):
        return -1 if len(lhs) < len(rhs) else 1
    for left, right in zip(reversed(lhs), reversed(rhs)):
        if left != right:
            return -1 if left < right else 1
    return 0


def from_int(value: int) -> list[int]:
    """Split a non-negative int into digits."""
    digits = []
    while value:
        digits.append(value & DIGIT_MAX)
        value >>= DIGIT_BITS
    return normalize(digits)


def to_int(digits: list[int]) -> int:
    """Fold digits back into a Python int."""
    value = 0
    for digit in reversed(digits):
        value = (value << DIGIT_BITS) | digit
    return value


# Single-digit arithmetic


def add_digit(digits: list[int], d: int) -> list[int]:
    """Add one digit in place, propagating the carry upward."""
    carry = d
    i = 0
    while carry:
        if i == len(digits):
            digits.append(carry)
            break
        total = digits[i] + carry
        digits[i] = total & DIGIT_MAX
        carry = total >> DIGIT_BITS
        i += 1
    return digits


def subtract_digit(digits: list[int], d: int) -> list[int]:
    """
    Subtract one digit in place, borrowing upward.

    Requires the value held in ``digits`` to be at least ``d``.
    """
    borrow = d
    i = 0
    while borrow:
        diff = digits[i] - borrow
        if diff < 0:
            digits[i] = diff + BASE
            borrow = 1
        else:
            digits[i] = diff
            borrow = 0
        i += 1
    return normalize(digits)


def multiply_digit(digits: list[int], d: int) -> list[int]:
    """Multiply by one digit in place; may grow by one digit."""
    carry = 0
    for i, digit in enumerate(digits):
        product = digit * d + carry
        digits[i] = product & DIGIT_MAX
        carry = product >> DIGIT_BITS
    if carry:
        digits.append(carry)
    return normalize(digits)


def divmod_digit(digits: list[int], divisor: int) -> tuple[list[int], int]:
    """
    Divide by one non-zero digit.

    A single most-significant-first pass keeps a running remainder below
    ``divisor``, so ``remainder * BASE + digit`` always fits a long digit.

    Returns:
        A new quotient digit list and the remainder as an int
    """
    quotient = []
    remainder = 0
    for digit in reversed(digits):
        current = (remainder << DIGIT_BITS) | digit
        quotient.append(current // divisor)
        remainder = current % divisor
    quotient.reverse()
    return normalize(quotient), remainder


# Multi-precision addition and subtraction


def add_with_shift(acc: list[int], addend: list[int], shift: int) -> list[int]:
    """
    Add ``addend * BASE**shift`` into ``acc`` in place.

    This is how both multiplication algorithms place partial products.
    """
    if len(acc) < len(addend) + shift:
        acc.extend([0] * (len(addend) + shift - len(acc)))
    carry = 0
    i = shift
    for digit in addend:
        total = acc[i] + digit + carry
        acc[i] = total & DIGIT_MAX
        carry = total >> DIGIT_BITS
        i += 1
    while carry:
        if i == len(acc):
            acc.append(carry)
            break
        total = acc[i] + carry
        acc[i] = total & DIGIT_MAX
        carry = total >> DIGIT_BITS
        i += 1
    return normalize(acc)


def add(lhs: list[int], rhs: list[int]) -> list[int]:
    """Return the sum as a new digit list."""
    return add_with_shift(list(lhs), rhs, 0)


def subtract(lhs: list[int], rhs: list[int]) -> list[int]:
    """
    Subtract ``rhs`` from ``lhs`` in place.

    Requires ``lhs >= rhs``; the borrow would otherwise run off the top.
    """
    borrow = 0
    for i in range(len(lhs)):
        if i >= len(rhs) and not borrow:
            break
        diff = lhs[i] - borrow
        if i < len(rhs):
            diff -= rhs[i]
        if diff < 0:
            lhs[i] = diff + BASE
            borrow = 1
        else:
            lhs[i] = diff
            borrow = 0
    return normalize(lhs)


# Multiplication


def school_multiply(lhs: list[int], rhs: list[int]) -> list[int]:
    """
    Quadratic multiplication.

    Each digit of ``rhs`` scales a copy of ``lhs`` which is then shift-added
    into the accumulator at that digit's offset.
    """
    result = [0]
    for shift, digit in enumerate(rhs):
        if digit == 0:
            continue
        partial = multiply_digit(list(lhs), digit)
        add_with_shift(result, partial, shift)
    return result


def _split(digits: list[int], k: int) -> tuple[list[int], list[int]]:
    return normalize(digits[:k]), normalize(digits[k:])


def karatsuba_multiply(lhs: list[int], rhs: list[int], threshold: int) -> list[int]:
    """
    Karatsuba multiplication.

    Both operands are split at half the longer operand's length ``k``::

        lhs * rhs = high * B**2k + (cross - high - low) * B**k + low

    where ``low`` and ``high`` are the products of the low and high halves
    and ``cross`` is ``(lhs_low + lhs_high) * (rhs_low + rhs_high)``.
    Recursion stops in ``school_multiply`` once either operand has at most
    ``threshold`` digits, so ``threshold`` must be at least 1.
    """
    if min(len(lhs), len(rhs)) <= threshold:
        return school_multiply(lhs, rhs)

    k = max(len(lhs), len(rhs)) // 2
    lhs_low, lhs_high = _split(lhs, k)
    rhs_low, rhs_high = _split(rhs, k)

    low = karatsuba_multiply(lhs_low, rhs_low, threshold)
    high = karatsuba_multiply(lhs_high, rhs_high, threshold)
    cross = karatsuba_multiply(add(lhs_low, lhs_high), add(rhs_low, rhs_high), threshold)
    subtract(cross, high)
    subtract(cross, low)

    result = low
    add_with_shift(result, cross, k)
    add_with_shift(result, high, 2 * k)
    return result


# Long division


def divide(dividend: list[int], divisor: list[int]) -> tuple[list[int], list[int]]:
    """
    Long division of two digit lists; ``divisor`` must be non-zero.

    Both operands are first scaled by ``BASE // (top + 1)``, where ``top``
    is the divisor's leading digit. That lifts the leading digit to at
    least ``BASE / 2``, which keeps the two-digit quotient estimate at most
    two above the true quotient digit. The dividend is then consumed
    most-significant-first; each step brings one digit down into the
    partial remainder, estimates the quotient digit, corrects it downward
    and subtracts. The final partial remainder is scaled back.

    Returns:
        New quotient and remainder digit lists
    """
    if compare(dividend, divisor) < 0:
        return [0], list(dividend)
    if len(divisor) == 1:
        quotient, remainder = divmod_digit(dividend, divisor[0])
        return quotient, [remainder]

    scale = BASE // (divisor[-1] + 1)
    u = multiply_digit(list(dividend), scale)
    v = multiply_digit(list(divisor), scale)
    n = len(v)
    top = v[-1]

    quotient = []
    partial = [0]
    for digit in reversed(u):
        partial.insert(0, digit)
        normalize(partial)
        if compare(partial, v) < 0:
            quotient.append(0)
            continue

        if len(partial) > n:
            estimate = ((partial[n] << DIGIT_BITS) | partial[n - 1]) // top
        else:
            estimate = partial[n - 1] // top
        estimate = min(estimate, DIGIT_MAX)

        product = multiply_digit(list(v), estimate)
        while compare(product, partial) > 0:
            estimate -= 1
            subtract(product, v)
        subtract(partial, product)
        quotient.append(estimate)

    quotient.reverse()
    remainder, _ = divmod_digit(partial, scale)
    return normalize(quotient), remainder


# Exponentiation


def power(base: list[int], exponent: int, threshold: int) -> list[int]:
    """Binary exponentiation on top of ``karatsuba_multiply``."""
    result = [1]
    square = list(base)
    while exponent:
        if exponent & 1:
            result = karatsuba_multiply(result, square, threshold)
        exponent >>= 1
        if exponent:
            square = karatsuba_multiply(square, square, threshold)
    return result


# Decimal text


def from_decimal(text: str) -> list[int]:
    """
    Accumulate a decimal numeral left to right.

    The running total is multiplied by ten per character and the character's
    value added, both with the single-digit routines. Characters are taken
    in chunks of up to nine, which folds nine such steps into one.
    Requires ``text`` to be a validated numeral.
    """
    digits = [0]
    head = len(text) % DECIMAL_CHUNK_WIDTH or DECIMAL_CHUNK_WIDTH
    start = 0
    end = head
    while start < len(text):
        chunk = text[start:end]
        multiply_digit(digits, 10 ** len(chunk))
        add_digit(digits, int(chunk))
        start = end
        end += DECIMAL_CHUNK_WIDTH
    return digits


def to_decimal(digits: list[int]) -> str:
    """Render digits in decimal by repeated division by 10**9."""
    chunks = []
    current = list(digits)
    while len(current) > 1 or current[0] >= DECIMAL_CHUNK:
        current, chunk = divmod_digit(current, DECIMAL_CHUNK)
        chunks.append(chunk)
    parts = [str(current[0])]
    parts.extend(f"{chunk:0{DECIMAL_CHUNK_WIDTH}d}" for chunk in reversed(chunks))
    return "".join(parts)
