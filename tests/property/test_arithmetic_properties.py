"""
Property-based tests for BigUint arithmetic using Hypothesis.

Python's built-in int is the reference model: every operation on BigUint
must agree with the same operation on int, and leave a canonical
representation behind.
"""

import pytest
from hypothesis import assume, example, given
from hypothesis import strategies as st

from biguint import (
    DIGIT_MAX,
    BigUint,
    DivisionByZeroError,
    PreconditionViolationError,
    parse,
)

# Values from one digit up to a couple of dozen digits, biased to the edges
naturals = st.one_of(
    st.integers(min_value=0, max_value=DIGIT_MAX),
    st.integers(min_value=0, max_value=2**800),
    st.sampled_from([0, 1, DIGIT_MAX, 2**32, 2**64 - 1, 2**64, 2**128 - 1]),
)

positive_naturals = naturals.filter(lambda n: n > 0)

single_digits = st.integers(min_value=0, max_value=DIGIT_MAX)

digit_lists = st.lists(single_digits, min_size=0, max_size=30)


@pytest.mark.property
class TestRepresentationProperties:
    """Invariant preservation."""

    @given(digits=digit_lists)
    def test_from_digits_normalizes(self, digits: list[int]):
        value = BigUint.from_digits(digits)
        assert value.satisfies_invariant()
        assert int(value) == sum(d << (32 * i) for i, d in enumerate(digits))

    @given(a=naturals, b=naturals)
    def test_results_stay_canonical(self, a: int, b: int):
        x, y = BigUint(a), BigUint(b)
        results = [x + y, x * y, BigUint(max(a, b)) - BigUint(min(a, b))]
        if b:
            results.extend(divmod(x, y))
        for result in results:
            assert result.satisfies_invariant()


@pytest.mark.property
class TestAdditionProperties:
    """Property-based tests for addition and subtraction."""

    @given(a=naturals, b=naturals)
    def test_matches_int(self, a: int, b: int):
        assert int(BigUint(a) + BigUint(b)) == a + b

    @given(a=naturals, d=single_digits)
    def test_single_digit_matches_int(self, a: int, d: int):
        assert int(BigUint(a) + d) == a + d
        assert int(d + BigUint(a)) == a + d

    @given(a=naturals, b=naturals)
    def test_commutativity(self, a: int, b: int):
        assert BigUint(a) + BigUint(b) == BigUint(b) + BigUint(a)

    @given(a=naturals, b=naturals)
    def test_subtract_undoes_add(self, a: int, b: int):
        assert (BigUint(a) + BigUint(b)) - BigUint(b) == a

    @given(a=naturals, b=naturals)
    def test_subtract_below_zero_raises(self, a: int, b: int):
        assume(a < b)
        with pytest.raises(PreconditionViolationError):
            BigUint(a) - BigUint(b)

    @given(a=naturals, d=single_digits)
    def test_single_digit_subtraction(self, a: int, d: int):
        if a >= d:
            assert int(BigUint(a) - d) == a - d
        else:
            with pytest.raises(PreconditionViolationError):
                BigUint(a) - d


@pytest.mark.property
class TestDivisionProperties:
    """Property-based tests for division."""

    @given(a=naturals, b=positive_naturals)
    @example(a=10**21, b=7)
    @example(a=2**64, b=2**32 + 1)
    def test_division_identity(self, a: int, b: int):
        dividend, divisor = BigUint(a), BigUint(b)
        quotient, remainder = BigUint.div_rem(dividend, divisor)
        assert quotient * divisor + remainder == dividend
        assert remainder < divisor

    @given(a=naturals, b=positive_naturals)
    def test_matches_int(self, a: int, b: int):
        assert int(BigUint(a) // BigUint(b)) == a // b
        assert int(BigUint(a) % BigUint(b)) == a % b

    @given(a=naturals, d=single_digits.filter(lambda d: d > 0))
    def test_single_digit_matches_int(self, a: int, d: int):
        quotient, remainder = BigUint.div_rem(BigUint(a), d)
        assert int(quotient) == a // d
        assert remainder == a % d

    @given(q=naturals, b=positive_naturals, data=st.data())
    def test_exact_multiples(self, q: int, b: int, data: st.DataObject):
        r = data.draw(st.integers(min_value=0, max_value=b - 1))
        quotient, remainder = BigUint.div_rem(BigUint(q * b + r), BigUint(b))
        assert quotient == q
        assert remainder == r

    @given(a=naturals)
    def test_division_by_zero_raises(self, a: int):
        with pytest.raises(DivisionByZeroError):
            BigUint(a) // BigUint(0)
        with pytest.raises(DivisionByZeroError):
            BigUint(a) % 0


@pytest.mark.property
class TestOrderingProperties:
    """Property-based tests for comparisons."""

    @given(a=naturals, b=naturals)
    def test_trichotomy(self, a: int, b: int):
        x, y = BigUint(a), BigUint(b)
        assert [x < y, x == y, x > y].count(True) == 1

    @given(a=naturals, b=naturals)
    def test_consistent_with_int(self, a: int, b: int):
        x, y = BigUint(a), BigUint(b)
        assert (x < y) == (a < b)
        assert (x <= y) == (a <= b)
        assert (x >= y) == (a >= b)
        assert (x != y) == (a != b)

    @given(a=naturals, n=st.integers(min_value=0, max_value=2**64 - 1))
    def test_against_long_digit(self, a: int, n: int):
        assert (BigUint(a) < n) == (a < n)
        assert (BigUint(a) == n) == (a == n)


@pytest.mark.property
class TestIncrementProperties:
    """Property-based tests for increment and decrement."""

    @given(a=naturals)
    def test_decrement_inverts_increment(self, a: int):
        value = BigUint(a)
        value.increment().decrement()
        assert value == a
        assert value.satisfies_invariant()

    @given(a=positive_naturals)
    def test_increment_inverts_decrement(self, a: int):
        value = BigUint(a)
        assert value.decrement() == a - 1
        assert value.increment() == a


@pytest.mark.property
class TestPowerProperties:
    """Property-based tests for exponentiation."""

    @given(a=st.integers(min_value=0, max_value=2**100), e=st.integers(min_value=0, max_value=12))
    def test_matches_int(self, a: int, e: int):
        assert int(BigUint(a).pow(e)) == a**e

    @given(a=naturals)
    def test_zero_exponent(self, a: int):
        assert BigUint(a) ** 0 == 1


@pytest.mark.property
class TestTextProperties:
    """Property-based tests for decimal conversion."""

    @given(a=naturals)
    def test_round_trip(self, a: int):
        value = BigUint(a)
        assert parse(str(value)) == value

    @given(a=naturals)
    def test_matches_int_rendering(self, a: int):
        assert str(BigUint(a)) == str(a)

    @given(text=st.text(alphabet="0123456789", min_size=1, max_size=120))
    def test_parse_matches_int(self, text: str):
        assert int(parse(text)) == int(text)
