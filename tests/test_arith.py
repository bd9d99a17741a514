from decimal import Decimal, localcontext

import pytest
from hypothesis import given
from hypothesis import strategies as st

from numdiffer.arith import (
    INFINITY,
    Complex,
    RelErrFormula,
    cabs,
    csub,
    format_number,
    make_context,
    relative_error,
    smart_cmp,
)

small_ints = st.integers(min_value=-10**6, max_value=10**6)
complexes = st.builds(Complex, small_ints, small_ints)


def test_make_context_sets_precision():
    ctx = make_context(25)
    assert ctx.prec == 25


def test_make_context_rejects_zero():
    with pytest.raises(ValueError):
        make_context(0)


def test_context_controls_division():
    ctx = make_context(5)
    assert ctx.prec == 5
    with localcontext(ctx):
        result = Decimal(1) / Decimal(3)
    assert len(result.as_tuple().digits) == 5
    assert result == Decimal("0.33333")


def test_cabs_pythagorean():
    assert cabs(Complex(3, 4)) == Decimal(5)


def test_cabs_of_real_is_absolute_value():
    assert cabs(Complex(Decimal("-7.25"), 0)) == Decimal("7.25")


@given(small_ints, small_ints)
def test_cabs_symmetric_and_sign_free(a, b):
    with localcontext(make_context(30)):
        assert cabs(Complex(a, b)) == cabs(Complex(b, a))
        assert cabs(Complex(a, b)) == cabs(Complex(-a, -b))


@given(complexes, complexes)
def test_csub_round_trip(z1, z2):
    diff = csub(z1, z2)
    assert diff.re + z2.re == z1.re
    assert diff.im + z2.im == z1.im
    assert z1 - z2 == diff


@given(complexes)
def test_csub_self_is_zero(z):
    assert cabs(csub(z, z)) == 0


def test_smart_cmp_zero_flag_accepts_everything():
    assert smart_cmp(Complex(1, 1), Complex(5, 5), 0)
    assert smart_cmp(Complex(5, 5), Complex(1, 1), 0)


def test_smart_cmp_positive_flag():
    assert smart_cmp(Complex(5, 5), Complex(1, 1), 1)
    assert not smart_cmp(Complex(5, 0), Complex(1, 1), 1)


def test_smart_cmp_negative_flag():
    assert smart_cmp(Complex(1, 1), Complex(5, 5), -1)
    assert not smart_cmp(Complex(1, 6), Complex(5, 5), -1)


@pytest.mark.parametrize("formula", list(RelErrFormula))
def test_relative_error_of_equal_zeros_is_zero(formula):
    assert relative_error(Complex(), Complex(), formula) == 0


def test_relative_error_against_zero_is_infinite():
    assert relative_error(Complex(0, 0), Complex(2, 0)) == INFINITY
    assert relative_error(Complex(0), Complex(2), RelErrFormula.FIRST_FILE) == INFINITY


def test_relative_error_second_file_finite_when_first_is_zero():
    err = relative_error(Complex(0), Complex(2), RelErrFormula.SECOND_FILE)
    assert err == cabs(csub(Complex(0), Complex(2))) / 2


@given(
    st.integers(min_value=1, max_value=1000), st.integers(min_value=1, max_value=1000)
)
def test_classic_is_largest_of_the_two(a, b):
    with localcontext(make_context(30)):
        z1, z2 = Complex(a), Complex(b)
        classic = relative_error(z1, z2, RelErrFormula.CLASSIC)
        first = relative_error(z1, z2, RelErrFormula.FIRST_FILE)
        second = relative_error(z1, z2, RelErrFormula.SECOND_FILE)
        assert classic == max(first, second)


def test_format_infinity():
    assert format_number(INFINITY, 5) == "Inf"


def test_format_zero():
    assert format_number(Decimal(0), 3) == "0.000e+0"


def test_format_rounds_half_away_from_zero():
    assert format_number(Decimal("2.5"), 0) == "3.e+0"
    assert format_number(Decimal("-2.5"), 0) == "-3.e+0"


def test_format_rejects_negative_precision():
    with pytest.raises(ValueError):
        format_number(Decimal(1), -1)


@given(
    st.integers(min_value=-10**10, max_value=10**10).filter(bool),
    st.integers(min_value=-50, max_value=50),
)
def test_format_round_trip(mantissa, exponent):
    value = Decimal(mantissa).scaleb(exponent)
    text = format_number(value, 15)
    assert Decimal(text) == value
    assert text.count("e") == 1
    assert len(text.split("e")[0].lstrip("-").split(".")[1]) == 15


@given(
    st.integers(min_value=1, max_value=10**8),
    st.integers(min_value=-20, max_value=20),
    st.integers(min_value=0, max_value=6),
)
def test_format_sign_symmetry(mantissa, exponent, precision):
    value = Decimal(mantissa).scaleb(exponent)
    assert format_number(-value, precision) == "-" + format_number(value, precision)