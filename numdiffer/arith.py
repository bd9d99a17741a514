"""Arithmetic on the numbers found in compared fields.

Real values are ``decimal.Decimal`` numbers. Every operation uses the
current decimal context, so a caller picks the working precision with
``decimal.localcontext(make_context(iscale))``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Context,
    Decimal,
)

INFINITY = Decimal("Infinity")
_ZERO = Decimal(0)
_ONE = Decimal(1)


def make_context(iscale: int) -> Context:
    """Return a decimal context working with ``iscale`` significant digits."""
    if iscale < 1:
        raise ValueError(f"precision must be at least 1 digit: {iscale}")
    return Context(
        prec=iscale, rounding=ROUND_HALF_EVEN, Emax=MAX_EMAX, Emin=MIN_EMIN
    )


@dataclass(frozen=True)
class Complex:
    """A complex number with decimal real and imaginary parts."""

    re: Decimal = _ZERO
    im: Decimal = _ZERO

    def __post_init__(self) -> None:
        object.__setattr__(self, "re", Decimal(self.re))
        object.__setattr__(self, "im", Decimal(self.im))

    def __sub__(self, other: Complex) -> Complex:
        return csub(self, other)

    def __abs__(self) -> Decimal:
        return cabs(self)


class RelErrFormula(enum.Enum):
    """What a relative error is measured against."""

    CLASSIC = "classic"
    """The smaller of the two moduli."""
    FIRST_FILE = "first"
    """The modulus of the number from the first file."""
    SECOND_FILE = "second"
    """The modulus of the number from the second file."""


def cabs(z: Complex) -> Decimal:
    """Return the modulus of ``z``, scaled to avoid overflow."""
    a = abs(z.re)
    if z.im.is_zero():
        return a
    b = abs(z.im)
    if b > a:
        q = a / b
        return b * (q * q + _ONE).sqrt()
    q = b / a
    return a * (q * q + _ONE).sqrt()


def csub(z1: Complex, z2: Complex) -> Complex:
    """Return ``z1 - z2``."""
    return Complex(z1.re - z2.re, z1.im - z2.im)


def smart_cmp(z1: Complex, z2: Complex, flag: int) -> bool:
    """Tell whether ``z1`` and ``z2`` pass an ordering filter.

    A zero ``flag`` lets every pair pass. A positive one asks that both
    parts of ``z1`` be at least those of ``z2``; a negative one that they
    be at most those of ``z2``.
    """
    if flag == 0:
        return True
    if flag > 0:
        return z1.re >= z2.re and z1.im >= z2.im
    return z1.re <= z2.re and z1.im <= z2.im


def _ratio(abserr: Decimal, base: Decimal) -> Decimal:
    if base.is_zero():
        return _ZERO if abserr.is_zero() else INFINITY
    return abserr / base


def relative_error(
    z1: Complex, z2: Complex, formula: RelErrFormula = RelErrFormula.CLASSIC
) -> Decimal:
    """Return the relative error between ``z1`` and ``z2``.

    The absolute error is divided by the modulus that ``formula`` picks.
    A zero divisor gives zero when the numbers are equal and infinity
    otherwise.
    """
    abserr = cabs(csub(z1, z2))
    if formula is RelErrFormula.CLASSIC:
        base = min(cabs(z1), cabs(z2))
    elif formula is RelErrFormula.FIRST_FILE:
        base = cabs(z1)
    elif formula is RelErrFormula.SECOND_FILE:
        base = cabs(z2)
    else:
        raise ValueError(f"unknown relative error formula: {formula!r}")
    return _ratio(abserr, base)


def format_number(value: Decimal | int | str, precision: int) -> str:
    """Render ``value`` in scientific notation with ``precision`` decimals.

    The mantissa is rounded half away from zero. Infinity is written
    ``Inf``.
    """
    if precision < 0:
        raise ValueError(f"precision must not be negative: {precision}")
    value = Decimal(value)
    if value.is_nan():
        raise ValueError("cannot format a NaN")
    if value.is_infinite():
        return "-Inf" if value < 0 else "Inf"
    if value.is_zero():
        return "0." + "0" * precision + "e+0"
    sign = "-" if value < 0 else ""
    ctx = Context(
        prec=precision + 1, rounding=ROUND_HALF_UP, Emax=MAX_EMAX, Emin=MIN_EMIN
    )
    rounded = ctx.plus(abs(value))
    digits = "".join(map(str, rounded.as_tuple().digits)).ljust(precision + 1, "0")
    return f"{sign}{digits[0]}.{digits[1:]}e{rounded.adjusted():+d}"