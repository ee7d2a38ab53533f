"""
Exponentiation, assembled from multiplication, division and square root.

    power(base, exponent) == base ** whole_part * base ** fraction_part

The whole part of the exponent may be any size.  The fraction part is honored
to a single block, e.g. 9 decimal digits, and is approximated in binary from there.
"""

import logging

from .arithmetic import block_number, multiply
from .longhand import divide, sqrt_unsigned
from .number import Number, PRECISION_DEFAULT, trim_fraction


logger = logging.getLogger(__name__)


def pow_small(base, exponent):
    """Return base ** exponent for an ordinary non-negative int exponent, by square-and-multiply."""
    assert exponent >= 0
    result = block_number(1, base.width)
    square = base
    while exponent:
        if exponent & 1:
            result = multiply(result, square).stripped()
        exponent >>= 1
        if exponent:
            square = multiply(square, square).stripped()
    return result


def pow_uint(base, exponent):
    """
    Return base ** |whole part of exponent|.

    The exponent's whole blocks are its digits in base radix, so by Horner's rule:

        base ** (e2*radix**2 + e1*radix + e0) == ((base**e2) ** radix * base**e1) ** radix * base**e0

    That way pow_small() never sees an exponent as big as radix.
    """
    result = None
    for exponent_block in reversed(exponent.blocks[exponent.scale:]):
        if result is None:
            result = pow_small(base, exponent_block)
        else:
            result = multiply(pow_small(result, exponent.radix), pow_small(base, exponent_block)).stripped()
    if result is None:
        result = block_number(1, base.width)
    return result


def pow_ufrac(base, fraction, precision=PRECISION_DEFAULT):
    """
    Return |base| ** fraction, for a float fraction, 0 <= fraction < 1.

    Each bit of the fraction, most significant first, is one more square root of the base:
    base ** 0.5, base ** 0.25, base ** 0.125, ...  Multiply in the ones with a 1 bit.
    So the exponent is only as precise as a float.
    """
    assert 0.0 <= fraction < 1.0
    result = block_number(1, base.width)
    root = base.with_sign(False)
    while fraction:
        root = sqrt_unsigned(root, precision)
        fraction *= 2
        bit = int(fraction)
        if bit:
            result = multiply(result, root).stripped()
        fraction -= bit
    return trim_fraction(result, precision)


def pow_sint(base, exponent, precision=PRECISION_DEFAULT):
    """Return base ** whole part of exponent, where the exponent may be negative."""
    result = pow_uint(base, exponent)
    if exponent.is_negative():
        result = divide(block_number(1, base.width), result, precision)
    return result


def pow_sfrac(base, fraction, precision=PRECISION_DEFAULT):
    """Return |base| ** fraction, for a float fraction, -1 < fraction < 1."""
    result = pow_ufrac(base, abs(fraction), precision)
    if fraction < 0.0:
        result = divide(block_number(1, base.width), result, precision)
    return result


def power(base, exponent, precision=PRECISION_DEFAULT):
    """
    Return base ** exponent, for any real exponent.

    Only the first fractional block of the exponent counts.  Finer exponent digits are dropped.
    Raise Number.UnsupportedOperandError for a negative base with a fractional exponent,
    because the result would not be real.  Only that first block decides what is fractional,
    so power(-2, 3.0000000001) is -8, not an error.
    Raise Number.DivisionByZeroError for zero to a negative power.
    """
    whole = trim_fraction(exponent, 0)
    fraction = exponent.digit_at(-1) / exponent.radix
    if exponent.sign:
        fraction = -fraction
    if any(exponent.blocks[:max(exponent.scale - 1, 0)]):
        logger.debug("power() ignores exponent digits after the first %d fractional digits of %s",
                     exponent.width, exponent)

    if fraction and base.is_negative():
        raise Number.UnsupportedOperandError(
            "Fractional power of a negative base:  {} ** {}".format(base, exponent)
        )

    result = pow_sint(base, whole, precision)
    if fraction:
        result = multiply(result, pow_sfrac(base, fraction, precision))
    return result
