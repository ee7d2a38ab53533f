"""
Long division and square root, done the way they are done by hand, one block at a time.

Both pick each result block by binary search over range(radix),
so each step costs about log2(radix) trial multiplications.
"""

import logging

from .arithmetic import aligned, block_number, compare_magnitude, multiply, sub_magnitude, add_magnitude
from .number import Number, PRECISION_DEFAULT, trim_fraction


logger = logging.getLogger(__name__)


def search_block(trial, limit, radix):
    """
    Binary search the largest block x with trial(x) <= limit.  Return x and trial(x).

    trial() must be monotonic in x, and trial(0) must be zero.
    So 0 always qualifies, and there is always an answer.
    """
    best = 0
    best_product = trial(0)
    low = 1
    high = radix - 1
    while low <= high:
        middle = (low + high) // 2
        product = trial(middle)
        if compare_magnitude(product, limit) <= 0:
            best = middle
            best_product = product
            low = middle + 1
        else:
            high = middle - 1
    return best, best_product


def divide(a, b, precision=PRECISION_DEFAULT):
    """
    Return a / b, truncated toward zero to precision fractional blocks.

    Raise Number.DivisionByZeroError if b is zero.

    The remainder window holds as many blocks as the divisor has, plus one.
    Each step shifts the window up a block, bringing down the next block of the dividend,
    then subtracts the biggest multiple of the divisor that fits.
    """
    a, b = aligned(a, b)
    width = a.width
    significant = len(b.blocks)
    while significant > 0 and b.blocks[significant - 1] == 0:
        significant -= 1
    if significant == 0:
        raise Number.DivisionByZeroError("Division by zero:  {} / {}".format(a, b))
    divisor = Number.from_blocks(b.blocks[:significant], width=width)

    # NOTE:  a/b * radix**precision == A * radix**shift / B, for A and B the blocks of a and b as integers.
    shift = precision + b.scale - a.scale
    if shift >= 0:
        dividend = (0,) * shift + a.blocks
    else:
        # NOTE:  Those low blocks of a could only affect quotient blocks beyond the precision.
        dividend = a.blocks[-shift:]

    quotient = [0] * max(len(dividend) - significant + 1, precision)
    remainder_blocks = dividend[len(dividend) - significant + 1:] + (0,)
    logger.debug("divide %d blocks by %d blocks, to %d fractional blocks", len(dividend), significant, precision)
    for index in range(len(dividend) - significant, -1, -1):
        window = Number.from_blocks((dividend[index],) + remainder_blocks, width=width)
        digit, product = search_block(
            lambda x: multiply(block_number(x, width), divisor),
            window,
            a.radix,
        )
        quotient[index] = digit
        remainder = sub_magnitude(window, product)
        # NOTE:  remainder < divisor, so its top block is zero and can be dropped.
        remainder_blocks = remainder.blocks[:significant]
    return Number.from_blocks(quotient, precision, a.sign != b.sign, width)


def sqrt_unsigned(a, precision=PRECISION_DEFAULT):
    """
    Return the square root of |a|, truncated to precision fractional blocks.

    The radicand's blocks are taken in pairs, pairs lined up on the decimal point,
    with exactly precision pairs right of the point.  For each pair, the remainder
    grows by that pair, and the next result block is the biggest x with

        (2 * result * radix + x) * x <= remainder

    which is the schoolbook square root, in base radix instead of base 10.
    """
    width = a.width
    radix = a.radix
    if a.scale > 2 * precision:
        # NOTE:  Blocks beyond twice the precision cannot reach the result.
        a = trim_fraction(a, 2 * precision)
    whole_length = a.whole_length + a.whole_length % 2
    radicand = (0,) * (2 * precision - a.scale) + a.blocks + (0,) * (whole_length - a.whole_length)
    assert len(radicand) % 2 == 0

    logger.debug("sqrt of %d blocks, to %d fractional blocks", len(radicand), precision)
    result = Number.from_blocks([], width=width)
    remainder = Number.from_blocks([], width=width)
    for index in range(len(radicand) - 2, -1, -2):
        remainder = Number.from_blocks(radicand[index:index + 2] + remainder.blocks, width=width)
        two_result = multiply(block_number(2, width), result)
        two_result_radix = Number.from_blocks((0,) + two_result.blocks, width=width)   # 2 * result * radix

        def trial(x):
            x_number = block_number(x, width)
            return multiply(add_magnitude(two_result_radix, x_number), x_number)

        block, product = search_block(trial, remainder, radix)
        result = Number.from_blocks((block,) + result.blocks, width=width)
        remainder = sub_magnitude(remainder, product)
    return Number.from_blocks(result.blocks, precision, width=width)


def sqrt(a, precision=PRECISION_DEFAULT):
    """Return the square root of a.  Raise Number.NegativeOperandError if a is negative."""
    if a.is_negative():
        raise Number.NegativeOperandError("Square root of a negative number:  {}".format(a))
    return sqrt_unsigned(a, precision)
