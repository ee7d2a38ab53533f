"""
Block-wise arithmetic:  comparison, addition, subtraction, multiplication.

Operands are aligned by position relative to the decimal point, via Number.digit_at(),
so they never need padding to the same layout.
"""

from .number import Number


def aligned(a, b):
    """Both operands in the block width of the first one."""
    if a.width == b.width:
        return a, b
    return a, b.rebased(a.width)


def compare_magnitude(a, b):
    """
    Compare absolute values.  Return -1 if |a| < |b|, 0 if |a| == |b|, +1 if |a| > |b|.

    Block counts are not compared, because leading and trailing zero blocks are allowed.
    """
    a, b = aligned(a, b)
    top = max(a.whole_length, b.whole_length)
    bottom = -max(a.scale, b.scale)
    for position in range(top - 1, bottom - 1, -1):
        block_a = a.digit_at(position)
        block_b = b.digit_at(position)
        if block_a < block_b:
            return -1
        if block_a > block_b:
            return 1
    return 0


def compare(a, b):
    """Compare signed values.  Return -1, 0, or +1.  Zero is zero whatever its sign."""
    negative_a = a.is_negative()
    negative_b = b.is_negative()
    if negative_a != negative_b:
        return -1 if negative_a else 1
    magnitude_comparison = compare_magnitude(a, b)
    return -magnitude_comparison if negative_a else magnitude_comparison


def add_magnitude(a, b):
    """
    Return |a| + |b|.

    The result has one more whole block than the longer operand, for the final carry.
    """
    a, b = aligned(a, b)
    radix = a.radix
    scale = max(a.scale, b.scale)
    top = 1 + max(a.whole_length, b.whole_length)
    blocks = []
    carry = 0
    for position in range(-scale, top):
        total = a.digit_at(position) + b.digit_at(position) + carry
        if total >= radix:
            total -= radix
            carry = 1
        else:
            carry = 0
        blocks.append(total)
    assert carry == 0
    return Number.from_blocks(blocks, scale, width=a.width)


def sub_magnitude(a, b):
    """
    Return |a| - |b|.

    PRECONDITION:  |a| >= |b|.  This is not checked.  Callers compare first, see compare_magnitude().
                   Otherwise the result is garbage:  the final borrow falls off the top,
                   leaving the radix complement of the true difference.
    """
    a, b = aligned(a, b)
    radix = a.radix
    scale = max(a.scale, b.scale)
    top = max(a.whole_length, b.whole_length)
    blocks = []
    borrow = 0
    for position in range(-scale, top):
        difference = a.digit_at(position) - b.digit_at(position) - borrow
        if difference < 0:
            difference += radix
            borrow = 1
        else:
            borrow = 0
        blocks.append(difference)
    return Number.from_blocks(blocks, scale, width=a.width)


def _add_signed(a, b, subtract_b):
    sign_a = a.sign
    sign_b = b.sign != subtract_b
    if sign_a == sign_b:
        return add_magnitude(a, b).with_sign(sign_a)
    elif compare_magnitude(a, b) > 0:
        return sub_magnitude(a, b).with_sign(sign_a)
    else:
        # NOTE:  Equal magnitudes land here, making a zero with b's sign.  Harmless, see Number.is_negative().
        return sub_magnitude(b, a).with_sign(sign_b)


def add(a, b):
    """Return a + b."""
    return _add_signed(a, b, subtract_b=False)


def subtract(a, b):
    """Return a - b."""
    return _add_signed(a, b, subtract_b=True)


def absolute_value(a):
    return a.with_sign(False)


def multiply(a, b):
    """
    Return a * b, by schoolbook long multiplication of blocks.

    The product of two blocks plus a partial block plus a carry always fits in two blocks.
    Every block of the result is kept, so nothing is rounded away.
    """
    a, b = aligned(a, b)
    radix = a.radix
    blocks = [0] * (len(a.blocks) + len(b.blocks))
    for index_a, block_a in enumerate(a.blocks):
        carry = 0
        for index_b, block_b in enumerate(b.blocks):
            accumulator = block_a * block_b + blocks[index_a + index_b] + carry
            blocks[index_a + index_b] = accumulator % radix
            carry = accumulator // radix
        blocks[index_a + len(b.blocks)] = carry
    return Number.from_blocks(blocks, a.scale + b.scale, a.sign != b.sign, a.width)


def block_number(value, width):
    """A single-block whole Number, e.g. a trial digit in long division."""
    return Number.from_blocks([value], width=width)
