"""
A blocknum Number is a signed decimal of unbounded size, stored in blocks of decimal digits.

Features:
 - arbitrary range
 - exact decimal parsing and formatting, no binary rounding
 - caller-chosen fractional precision for division, square root and powers
"""

import re


DIGITS_PER_BLOCK = 9
RADIX = 10 ** DIGITS_PER_BLOCK
PRECISION_DEFAULT = 5   # fractional blocks kept by divide(), sqrt(), power()


class Number(object):
    """
    A signed real number, in sign-magnitude form.

    The magnitude is a tuple of blocks, least significant first.
    Each block holds width decimal digits, so each is in range(radix), radix == 10**width.
    The lowest scale blocks are to the right of the decimal point.

        Number('-12.34')   sign=True   scale=1   blocks=(340000000, 12)
        Number('1000000000.5')         scale=1   blocks=(500000000, 0, 1)

    Leading and trailing zero blocks are allowed, so the same value may have many
    block layouts.  Everything that looks at blocks must go through digit_at().
    Zero may have either sign.  The sign of zero is never observable.

    A Number is immutable.  Arithmetic produces new Numbers.
    """

    __slots__ = ('_sign', '_scale', '_blocks', '_width')

    def __init__(self, content=None, width=None):
        """
        Number constructor.

        content - the type can be:
            numeric string   '-12.34'
            int              10**100
            another Number   Number(42)
            None             (zero)
        width - decimal digits per block, see DIGITS_PER_BLOCK
        """
        if width is None:
            width = content.width if isinstance(content, Number) else DIGITS_PER_BLOCK
        if not isinstance(width, int) or width < 1:
            raise self.ConstructorTypeError("Block width must be a positive int, not {}".format(repr(width)))

        if isinstance(content, bool):
            raise self.ConstructorTypeError("Number({}) is not supported".format(repr(content)))
        elif isinstance(content, str):
            self._from_string(content, width)
        elif isinstance(content, int):
            self._from_string(str(content), width)
        elif isinstance(content, Number):
            self._from_another_number(content, width)
        elif content is None:
            self._set(False, 0, (0,), width)
        else:
            # NOTE:  A float is not an exact decimal, so it is refused rather than approximated.
            #        Number(repr(x)) is the way to get the digits Python shows for a float.
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type_name(self),
                inner=type_name(content),
            ))

    def _set(self, sign, scale, blocks, width):
        self._sign = bool(sign)
        self._scale = scale
        self._blocks = tuple(blocks)
        self._width = width
        assert 0 <= self._scale <= len(self._blocks), "scale {} out of range for {} blocks".format(
            self._scale,
            len(self._blocks),
        )
        assert all(0 <= block < self.radix for block in self._blocks), "block out of range"

    def _from_another_number(self, another_number_instance, width):
        """
        Copy constructor, possibly into a different block width.

            assert Number(1) == Number(Number(1))
        """
        if another_number_instance.width == width:
            other = another_number_instance
            self._set(other.sign, other.scale, other.blocks, width)
        else:
            self._from_string(format_number(another_number_instance), width)

    # Parsing
    # -------
    DECIMAL_PATTERN = re.compile(r'(-?)([0-9]*)(?:\.([0-9]*))?')

    def _from_string(self, s, width):
        """
        Fill in sign, scale and blocks from a decimal string.

        Optional leading minus, optional single decimal point, digits 0-9 otherwise.
        At least one digit.  So '5.' and '.5' are fine, but '.' and '-' are not.

        The fractional digits are padded on the right so a block boundary
        falls exactly at the decimal point.  No digit is ever rounded away.
        """
        match = self.DECIMAL_PATTERN.fullmatch(s)
        if match is None:
            raise self.ParseError("A Number string must be a decimal like '-12.34', not {}".format(repr(s)))
        minus, whole, fraction = match.group(1), match.group(2), match.group(3) or ''
        if whole == '' and fraction == '':
            raise self.ParseError("A Number string needs at least one digit, not {}".format(repr(s)))

        scale = ceil_divide(len(fraction), width)
        whole_length = ceil_divide(len(whole), width)
        digits = whole.rjust(whole_length * width, '0') + fraction.ljust(scale * width, '0')
        blocks = [int(digits[end - width:end]) for end in range(len(digits), 0, -width)]
        assert len(blocks) == whole_length + scale
        self._set(minus == '-', scale, blocks, width)

    class ParseError(ValueError):
        """e.g. Number('1.2.3') or Number('') or Number('12e3')"""

    class ConstructorTypeError(TypeError):
        """e.g. Number(1.5) or Number(object) or Number('1', width=0)"""

    class DivisionByZeroError(ZeroDivisionError):
        """e.g. divide(Number(1), Number(0))"""

    class NegativeOperandError(ValueError):
        """e.g. sqrt(Number(-4))"""

    class UnsupportedOperandError(ValueError):
        """e.g. power(Number(-4), Number('0.5'))"""

    @classmethod
    def from_blocks(cls, blocks, scale=0, sign=False, width=DIGITS_PER_BLOCK):
        """
        Construct a Number from its parts.  Blocks are least significant first.

            assert Number('-12.34') == Number.from_blocks([340000000, 12], scale=1, sign=True)
        """
        return_value = cls.__new__(cls)
        return_value._set(sign, scale, blocks, width)
        return return_value

    # Parts
    # -----
    @property
    def sign(self):
        """True for negative.  Meaningless for zero, see is_negative()."""
        return self._sign

    @property
    def scale(self):
        """How many of the blocks are right of the decimal point."""
        return self._scale

    @property
    def blocks(self):
        return self._blocks

    @property
    def width(self):
        return self._width

    @property
    def radix(self):
        return 10 ** self._width

    @property
    def whole_length(self):
        """How many of the blocks are left of the decimal point."""
        return len(self._blocks) - self._scale

    def digit_at(self, position):
        """
        The block at a position relative to the decimal point.  Zero outside the stored blocks.

        Position 0 is the block just left of the point, 1 is the next more significant one,
        -1 is the block just right of the point.

            assert 12 == Number('-12.34').digit_at(0)
            assert 340000000 == Number('-12.34').digit_at(-1)
            assert 0 == Number('-12.34').digit_at(5)
        """
        index = position + self._scale
        if 0 <= index < len(self._blocks):
            return self._blocks[index]
        return 0

    def is_zero(self):
        return not any(self._blocks)

    def is_negative(self):
        return self._sign and not self.is_zero()

    def is_positive(self):
        return not self._sign and not self.is_zero()

    def is_whole(self):
        return not any(self._blocks[:self._scale])

    def clone(self):
        return self.from_blocks(self._blocks, self._scale, self._sign, self._width)

    def with_sign(self, sign):
        """A Number with the same magnitude and the given sign."""
        return self.from_blocks(self._blocks, self._scale, sign, self._width)

    def stripped(self):
        """
        The same value without zero blocks at either end.

        Repeated multiplication needs this, because a product always has
        as many blocks as both factors, even when the top ones are zero.
        """
        low = 0
        while low < self._scale and self._blocks[low] == 0:
            low += 1
        high = len(self._blocks)
        while high > self._scale and self._blocks[high - 1] == 0:
            high -= 1
        return self.from_blocks(self._blocks[low:high], self._scale - low, self._sign, self._width)

    def rebased(self, width):
        """The same value stored in blocks of a different width."""
        return type(self)(self, width=width)

    # Formatting
    # ----------
    def __str__(self):
        return format_number(self)

    def __repr__(self):
        return "Number('{}')".format(format_number(self))

    def __int__(self):
        """Truncate toward zero."""
        magnitude = 0
        for block in reversed(self._blocks[self._scale:]):
            magnitude = magnitude * self.radix + block
        return -magnitude if self._sign else magnitude

    # Comparison
    # ----------
    def __eq__(self, other):
        other_number = self._comparand(other)
        if other_number is NotImplemented:
            return NotImplemented
        return self._compare(other_number) == 0

    def __ne__(self, other):
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    def __lt__(self, other):  return self._ordered(other, lambda c: c <  0)
    def __le__(self, other):  return self._ordered(other, lambda c: c <= 0)
    def __gt__(self, other):  return self._ordered(other, lambda c: c >  0)
    def __ge__(self, other):  return self._ordered(other, lambda c: c >= 0)

    def _ordered(self, other, test):
        other_number = self._comparand(other)
        if other_number is NotImplemented:
            return NotImplemented
        return test(self._compare(other_number))

    def _compare(self, other):
        from .arithmetic import compare
        # NOTE:  Imported late because arithmetic imports this module.
        return compare(self, other)

    def _comparand(self, x):
        """
        Get x ready to compare, or NotImplemented.  Numbers and ints only.

        Strings are not compared, so Number(42) != '42', the same as 42 != '42'.
        So == agrees with hash().
        """
        if isinstance(x, str):
            return NotImplemented
        return self._op_ready(x, self._width)

    @classmethod
    def _op_ready(cls, x, width):
        """Get x ready to be an operand, or NotImplemented so Python can try the other side."""
        if isinstance(x, Number):
            return x
        if isinstance(x, (int, str)) and not isinstance(x, bool):
            return cls(x, width=width)
        return NotImplemented

    def __hash__(self):
        """Equal values hash equal, including Number(42) and 42."""
        if self.is_whole():
            return hash(int(self))
        return hash(format_number(self))

    # Math
    # ----
    def __pos__(self):
        return self.clone()

    def __neg__(self):
        return self.with_sign(not self._sign)

    def __abs__(self):
        return self.with_sign(False)

    def __add__(self, other):      return self._binary_op('add', self, other)
    def __radd__(self, other):     return self._binary_op('add', other, self)
    def __sub__(self, other):      return self._binary_op('subtract', self, other)
    def __rsub__(self, other):     return self._binary_op('subtract', other, self)
    def __mul__(self, other):      return self._binary_op('multiply', self, other)
    def __rmul__(self, other):     return self._binary_op('multiply', other, self)
    def __truediv__(self, other):  return self._binary_op('divide', self, other)
    def __rtruediv__(self, other): return self._binary_op('divide', other, self)
    def __pow__(self, other):      return self._binary_op('power', self, other)
    def __rpow__(self, other):     return self._binary_op('power', other, self)

    @classmethod
    def _binary_op(cls, op_name, input_left, input_right):
        """Two-input operator - fob off on the arithmetic functions."""
        from .arithmetic import add, subtract, multiply
        from .longhand import divide
        from .power import power
        # NOTE:  Imported late because those modules import this one.
        #        Functions, not modules:  blocknum.power is the function once the package is imported.
        operations = {
            'add':      add,
            'subtract': subtract,
            'multiply': multiply,
            'divide':   divide,
            'power':    power,
        }
        width = input_left.width if isinstance(input_left, Number) else input_right.width
        n1 = cls._op_ready(input_left, width)
        n2 = cls._op_ready(input_right, width)
        if n1 is NotImplemented or n2 is NotImplemented:
            return NotImplemented
        return operations[op_name](n1, n2)

    ZERO = None
    ONE = None

    @classmethod
    def _internal_setup(cls):
        """Initialize Number constants after the Number class is defined."""
        cls.ZERO = cls.from_blocks([0])
        cls.ONE = cls.from_blocks([1])


def format_number(number):
    """
    Render a Number as a decimal string.

    No leading zeros, except one lone 0 before the point for magnitudes under 1.
    No trailing zeros after the point, and no point at all for whole values.
    Zero of either sign is '0'.

        assert '-12.34' == format_number(Number('-12.340'))
        assert '0.5' == format_number(Number('.5'))
    """
    if number.is_zero():
        return '0'
    width = number.width
    blocks = number.blocks
    scale = number.scale
    whole_digits = ''.join('{:0{w}d}'.format(block, w=width) for block in reversed(blocks[scale:]))
    fraction_digits = ''.join('{:0{w}d}'.format(block, w=width) for block in reversed(blocks[:scale]))
    whole_digits = whole_digits.lstrip('0') or '0'
    fraction_digits = fraction_digits.rstrip('0')
    return_value = '-' if number.sign else ''
    return_value += whole_digits
    if fraction_digits:
        return_value += '.' + fraction_digits
    return return_value


def parse(text, width=DIGITS_PER_BLOCK):
    """Construct a Number from a decimal string.  Raise Number.ParseError if it is malformed."""
    if not isinstance(text, str):
        raise Number.ParseError("Expecting a decimal string, not a {}".format(type_name(text)))
    return Number(text, width=width)


def trim_fraction(number, precision):
    """
    Keep exactly precision fractional blocks.  Truncate toward zero, or pad with zero blocks.

        assert '3.14' == str(trim_fraction(Number('3.14159', width=1), 2))
    """
    cut = number.scale - precision
    if cut >= 0:
        blocks = number.blocks[cut:]
    else:
        blocks = (0,) * -cut + number.blocks
    return Number.from_blocks(blocks, precision, number.sign, number.width)


def ceil_divide(numerator, denominator):
    """Integer division rounding up, for non-negative numerator."""
    return -(-numerator // denominator)
assert 2 == ceil_divide(10, 9)
assert 1 == ceil_divide(9, 9)
assert 0 == ceil_divide(0, 9)


def type_name(x):
    """Name of the type of x, for error messages."""
    return type(x).__name__
assert 'int' == type_name(3)


# noinspection PyProtectedMember
Number._internal_setup()
assert Number.ONE.blocks == (1,)
