"""
blocknum - Arbitrary precision decimal arithmetic, a block of digits at a time.

Usage example:

    import blocknum

    third = blocknum.divide(blocknum.parse('1'), blocknum.parse('3'), precision=2)
    assert '0.333333333333333333' == blocknum.format_number(third)

Usage example:

    from blocknum import Number

    assert Number('1024') == Number(2) ** 10
    assert '0.3' == str(Number('0.1') + Number('0.2'))
"""

from .number import Number
from .number import DIGITS_PER_BLOCK
from .number import RADIX
from .number import PRECISION_DEFAULT
from .number import parse
from .number import format_number
from .number import trim_fraction
from .arithmetic import compare_magnitude
from .arithmetic import add
from .arithmetic import subtract
from .arithmetic import multiply
from .arithmetic import absolute_value
from .longhand import divide
from .longhand import sqrt
from .power import power

ParseError = Number.ParseError
DivisionByZeroError = Number.DivisionByZeroError
NegativeOperandError = Number.NegativeOperandError
UnsupportedOperandError = Number.UnsupportedOperandError

__all__ = [
    'Number',
    'DIGITS_PER_BLOCK',
    'RADIX',
    'PRECISION_DEFAULT',
    'parse',
    'format_number',
    'trim_fraction',
    'compare_magnitude',
    'add',
    'subtract',
    'multiply',
    'absolute_value',
    'divide',
    'sqrt',
    'power',
    'ParseError',
    'DivisionByZeroError',
    'NegativeOperandError',
    'UnsupportedOperandError',
]

from . import version
__version__ = version.__doc__
