"""
Line-oriented calculator.  Each line is an operation keyword and its decimal operands.
Each line gets one line back, a result or an error message.

    ADD 0.1 0.2
    0.3
    DIV 1 0
    Division by zero error!

Usage:

    python -m blocknum [--precision P] [--block-width W] [--verbose] [FILE ...]
"""

import argparse
import logging
import sys

from .arithmetic import absolute_value, add, multiply, subtract
from .longhand import divide, sqrt
from .number import DIGITS_PER_BLOCK, Number, PRECISION_DEFAULT, format_number, parse
from .power import power


logger = logging.getLogger(__name__)


ERROR_MESSAGES = {
    Number.DivisionByZeroError:     "Division by zero error!",
    Number.NegativeOperandError:    "Sqrt of negative number not supported!",
    Number.UnsupportedOperandError: "Fractional power of negative base not supported!",
}


class Calculator(object):
    """
    Dispatch operation lines to the arithmetic functions.

    precision - fractional blocks for DIV, SQRT, POW
    width - decimal digits per block, for every operand
    """

    def __init__(self, precision=PRECISION_DEFAULT, width=DIGITS_PER_BLOCK):
        self.precision = precision
        self.width = width
        self.operations = {
            'ADD':  add,
            'SUB':  subtract,
            'MUL':  multiply,
            'DIV':  lambda a, b: divide(a, b, self.precision),
            'SQRT': lambda a: sqrt(a, self.precision),
            'ABS':  absolute_value,
            'POW':  lambda a, b: power(a, b, self.precision),
        }
        self.arities = {'SQRT': 1, 'ABS': 1}

    def execute(self, line):
        """Perform one operation line.  Return the output line, or None for a blank line."""
        words = line.split()
        if not words:
            return None
        keyword = words[0].upper()
        operand_texts = words[1:]
        try:
            operation = self.operations[keyword]
        except KeyError:
            logger.warning("Unknown operation %r", words[0])
            return "Unknown operation: {}".format(words[0])

        arity = self.arities.get(keyword, 2)
        if len(operand_texts) != arity:
            logger.warning("%s given %d operands:  %r", keyword, len(operand_texts), line)
            return "{keyword} expects {arity} operand{s}".format(
                keyword=keyword,
                arity=arity,
                s='' if arity == 1 else 's',
            )

        operands = []
        for text in operand_texts:
            try:
                operands.append(parse(text, self.width))
            except Number.ParseError:
                logger.warning("%s operand is not a number:  %r", keyword, text)
                return "Not a number: {}".format(text)

        try:
            result = operation(*operands)
        except tuple(ERROR_MESSAGES) as e:
            logger.debug("%s failed:  %s", keyword, e)
            return ERROR_MESSAGES[type(e)]
        return format_number(result)

    def run(self, input_stream, output_stream):
        """Process every line of a file-like object.  A bad line does not stop the rest."""
        for line in input_stream:
            output_line = self.execute(line)
            if output_line is not None:
                output_stream.write(output_line + '\n')


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='blocknum',
        description="Arbitrary precision decimal calculator.  Lines like:  ADD 1.5 -2",
    )
    parser.add_argument('files', nargs='*', default=['-'], help="operation files, - for stdin")
    parser.add_argument('-p', '--precision', type=int, default=PRECISION_DEFAULT,
                        help="fractional blocks for DIV, SQRT, POW (default %(default)s)")
    parser.add_argument('-w', '--block-width', type=int, default=DIGITS_PER_BLOCK,
                        help="decimal digits per block (default %(default)s)")
    parser.add_argument('-v', '--verbose', action='store_true', help="debug logging")
    args = parser.parse_args(argv)

    if args.precision < 0:
        parser.error("precision cannot be negative")
    if args.block_width < 1:
        parser.error("block width must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    calculator = Calculator(precision=args.precision, width=args.block_width)
    for filename in args.files:
        if filename == '-':
            calculator.run(sys.stdin, sys.stdout)
        else:
            try:
                with open(filename, 'r') as input_file:
                    calculator.run(input_file, sys.stdout)
            except IOError as e:
                logger.error("Cannot read %s:  %s", filename, e)
                return 1
    return 0
