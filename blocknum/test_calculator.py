"""
Testing blocknum calculator.py
"""

import io
import os
import tempfile
import unittest
from unittest import mock

from blocknum.calculator import Calculator, main


class CalculatorTests(unittest.TestCase):

    def setUp(self):
        self.calculator = Calculator()

    def assertOutput(self, expected_line, input_line):
        self.assertEqual(expected_line, self.calculator.execute(input_line))


class CalculatorExecuteTests(CalculatorTests):

    def test_operations(self):
        self.assertOutput('0.3', "ADD 0.1 0.2")
        self.assertOutput('-2', "SUB 3 5")
        self.assertOutput('999999998000000001', "MUL 999999999 999999999")
        self.assertOutput('2.5', "DIV 10 4")
        self.assertOutput('4', "SQRT 16")
        self.assertOutput('12.34', "ABS -12.340")
        self.assertOutput('1024', "POW 2 10")

    def test_case_insensitive(self):
        self.assertOutput('3', "add 1 2")
        self.assertOutput('3', "Sqrt 9")

    def test_whitespace(self):
        self.assertOutput('3', "  ADD\t1   2  \n")

    def test_blank(self):
        self.assertIsNone(self.calculator.execute(""))
        self.assertIsNone(self.calculator.execute("   \n"))

    def test_scenario_narrow_blocks(self):
        self.assertEqual('0.33333', Calculator(precision=5, width=1).execute("DIV 1 3"))

    def test_precision(self):
        self.assertOutput('0.' + '3' * 45, "DIV 1 3")
        self.assertEqual('0.' + '3' * 18, Calculator(precision=2).execute("DIV 1 3"))
        self.assertEqual('1.414213562', Calculator(precision=1).execute("SQRT 2"))

    def test_arithmetic_errors(self):
        self.assertOutput("Division by zero error!", "DIV 1 0")
        self.assertOutput("Division by zero error!", "DIV 1 -0.000")
        self.assertOutput("Division by zero error!", "POW 0 -1")
        self.assertOutput("Sqrt of negative number not supported!", "SQRT -4")
        self.assertOutput("Fractional power of negative base not supported!", "POW -4 0.5")

    def test_unknown_operation(self):
        with self.assertLogs('blocknum.calculator', level='WARNING'):
            self.assertOutput("Unknown operation: FOO", "FOO 1 2")
        with self.assertLogs('blocknum.calculator', level='WARNING'):
            self.assertOutput("Unknown operation: mod", "mod 7 2")

    def test_operand_count(self):
        with self.assertLogs('blocknum.calculator', level='WARNING'):
            self.assertOutput("ADD expects 2 operands", "ADD 1")
        with self.assertLogs('blocknum.calculator', level='WARNING'):
            self.assertOutput("ADD expects 2 operands", "ADD 1 2 3")
        with self.assertLogs('blocknum.calculator', level='WARNING'):
            self.assertOutput("SQRT expects 1 operand", "SQRT 1 2")
        with self.assertLogs('blocknum.calculator', level='WARNING'):
            self.assertOutput("ABS expects 1 operand", "ABS")

    def test_not_a_number(self):
        with self.assertLogs('blocknum.calculator', level='WARNING') as log:
            self.assertOutput("Not a number: 1.2.3", "ADD 1 1.2.3")
        self.assertIn('1.2.3', log.output[0])
        with self.assertLogs('blocknum.calculator', level='WARNING'):
            self.assertOutput("Not a number: abc", "SQRT abc")


class CalculatorRunTests(CalculatorTests):

    def test_run(self):
        input_stream = io.StringIO(
            "ADD 0.1 0.2\n"
            "\n"
            "DIV 1 0\n"
            "MUL 1.5 -2\n"
        )
        output_stream = io.StringIO()
        self.calculator.run(input_stream, output_stream)
        self.assertEqual("0.3\nDivision by zero error!\n-3\n", output_stream.getvalue())

    def test_bad_lines_do_not_stop(self):
        input_stream = io.StringIO(
            "FOO\n"
            "ADD x 1\n"
            "SQRT -1\n"
            "POW 2 -2\n"
        )
        output_stream = io.StringIO()
        with self.assertLogs('blocknum.calculator', level='WARNING'):
            self.calculator.run(input_stream, output_stream)
        self.assertEqual([
            "Unknown operation: FOO",
            "Not a number: x",
            "Sqrt of negative number not supported!",
            "0.25",
        ], output_stream.getvalue().splitlines())


class CalculatorMainTests(unittest.TestCase):

    def setUp(self):
        with tempfile.NamedTemporaryFile('w', suffix='.txt', delete=False) as f:
            f.write("ADD 0.1 0.2\nDIV 1 3\nSQRT -4\n")
            self.filename = f.name

    def tearDown(self):
        os.remove(self.filename)

    def test_main_file(self):
        with mock.patch('sys.stdout', new_callable=io.StringIO) as stdout:
            self.assertEqual(0, main(['--precision', '1', self.filename]))
        self.assertEqual([
            "0.3",
            "0.333333333",
            "Sqrt of negative number not supported!",
        ], stdout.getvalue().splitlines())

    def test_main_block_width(self):
        with mock.patch('sys.stdout', new_callable=io.StringIO) as stdout:
            self.assertEqual(0, main(['-p', '5', '-w', '1', self.filename]))
        self.assertEqual("0.33333", stdout.getvalue().splitlines()[1])

    def test_main_stdin(self):
        with mock.patch('sys.stdin', io.StringIO("POW 2 10\n")):
            with mock.patch('sys.stdout', new_callable=io.StringIO) as stdout:
                self.assertEqual(0, main([]))
        self.assertEqual("1024\n", stdout.getvalue())

    def test_main_missing_file(self):
        missing = self.filename + '.missing'
        with mock.patch('sys.stdout', new_callable=io.StringIO):
            with self.assertLogs('blocknum.calculator', level='ERROR'):
                self.assertEqual(1, main([missing]))

    def test_main_bad_options(self):
        with mock.patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                main(['--precision', '-1'])
            with self.assertRaises(SystemExit):
                main(['--block-width', '0'])


if __name__ == '__main__':
    unittest.main()
