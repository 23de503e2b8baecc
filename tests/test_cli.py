"""
Tests for the interpt command-line entry point.

Author: xwest
"""

import io
import unittest
import sys
import os
import tempfile
from contextlib import redirect_stdout
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from interpt import cli


class TestCli(unittest.TestCase):
    """Test cases for cli.main()."""

    def _main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            status = cli.main(argv)
        return status, out.getvalue()

    def test_eval_prints_program(self):
        status, output = self._main(["-e", "let x = 5 + 5 * 10;"])
        self.assertEqual(status, 0)
        self.assertEqual(output, "let x = (5 + (5 * 10));\n")

    def test_eval_errors(self):
        status, output = self._main(["-e", "let x 5;"])
        self.assertEqual(status, 1)
        self.assertIn("ERROR[P001]: expected next token to be ASSIGN, got INTEGER instead", output)
        self.assertIn("<eval>:1:7", output)

    def test_tokens(self):
        status, output = self._main(["--tokens", "-e", "!= 1"])
        self.assertEqual(status, 0)
        self.assertEqual(output.splitlines(), [
            "Token(type=NOT_EQUAL, literal='!=')",
            "Token(type=INTEGER, literal='1')",
            "Token(type=EOF, literal='')",
        ])

    def test_dump(self):
        status, output = self._main(["--dump", "-e", "-a"])
        self.assertEqual(status, 0)
        self.assertEqual(output.splitlines(), [
            "Program: (-a)",
            "  ExpressionStatement: (-a)",
            "    PrefixExpression: (-a)",
            "      Identifier: a",
        ])

    def test_tokens_logs_illegal_characters(self):
        with self.assertLogs("interpt.cli", level="WARNING") as logs:
            status, output = self._main(["--tokens", "-e", "a $"])
        self.assertEqual(status, 0)
        self.assertIn("Token(type=ILLEGAL, literal='$')", output)
        self.assertEqual(len(logs.records), 1)
        self.assertIn("Illegal character: '$'", logs.output[0])
        self.assertIn("<eval>:1:3", logs.output[0])

    def test_error_summary_logged_by_category(self):
        with self.assertLogs("interpt.cli", level="INFO") as logs:
            status, _ = self._main(["-e", "let x 5; let = 1; +2;"])
        self.assertEqual(status, 1)
        self.assertTrue(any("3 parse error(s): Unexpected token x2, No prefix parse function x1"
                            in line for line in logs.output))

    def test_deep_nesting_reports_error(self):
        status, output = self._main(["-e", "(" * 5000 + "1" + ")" * 5000])
        self.assertEqual(status, 1)
        self.assertIn("ERROR[P004]", output)

    def test_file(self):
        with tempfile.NamedTemporaryFile('w', suffix='.mk', delete=False, encoding='utf-8') as f:
            f.write("let add = fn(a, b) { a + b };\nadd(1, 2);\n")
            path = f.name
        try:
            status, output = self._main([path])
        finally:
            os.unlink(path)
        self.assertEqual(status, 0)
        self.assertEqual(output, "let add = fn(a, b) { (a + b) };add(1, 2)\n")

    def test_missing_file(self):
        status, _ = self._main([os.path.join(tempfile.gettempdir(), "does-not-exist.mk")])
        self.assertEqual(status, 1)

    def test_file_and_eval_conflict(self):
        with self.assertRaises(SystemExit) as ctx:
            self._main(["x.mk", "-e", "1"])
        self.assertEqual(ctx.exception.code, 2)

    def test_tokens_and_dump_conflict(self):
        with self.assertRaises(SystemExit) as ctx:
            self._main(["--tokens", "--dump", "-e", "1"])
        self.assertEqual(ctx.exception.code, 2)

    def test_no_source_starts_repl(self):
        with mock.patch.object(cli.repl, "start") as start:
            status, _ = self._main(["--repl-mode", "ast"])
        self.assertEqual(status, 0)
        start.assert_called_once()
        self.assertEqual(start.call_args.kwargs["mode"], "ast")


if __name__ == '__main__':
    unittest.main()
