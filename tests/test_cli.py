"""
Test suite for the bantam-parse command and logging setup.
"""

import unittest
import sys
import os
import io
import json
import logging
import tempfile
from contextlib import redirect_stdout

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from bantam.cli import main, summarize
from bantam.logging_config import setup_logging


class TestCommandLine(unittest.TestCase):
    """Test cases for bantam-parse."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()
        setup_logging(logging.WARNING)

    def _write(self, name: str, code: str) -> str:
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(code)
        return path

    def _run(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(list(argv))
        return status, out.getvalue()

    def test_summary_messages(self):
        self.assertEqual(summarize(0), "Parsing was successful!")
        self.assertEqual(summarize(1), "1 syntax error was found.")
        self.assertEqual(summarize(3), "3 syntax errors were found.")
        self.assertEqual(summarize(0, 1), "1 lexical error was found.")
        self.assertEqual(
            summarize(2, 3),
            "3 lexical errors were found.\n2 syntax errors were found."
        )

    def test_lexical_errors_are_not_counted_as_syntax_errors(self):
        path = self._write("Lex.btm", "class A { int x = 1 # ; }")
        status, output = self._run(path)
        self.assertEqual(status, 1)
        self.assertIn("1 lexical error was found.", output)
        self.assertNotIn("syntax error", output)

    def test_clean_file(self):
        path = self._write("Main.btm", "class Main { void main() { } }")
        status, output = self._run(path)
        self.assertEqual(status, 0)
        self.assertIn("Parsing was successful!", output)

    def test_file_with_errors(self):
        path = self._write("Bad.btm", "class A { void m() { x = ; y = 1 } }")
        status, output = self._run(path)
        self.assertEqual(status, 1)
        self.assertIn("2 syntax errors were found.", output)
        self.assertIn("Bad.btm:1", output)

    def test_missing_file_continues_with_next(self):
        missing = os.path.join(self.tmpdir.name, "Missing.btm")
        path = self._write("Main.btm", "class Main { }")
        status, output = self._run(missing, path)
        self.assertEqual(status, 1)
        self.assertIn(f"ERROR: File {missing} not found.", output)
        self.assertIn("Parsing was successful!", output)

    def test_dump_ast(self):
        path = self._write("Main.btm", "class Main { int x; }")
        status, output = self._run(path, "--dump-ast")
        self.assertEqual(status, 0)

        tree = json.loads(output[output.index("{"):])
        self.assertEqual(tree["kind"], "Program")
        self.assertEqual(tree["classes"][0]["members"][0]["name"], "x")

    def test_verbose_enables_debug_logging(self):
        path = self._write("Main.btm", "class Main { }")
        with redirect_stdout(io.StringIO()):
            with self.assertLogs("bantam.parser.parser", level="DEBUG") as logs:
                main([path, "--verbose"])
        self.assertTrue(any("Parsing" in line for line in logs.output))


class TestLoggingSetup(unittest.TestCase):

    def tearDown(self):
        setup_logging(logging.WARNING)

    def test_handlers_are_replaced(self):
        setup_logging(logging.INFO)
        logger = setup_logging(logging.DEBUG)
        self.assertEqual(logger.name, "bantam")
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_replaced_file_handler_is_closed(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(logging.INFO, os.path.join(tmpdir, "first.log"))
            (file_handler,) = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
            self.assertFalse(file_handler.stream.closed)

            setup_logging(logging.INFO)
            self.assertTrue(file_handler.stream is None or file_handler.stream.closed)
            self.assertNotIn(file_handler, logger.handlers)


if __name__ == '__main__':
    unittest.main()
