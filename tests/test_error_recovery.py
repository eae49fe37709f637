"""
Test suite for syntax error reporting and recovery.

Tests cover:
- One diagnostic per syntax error, in source order
- Non-chaining comparison operators
- Recovery at statement, member and class boundaries
- Termination on malformed input
- Environment failures raised before any parsing
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from bantam.lexer.errors import ErrorHandler, ErrorKind, CompilationError
from bantam.parser.parser import Parser, parse_string
from bantam.parser.ast_nodes import (
    Field, Method, ExprStmt, Return, Assign, Var, ConstInt,
)


class TestErrorRecovery(unittest.TestCase):
    """Test cases for diagnostics and resynchronization."""

    def setUp(self):
        self.handler = ErrorHandler()

    def _parse(self, code: str):
        return parse_string(code, "<test>", self.handler)

    def _parse_body(self, code: str):
        source = f"class A {{\n  void m() {{\n{code}\n  }}\n}}"
        program = self._parse(source)
        return program.classes[0].members[0].body.stmts

    def _messages(self):
        return [e.message for e in self.handler.errors]

    def test_equality_does_not_chain(self):
        stmts = self._parse_body("a == b == c;")
        self.assertEqual(self.handler.error_count(), 1)
        self.assertEqual(self._messages(), ["Expected ';', found '=='"])
        self.assertEqual(stmts, ())

    def test_relational_does_not_chain(self):
        self._parse_body("a < b < c;")
        self.assertEqual(self.handler.error_count(), 1)

    def test_two_errors_in_source_order(self):
        stmts = self._parse_body("x = ;\ny = 1;\nz = 2 +;")
        self.assertEqual([e.line for e in self.handler.errors], [3, 5])
        self.assertTrue(all(e.kind is ErrorKind.PARSE_ERROR for e in self.handler.errors))
        self.assertEqual([e.code for e in self.handler.errors], ["P005", "P005"])
        self.assertEqual(stmts, (ExprStmt(Assign("y", None, ConstInt("1"))),))

    def test_diagnostic_carries_file_and_line(self):
        parse_string("class A {\n  int x = ;\n}", "Main.btm", self.handler)
        (error,) = self.handler.errors
        self.assertEqual(error.filename, "Main.btm")
        self.assertEqual(error.line, 2)
        self.assertIn("Main.btm:2", str(error))

    def test_statement_recovery_stops_before_keyword(self):
        stmts = self._parse_body("x = 1\nreturn x;")
        self.assertEqual(self._messages(), ["Expected ';', found 'return'"])
        self.assertEqual(stmts, (Return(Var(None, "x")),))

    def test_empty_statement_is_skipped(self):
        stmts = self._parse_body("; y = 1;")
        self.assertEqual(self.handler.error_count(), 1)
        self.assertEqual(stmts, (ExprStmt(Assign("y", None, ConstInt("1"))),))

    def test_invalid_assignment_target(self):
        stmts = self._parse_body("1 = x;\nf() = 3;\nok = 2;")
        self.assertEqual([e.code for e in self.handler.errors], ["P006", "P006"])
        self.assertEqual(self._messages()[0], "Invalid assignment target")
        self.assertEqual(len(stmts), 1)

    def test_var_requires_initializer(self):
        self._parse_body("var x;")
        self.assertEqual(self._messages(), ["Expected '=', found ';'"])

    def test_new_requires_parens_or_brackets(self):
        self._parse_body("x = new Foo;")
        self.assertEqual(self._messages(), ["Expected '(' or '[', found ';'"])

    def test_member_recovery_skips_to_semicolon(self):
        program = self._parse("class A {\n  int 5;\n  int y;\n}")
        self.assertEqual(self.handler.error_count(), 1)
        self.assertEqual(program.classes[0].members, (Field("int", "y"),))

    def test_member_recovery_skips_method_body(self):
        program = self._parse(
            "class A {\n"
            "  int f(int a b) { if (a) { return a; } return b; }\n"
            "  int g() { return 1; }\n"
            "}"
        )
        self.assertEqual(self._messages(), ["Expected ')', found 'b'"])
        (member,) = program.classes[0].members
        self.assertIsInstance(member, Method)
        self.assertEqual(member.name, "g")

    def test_class_recovery(self):
        program = self._parse("class { int x; }\nclass B { }")
        self.assertEqual(self._messages(), ["Expected identifier, found '{'"])
        self.assertEqual([c.name for c in program.classes], ["B"])

    def test_missing_closing_brace_reported_once(self):
        program = self._parse("class A { void m() { x = 1;")
        self.assertEqual(self._messages(), ["Expected '}', found end of input"])
        self.assertEqual(program.classes, ())

    def test_missing_class_brace_keeps_next_class(self):
        program = self._parse(
            "class A {\n"
            "  int x;\n"
            "\n"
            "class B {\n"
            "  void m() { y = ; }\n"
            "  int z = ;\n"
            "}"
        )
        self.assertEqual(
            [(e.line, e.message) for e in self.handler.errors],
            [
                (4, "Expected '}', found 'class'"),
                (5, "Invalid expression: ';' cannot start an expression"),
                (6, "Invalid expression: ';' cannot start an expression"),
            ]
        )
        self.assertEqual([c.name for c in program.classes], ["B"])

    def test_missing_method_brace_keeps_next_class(self):
        program = self._parse(
            "class A {\n"
            "  void m() { x = 1;\n"
            "class B {\n"
            "  int y = ;\n"
            "}"
        )
        self.assertEqual(
            [(e.line, e.message) for e in self.handler.errors],
            [
                (3, "Expected '}', found 'class'"),
                (4, "Invalid expression: ';' cannot start an expression"),
            ]
        )
        self.assertEqual([c.name for c in program.classes], ["B"])

    def test_member_recovery_stops_before_next_class(self):
        program = self._parse("class A { int f( { x; \nclass B { int y; }")
        self.assertEqual([c.name for c in program.classes], ["B"])
        self.assertEqual(program.classes[0].members, (Field("int", "y"),))

    def test_deeply_nested_parentheses(self):
        depth = 200
        stmts = self._parse_body(
            "x = " + "(" * depth + "1" + ")" * depth + ";\ny = 2;"
        )
        self.assertEqual(self.handler.error_count(), 1)
        self.assertEqual(self.handler.errors[0].code, "P007")
        self.assertEqual(self.handler.errors[0].message, "Expression nested too deeply")
        self.assertEqual(stmts, (ExprStmt(Assign("y", None, ConstInt("2"))),))

    def test_long_prefix_run(self):
        stmts = self._parse_body("x = " + "!" * 3000 + "b;\nreturn x;")
        self.assertEqual([e.code for e in self.handler.errors], ["P007"])
        self.assertEqual(stmts, (Return(Var(None, "x")),))

    def test_moderate_nesting_parses(self):
        stmts = self._parse_body("x = " + "(" * 20 + "1" + ")" * 20 + ";")
        self.assertFalse(self.handler.has_errors())
        self.assertEqual(stmts, (ExprStmt(Assign("x", None, ConstInt("1"))),))

    def test_garbage_terminates(self):
        program = self._parse("}}} ;; ) class")
        self.assertEqual(
            self._messages(),
            ["Expected 'class', found '}'", "Expected identifier, found end of input"]
        )
        self.assertEqual(program.classes, ())

    def test_errors_in_several_classes(self):
        program = self._parse(
            "class A { void m() { x = ; } }\n"
            "class B { void n() { y = 1 } }\n"
        )
        self.assertEqual([e.line for e in self.handler.errors], [1, 2])
        self.assertEqual([c.name for c in program.classes], ["A", "B"])

    def test_lexical_and_syntax_errors_share_handler(self):
        program = self._parse("class A { int x = 1 # ; int y = ; }")
        self.assertEqual(
            [e.kind for e in self.handler.errors],
            [ErrorKind.LEX_ERROR, ErrorKind.PARSE_ERROR]
        )
        self.assertEqual(program.classes[0].members, (Field("int", "x", ConstInt("1")),))

    def test_missing_file_raises_before_parsing(self):
        with self.assertRaises(CompilationError) as ctx:
            Parser(self.handler).parse(os.path.join(project_root, "does_not_exist.btm"))
        self.assertIn("not found", str(ctx.exception))
        self.assertEqual(self.handler.error_count(), 0)

    def test_directory_is_unreadable(self):
        with self.assertRaises(CompilationError):
            Parser(self.handler).parse(project_root)
        self.assertEqual(self.handler.error_count(), 0)


if __name__ == '__main__':
    unittest.main()
