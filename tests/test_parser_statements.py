"""
Test suite for statement parsing.

Tests cover:
- Blocks, including empty ones
- if/else with the dangling else bound to the nearest if
- while and for loops with optional header clauses
- var declarations, return, break and expression statements
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from bantam.lexer.errors import ErrorHandler
from bantam.parser.parser import parse_string
from bantam.parser.ast_nodes import (
    Block, If, While, For, Break, Return, Decl, ExprStmt,
    Assign, ArithPlus, CompLt, IncrDecr, Var, ConstInt, ConstBool,
)


class TestStatementParsing(unittest.TestCase):
    """Test cases for statements inside a method body."""

    def setUp(self):
        self.handler = ErrorHandler()

    def _parse_body(self, code: str):
        """Parse `code` as a method body and return its statements."""
        source = f"class A {{\n  void m() {{\n{code}\n  }}\n}}"
        program = parse_string(source, "<test>", self.handler)
        self.assertFalse(self.handler.has_errors(), [str(e) for e in self.handler.errors])
        return program.classes[0].members[0].body.stmts

    def test_empty_method_body(self):
        self.assertEqual(self._parse_body(""), ())

    def test_empty_block_is_empty_tuple(self):
        stmts = self._parse_body("{}")
        self.assertEqual(stmts, (Block(()),))
        self.assertEqual(stmts[0].stmts, ())

    def test_nested_blocks(self):
        self.assertEqual(
            self._parse_body("{ { break; } }"),
            (Block((Block((Break(),)),)),)
        )

    def test_if_without_else(self):
        self.assertEqual(
            self._parse_body("if (a) x = 1;"),
            (If(Var(None, "a"), ExprStmt(Assign("x", None, ConstInt("1")))),)
        )

    def test_if_with_else_blocks(self):
        (stmt,) = self._parse_body("if (a) { return; } else { break; }")
        self.assertEqual(stmt.then, Block((Return(),)))
        self.assertEqual(stmt.else_, Block((Break(),)))

    def test_dangling_else_binds_to_nearest_if(self):
        (stmt,) = self._parse_body("if (a) if (b) x = 1; else x = 2;")
        self.assertIsNone(stmt.else_)
        self.assertIsInstance(stmt.then, If)
        self.assertEqual(stmt.then.else_, ExprStmt(Assign("x", None, ConstInt("2"))))

    def test_while(self):
        self.assertEqual(
            self._parse_body("while (true) { break; }"),
            (While(ConstBool("true"), Block((Break(),))),)
        )

    def test_for_with_all_clauses(self):
        (stmt,) = self._parse_body("for (i = 0; i < n; i++) { }")
        self.assertEqual(
            stmt,
            For(
                Assign("i", None, ConstInt("0")),
                CompLt(Var(None, "i"), Var(None, "n")),
                IncrDecr(Var(None, "i"), is_postfix=True),
                Block(())
            )
        )

    def test_for_with_empty_clauses(self):
        self.assertEqual(self._parse_body("for (;;) break;"), (For(None, None, None, Break()),))

    def test_for_with_only_condition(self):
        (stmt,) = self._parse_body("for (; done;) x++;")
        self.assertIsNone(stmt.init)
        self.assertEqual(stmt.cond, Var(None, "done"))
        self.assertIsNone(stmt.update)

    def test_var_declaration(self):
        self.assertEqual(
            self._parse_body("var total = a + 1;"),
            (Decl("total", ArithPlus(Var(None, "a"), ConstInt("1"))),)
        )

    def test_return_with_and_without_value(self):
        self.assertEqual(
            self._parse_body("return; return x;"),
            (Return(None), Return(Var(None, "x")))
        )

    def test_statements_in_order(self):
        stmts = self._parse_body("var x = 1;\nx = x + 1;\nreturn x;")
        self.assertEqual([s.node_type for s in stmts], ["Decl", "ExprStmt", "Return"])
        self.assertEqual([s.line for s in stmts], [3, 4, 5])

    def test_statement_location_is_keyword(self):
        (stmt,) = self._parse_body("    while (x) x--;")
        self.assertEqual(stmt.location.line, 3)
        self.assertEqual(stmt.location.column, 5)


if __name__ == '__main__':
    unittest.main()
