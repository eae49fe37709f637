"""
Bantam Java Parser Package

Implements an LL(1) recursive descent parser for Bantam Java.
Produces immutable Abstract Syntax Trees with source location information.

Key Features:
- One grammar method per production, single token lookahead
- Ten precedence levels with non-chaining comparisons
- Error recovery at statement, member and class boundaries
- One diagnostic per syntax error, reported in source order
"""

from .ast_nodes import *
from .parser import Parser, TokenCursor, parse_string, parse_file
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "TokenCursor", "parse_string", "parse_file",

    # AST nodes
    "ASTNode", "ASTVisitor", "Program", "Class", "Member", "Field", "Method", "Formal",
    "Stmt", "If", "While", "For", "Break", "Return", "Block", "Decl", "ExprStmt",
    "Expr", "Assign", "ArrayAssign", "BinaryExpr", "LogicOr", "LogicAnd",
    "CompEq", "CompNe", "CompLt", "CompGt", "CompLeq", "CompGeq", "Instanceof",
    "ArithPlus", "ArithMinus", "ArithTimes", "ArithDivide", "ArithModulus",
    "UnaryExpr", "Neg", "Not", "IncrDecr", "New", "Cast", "Var", "Array", "Dispatch",
    "ConstInt", "ConstString", "ConstBool",

    # Error handling
    "ParseError",
]
