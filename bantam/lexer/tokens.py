"""
Token definitions for the Bantam Java lexer.

This module defines all token types supported by Bantam Java, including:
- Keywords (class, extends, while, cast, ...)
- Literals (integers, strings, booleans)
- Identifiers
- Operators, grouped by kind and told apart by spelling
- Punctuation and delimiters
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in Bantam Java.

    Operators are grouped into a handful of kinds (e.g. every comparison
    operator is COMPARE); the parser distinguishes them by lexeme.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of file

    # ========================================================================
    # Literals
    # ========================================================================
    INTCONST = auto()               # 42
    STRCONST = auto()               # "hello"
    BOOLEAN = auto()                # true, false

    # ========================================================================
    # Identifiers and Keywords
    # ========================================================================
    IDENTIFIER = auto()             # x, Foo, this, super, null

    CLASS = auto()                  # class
    EXTENDS = auto()                # extends
    FOR = auto()                    # for
    WHILE = auto()                  # while
    IF = auto()                     # if
    ELSE = auto()                   # else
    NEW = auto()                    # new
    RETURN = auto()                 # return
    VAR = auto()                    # var
    INSTANCEOF = auto()             # instanceof
    BREAK = auto()                  # break
    CAST = auto()                   # cast

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    BINARYLOGIC = auto()            # &&, ||
    PLUSMINUS = auto()              # +, -
    MULDIV = auto()                 # *, /, %
    COMPARE = auto()                # ==, !=, <, >, <=, >=
    UNARYINCR = auto()              # ++
    UNARYDECR = auto()              # --
    UNARYNOT = auto()               # !

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    DOT = auto()                    # .
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    COLON = auto()                  # :
    LCURLY = auto()                 # {
    RCURLY = auto()                 # }
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACKET = auto()               # [
    RBRACKET = auto()               # ]


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and for positioning AST nodes.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of file

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Bantam Java language.

    Contains the token type, lexeme (raw text), semantic value and
    source location. For string constants the value is the decoded
    contents; for every other kind it is the lexeme itself.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # Decoded value (string contents for STRCONST)
    location: SourceLocation        # Source location

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values() and self.type is not TokenType.BOOLEAN

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


LITERAL_TYPES = frozenset({
    TokenType.INTCONST,
    TokenType.STRCONST,
    TokenType.BOOLEAN,
})

OPERATOR_TYPES = frozenset({
    TokenType.ASSIGN,
    TokenType.BINARYLOGIC,
    TokenType.PLUSMINUS,
    TokenType.MULDIV,
    TokenType.COMPARE,
    TokenType.UNARYINCR,
    TokenType.UNARYDECR,
    TokenType.UNARYNOT,
})

# Reserved words, looked up after an identifier has been scanned
KEYWORDS = {
    "class": TokenType.CLASS,
    "extends": TokenType.EXTENDS,
    "for": TokenType.FOR,
    "while": TokenType.WHILE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "new": TokenType.NEW,
    "return": TokenType.RETURN,
    "var": TokenType.VAR,
    "instanceof": TokenType.INSTANCEOF,
    "break": TokenType.BREAK,
    "cast": TokenType.CAST,
    "true": TokenType.BOOLEAN,
    "false": TokenType.BOOLEAN,
}

OPERATORS = {
    # Assignment
    "=": TokenType.ASSIGN,

    # Logical
    "&&": TokenType.BINARYLOGIC,
    "||": TokenType.BINARYLOGIC,
    "!": TokenType.UNARYNOT,

    # Arithmetic
    "+": TokenType.PLUSMINUS,
    "-": TokenType.PLUSMINUS,
    "*": TokenType.MULDIV,
    "/": TokenType.MULDIV,
    "%": TokenType.MULDIV,
    "++": TokenType.UNARYINCR,
    "--": TokenType.UNARYDECR,

    # Comparison
    "==": TokenType.COMPARE,
    "!=": TokenType.COMPARE,
    "<": TokenType.COMPARE,
    ">": TokenType.COMPARE,
    "<=": TokenType.COMPARE,
    ">=": TokenType.COMPARE,

    # Punctuation
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    "{": TokenType.LCURLY,
    "}": TokenType.RCURLY,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}

# Longest operator spelling, used for maximal-munch matching
MAX_OPERATOR_LENGTH = max(len(op) for op in OPERATORS)

# Language limits
MAX_INT_CONST = 2 ** 31 - 1
MAX_STRING_LENGTH = 5000

# Escape sequences allowed inside string constants
ESCAPE_SEQUENCES = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
    "f": "\f",
}
