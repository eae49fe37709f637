"""
Bantam Java Lexer Package

Implements the lexical analyzer (scanner) for Bantam Java together with the
diagnostic sink shared by every front-end pass.

Key Features:
- Pull-style scanning: one token per scan() call
- Line/column tracking for every token
- Lexical errors recorded in an ErrorHandler instead of aborting
- Missing or unreadable sources reported as CompilationError
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import CompilationError, Diagnostic, ErrorHandler, ErrorKind

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "tokenize_string",
    "tokenize_file",
    "CompilationError",
    "Diagnostic",
    "ErrorHandler",
    "ErrorKind",
]
