"""
Bantam Java Front End

Lexer and parser for Bantam Java, a small object-oriented teaching language
with Java-like syntax. Source text goes in, an immutable AST and a list of
diagnostics come out.

Architecture:
    bantam/
    ├── lexer/            # Tokens, lexical analysis, diagnostics
    ├── parser/           # AST nodes and the recursive descent parser
    ├── logging_config.py # Log handler setup
    └── cli.py            # bantam-parse command
"""

__version__ = "0.1.0"

from .lexer import Lexer, CompilationError, ErrorHandler, ErrorKind
from .parser import Parser, parse_string, parse_file

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "parse_string",
    "parse_file",

    # Diagnostics
    "CompilationError",
    "ErrorHandler",
    "ErrorKind",

    # Version info
    "__version__",
]
