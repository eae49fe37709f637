"""
Diagnostics and error handling shared by the Bantam Java lexer and parser.

Provides the diagnostic record, the diagnostic sink (ErrorHandler) that
collects lexical and syntax errors in source order, the fatal
CompilationError used for environment failures, and the helpers the lexer
uses to build its own errors.
"""

import logging
from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, OPERATORS

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Category of a recorded diagnostic."""
    LEX_ERROR = "lex error"
    PARSE_ERROR = "parse error"


@dataclass
class Diagnostic:
    """A single recorded error with enough context to locate the defect."""
    kind: ErrorKind
    filename: Optional[str]
    location: Optional[SourceLocation]
    message: str
    severity: str = "error"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    @property
    def line(self) -> int:
        return self.location.line if self.location else 0

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix} ({self.kind.value}): {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"
        elif self.filename:
            result += f"  --> {self.filename}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ErrorHandler:
    """
    Diagnostic sink for one or more compilation passes.

    register() never raises; callers inspect `errors` once the pass is done.
    """

    def __init__(self):
        self.errors: List[Diagnostic] = []

    def register(
        self,
        kind: ErrorKind,
        filename: Optional[str],
        location: Optional[SourceLocation],
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ) -> Diagnostic:
        """Record a diagnostic and return it."""
        if filename is None and location is not None:
            filename = location.filename
        diagnostic = Diagnostic(
            kind=kind,
            filename=filename,
            location=location,
            message=message,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.errors.append(diagnostic)
        return diagnostic

    def has_errors(self) -> bool:
        """Check if any diagnostics were recorded."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        return len(self.errors)

    def errors_of_kind(self, kind: ErrorKind) -> List[Diagnostic]:
        return [e for e in self.errors if e.kind is kind]

    def clear(self):
        self.errors.clear()


class CompilationError(Exception):
    """
    Fatal environment failure (missing or unreadable source).

    Raised before any token is read; it is never recorded as a diagnostic.
    """


class LexerError(Exception):
    """
    Raised inside the lexer when a lexical error is found.

    The lexer catches it, registers its diagnostic and keeps scanning.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.location = location
        self.code = code
        self.help_text = help_text
        self.suggestions = suggestions

    def register_with(self, handler: ErrorHandler) -> Diagnostic:
        logger.debug("Lexical error at %s: %s", self.location, self.message)
        return handler.register(
            ErrorKind.LEX_ERROR,
            self.location.filename,
            self.location,
            self.message,
            code=self.code,
            help_text=self.help_text,
            suggestions=self.suggestions
        )

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


class ErrorRecovery:
    """Suggestions attached to lexical errors."""

    @staticmethod
    def suggest_operator_corrections(invalid_char: str) -> List[str]:
        """Suggest operators that start with an unrecognized character."""
        return sorted(op for op in OPERATORS if len(op) > 1 and op.startswith(invalid_char))[:3]


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Illegal character",
    "L002": "Unterminated string constant",
    "L003": "Integer constant too large",
    "L004": "String constant too long",
    "L005": "Illegal escape sequence",
    "L006": "Unterminated block comment",
}


# Helper functions for creating common errors

def create_illegal_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that cannot start any token."""
    suggestions = [f"Did you mean '{op}'?" for op in ErrorRecovery.suggest_operator_corrections(char)]
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Bantam Java source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Illegal character: '{char}'",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    return LexerError(
        message="Unterminated string constant",
        location=location,
        code="L002",
        help_text="String constants must be closed with '\"' on the same line.",
        suggestions=["Add a closing '\"'", "Use '\\n' instead of a line break"]
    )


def create_int_too_large_error(lexeme: str, location: SourceLocation) -> LexerError:
    return LexerError(
        message=f"Integer constant too large: {lexeme}",
        location=location,
        code="L003",
        help_text="Integer constants must not exceed 2147483647."
    )


def create_string_too_long_error(length: int, location: SourceLocation) -> LexerError:
    return LexerError(
        message=f"String constant too long ({length} characters)",
        location=location,
        code="L004",
        help_text="String constants are limited to 5000 characters."
    )


def create_illegal_escape_error(sequence: str, location: SourceLocation) -> LexerError:
    return LexerError(
        message=f"Illegal escape sequence: '{sequence}'",
        location=location,
        code="L005",
        help_text="Allowed escapes are \\n, \\t, \\\", \\\\ and \\f."
    )


def create_unterminated_comment_error(location: SourceLocation) -> LexerError:
    return LexerError(
        message="Unterminated block comment",
        location=location,
        code="L006",
        suggestions=["Close the comment with '*/'"]
    )
