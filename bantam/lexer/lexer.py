"""
Bantam Java Lexer - turns source text into tokens, one at a time.

The parser pulls tokens on demand through scan(); tokenize() is kept for
tools and tests that want the whole stream at once. Lexical errors never
stop scanning: they are registered with the ErrorHandler and the lexer
carries on with the next character.
"""

import os
import logging
from typing import List, Optional, TextIO, Union

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, OPERATORS, MAX_OPERATOR_LENGTH,
    MAX_INT_CONST, MAX_STRING_LENGTH, ESCAPE_SEQUENCES
)
from .errors import (
    ErrorHandler, CompilationError, LexerError,
    create_illegal_character_error, create_unterminated_string_error,
    create_int_too_large_error, create_string_too_long_error,
    create_illegal_escape_error, create_unterminated_comment_error
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    Bantam Java lexical analyzer.

    Converts source code text into a stream of tokens terminated by EOF.
    Once the end of input is reached, every further scan() returns EOF.
    """

    def __init__(self, source: str, filename: str = "<unknown>",
                 error_handler: Optional[ErrorHandler] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
            error_handler: Sink for lexical errors (a private one is created if omitted)
        """
        # Line numbers count '\r\n', '\r' and '\n' alike
        self.source = source.replace("\r\n", "\n").replace("\r", "\n")
        self.filename = filename
        self.error_handler = error_handler if error_handler is not None else ErrorHandler()
        self.pos = 0
        self.line = 1
        self.column = 1

    @classmethod
    def from_file(cls, filepath: Union[str, "os.PathLike[str]"],
                  error_handler: Optional[ErrorHandler] = None) -> "Lexer":
        """
        Read a whole source file and build a lexer over it.

        Raises:
            CompilationError: If the file does not exist or cannot be read
        """
        filename = os.fspath(filepath)
        try:
            with open(filename, "r", encoding="utf-8") as f:
                source = f.read()
        except FileNotFoundError as e:
            raise CompilationError(f"File {filename} not found.") from e
        except (OSError, UnicodeDecodeError) as e:
            raise CompilationError(f"File {filename} could not be read.") from e

        return cls(source, filename, error_handler)

    @classmethod
    def from_stream(cls, stream: TextIO, filename: Optional[str] = None,
                    error_handler: Optional[ErrorHandler] = None) -> "Lexer":
        """Build a lexer over everything remaining in a text stream."""
        if filename is None:
            filename = getattr(stream, "name", "<stream>")
        try:
            source = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CompilationError(f"File {filename} could not be read.") from e

        return cls(source, str(filename), error_handler)

    def scan(self) -> Token:
        """Return the next token from the source."""
        while True:
            try:
                self._skip_whitespace_and_comments()

                if self.pos >= len(self.source):
                    return Token(TokenType.EOF, "", "", self._location())

                return self._next_token()

            except LexerError as e:
                e.register_with(self.error_handler)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the source code.

        Returns:
            List of tokens including the EOF token
        """
        tokens = []
        while True:
            token = self.scan()
            tokens.append(token)
            if token.type == TokenType.EOF:
                return tokens

    def _next_token(self) -> Token:
        """Get the next token; the current character is not whitespace."""
        start_pos = self.pos
        start_location = self._location()

        current_char = self.source[self.pos]

        # Integer constants
        if current_char.isdigit():
            return self._tokenize_integer(start_location)

        # Identifiers, keywords and boolean constants
        if self._is_identifier_start(current_char):
            return self._tokenize_identifier_or_keyword(start_location)

        # String constants
        if current_char == '"':
            return self._tokenize_string(start_location)

        # Operators and punctuation (longest match first)
        for op_len in range(MAX_OPERATOR_LENGTH, 0, -1):
            potential_op = self.source[start_pos:start_pos + op_len]
            if len(potential_op) == op_len and potential_op in OPERATORS:
                self._advance_by(op_len)
                return Token(OPERATORS[potential_op], potential_op, potential_op, start_location)

        # Single characters that aren't recognized
        self._advance()
        raise create_illegal_character_error(current_char, start_location)

    def _tokenize_integer(self, location: SourceLocation) -> Token:
        """Tokenize an integer constant; oversized values are reported but kept."""
        start_pos = self.pos
        while self.pos < len(self.source) and self.source[self.pos].isdigit():
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        if int(lexeme) > MAX_INT_CONST:
            create_int_too_large_error(lexeme, location).register_with(self.error_handler)

        return Token(TokenType.INTCONST, lexeme, lexeme, location)

    def _tokenize_identifier_or_keyword(self, location: SourceLocation) -> Token:
        start_pos = self.pos

        # First character is already validated as identifier start
        self._advance()
        while self.pos < len(self.source) and self._is_identifier_continue(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)

        return Token(token_type, lexeme, lexeme, location)

    def _tokenize_string(self, location: SourceLocation) -> Token:
        """
        Tokenize a string constant.

        The token value holds the decoded contents. Illegal escapes, overlong
        strings and missing closing quotes are reported and the (partial)
        constant is still returned so parsing can continue.
        """
        start_pos = self.pos
        self._advance()  # Skip opening quote

        value_parts = []
        terminated = False

        while self.pos < len(self.source):
            char = self.source[self.pos]
            if char == '"':
                self._advance()  # Skip closing quote
                terminated = True
                break
            if char == '\n':
                break
            if char == '\\':
                escape_location = self._location()
                self._advance()  # Skip backslash
                if self.pos >= len(self.source) or self.source[self.pos] == '\n':
                    create_illegal_escape_error("\\", escape_location).register_with(self.error_handler)
                    continue
                escape_char = self.source[self.pos]
                self._advance()
                if escape_char in ESCAPE_SEQUENCES:
                    value_parts.append(ESCAPE_SEQUENCES[escape_char])
                else:
                    create_illegal_escape_error(
                        "\\" + escape_char, escape_location
                    ).register_with(self.error_handler)
                continue

            value_parts.append(char)
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        value = ''.join(value_parts)

        if not terminated:
            create_unterminated_string_error(location).register_with(self.error_handler)
        elif len(value) > MAX_STRING_LENGTH:
            create_string_too_long_error(len(value), location).register_with(self.error_handler)

        return Token(TokenType.STRCONST, lexeme, value, location)

    def _is_identifier_start(self, char: str) -> bool:
        return char.isascii() and char.isalpha()

    def _is_identifier_continue(self, char: str) -> bool:
        return char.isascii() and (char.isalnum() or char == '_')

    def _skip_whitespace_and_comments(self):
        """Skip whitespace and comments."""
        while self.pos < len(self.source):
            # Skip whitespace
            if self.source[self.pos].isspace():
                self._advance()
                continue

            # Skip line comments //
            if self.source.startswith('//', self.pos):
                while self.pos < len(self.source) and self.source[self.pos] != '\n':
                    self._advance()
                continue

            # Skip block comments /* */
            if self.source.startswith('/*', self.pos):
                start_location = self._location()
                self._advance_by(2)
                while self.pos < len(self.source) and not self.source.startswith('*/', self.pos):
                    self._advance()
                if self.pos >= len(self.source):
                    raise create_unterminated_comment_error(start_location)
                self._advance_by(2)  # Skip closing */
                continue

            break

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        for _ in range(count):
            self._advance()


def tokenize_string(source: str, filename: str = "<string>",
                    error_handler: Optional[ErrorHandler] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        error_handler: Sink for lexical errors

    Returns:
        List of tokens ending with EOF
    """
    return Lexer(source, filename, error_handler).tokenize()


def tokenize_file(filepath: Union[str, "os.PathLike[str]"],
                  error_handler: Optional[ErrorHandler] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        CompilationError: If the file cannot be read
    """
    return Lexer.from_file(filepath, error_handler).tokenize()
