"""
Error handling for the Bantam Java parser.

A syntax error is raised inside the grammar functions as a ParseError and
caught by the nearest list-level production (statement list, member list or
class list), which registers it with the ErrorHandler and resynchronizes at
one of the boundary token sets defined here.
"""

from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic, ErrorHandler, ErrorKind


class ParseError(Exception):
    """
    Syntax error raised by a grammar function.

    Never escapes Parser.parse(); it is converted into exactly one
    diagnostic by the production that catches it.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.location = location
        self.token = token
        self.code = code
        self.help_text = help_text
        self.suggestions = suggestions

    def register_with(self, handler: ErrorHandler, filename: Optional[str]) -> Diagnostic:
        return handler.register(
            ErrorKind.PARSE_ERROR,
            filename,
            self.location,
            self.message,
            code=self.code,
            help_text=self.help_text,
            suggestions=self.suggestions
        )

    def __str__(self) -> str:
        if self.location is None:
            return self.message
        return f"{self.location}: {self.message}"


class SyntaxErrorRecovery:
    """Token sets used to resynchronize after a syntax error."""

    # Tokens that begin a statement; statement recovery stops before them
    STATEMENT_STARTS = {
        TokenType.IF,
        TokenType.WHILE,
        TokenType.FOR,
        TokenType.RETURN,
        TokenType.BREAK,
        TokenType.VAR,
        TokenType.LCURLY,
    }

    # Member recovery, and the statement and member lists, stop before these;
    # a 'class' keyword inside a class means its closing '}' is missing
    MEMBER_BOUNDARIES = {TokenType.RCURLY, TokenType.CLASS, TokenType.EOF}

    # Statement recovery stops before these and leaves them to the caller
    STATEMENT_BOUNDARIES = STATEMENT_STARTS | MEMBER_BOUNDARIES

    # Class recovery stops before these
    CLASS_BOUNDARIES = {TokenType.CLASS, TokenType.EOF}

    @staticmethod
    def suggest_missing_token(expected: Union[TokenType, str]) -> List[str]:
        """Suggest what token might be missing."""
        token_suggestions = {
            TokenType.SEMICOLON: ["Add a semicolon ';' to end the statement"],
            TokenType.RPAREN: ["Add a closing parenthesis ')'"],
            TokenType.RBRACKET: ["Add a closing bracket ']'"],
            TokenType.RCURLY: ["Add a closing brace '}'"],
            TokenType.LCURLY: ["Add an opening brace '{' to start a block"],
            TokenType.LPAREN: ["Add an opening parenthesis '('"],
            TokenType.ASSIGN: ["Add '=' followed by an initial value"],
            TokenType.COMMA: ["Separate the items with a comma ','"],
            TokenType.IDENTIFIER: ["Use a name made of letters, digits and '_'"],
        }

        return list(token_suggestions.get(expected, []))


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Expected token not found",
    "P005": "Invalid expression",
    "P006": "Invalid assignment target",
    "P007": "Nesting too deep",
}

TOKEN_DESCRIPTIONS = {
    TokenType.EOF: "end of input",
    TokenType.INTCONST: "integer constant",
    TokenType.STRCONST: "string constant",
    TokenType.BOOLEAN: "boolean constant",
    TokenType.IDENTIFIER: "identifier",
    TokenType.SEMICOLON: "';'",
    TokenType.COMMA: "','",
    TokenType.DOT: "'.'",
    TokenType.COLON: "':'",
    TokenType.LCURLY: "'{'",
    TokenType.RCURLY: "'}'",
    TokenType.LPAREN: "'('",
    TokenType.RPAREN: "')'",
    TokenType.LBRACKET: "'['",
    TokenType.RBRACKET: "']'",
    TokenType.ASSIGN: "'='",
}


def describe_expected(expected: Union[TokenType, str]) -> str:
    if isinstance(expected, TokenType):
        return TOKEN_DESCRIPTIONS.get(expected, f"'{expected.name.lower()}'")
    return expected


def describe_found(found: Token) -> str:
    if found.type == TokenType.EOF:
        return "end of input"
    return f"'{found.lexeme}'"


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: Union[TokenType, str], found: Token,
                                  code: str = "P001") -> ParseError:
    """Create an error for an unexpected token."""
    expected_str = describe_expected(expected)
    found_str = describe_found(found)

    return ParseError(
        message=f"Expected {expected_str}, found {found_str}",
        location=found.location,
        token=found,
        code=code,
        help_text=f"The parser expected to see {expected_str} at this position, but found {found_str} instead.",
        suggestions=SyntaxErrorRecovery.suggest_missing_token(expected)
    )


def create_invalid_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start a primary expression."""
    found_str = describe_found(found)
    return ParseError(
        message=f"Invalid expression: {found_str} cannot start an expression",
        location=found.location,
        token=found,
        code="P005",
        help_text="Expected a literal, a name, 'this', 'super', 'new', 'cast' or '('.",
        suggestions=["Check the expression syntax", "Ensure all operators have operands"]
    )


def create_invalid_assignment_target_error(location: Optional[SourceLocation],
                                           token: Optional[Token] = None) -> ParseError:
    return ParseError(
        message="Invalid assignment target",
        location=location,
        token=token,
        code="P006",
        help_text="Only a variable or an array element can appear left of '='.",
    )


def create_nesting_too_deep_error(found: Token) -> ParseError:
    """Create an error for input nested deeper than the parser can follow."""
    return ParseError(
        message="Expression nested too deeply",
        location=found.location,
        token=found,
        code="P007",
        help_text="Split the nested expression or statement into smaller parts.",
    )
