"""
Bantam Java Recursive Descent Parser

One method per grammar production, composed top-down:
Program -> Class -> Member -> Statement -> Expression precedence chain -> Primary.

The parser holds exactly one lookahead token. On entry to every grammar
method the current token is the first token of the construct; on return it
is the first token after the construct.

Syntax errors are raised as ParseError and caught by the enclosing list
production (statements of a block, members of a class, classes of the
program), which records one diagnostic and resynchronizes so the rest of the
file is still checked.
"""

import os
import logging
from typing import Callable, Dict, List, Optional, Type, Union

from ..lexer.tokens import Token, TokenType
from ..lexer.lexer import Lexer
from ..lexer.errors import ErrorHandler
from .ast_nodes import (
    Program, Class, Member, Field, Method, Formal,
    Stmt, If, While, For, Break, Return, Block, Decl, ExprStmt,
    Expr, Assign, ArrayAssign, BinaryExpr, LogicOr, LogicAnd,
    CompEq, CompNe, CompLt, CompGt, CompLeq, CompGeq, Instanceof,
    ArithPlus, ArithMinus, ArithTimes, ArithDivide, ArithModulus,
    Neg, Not, IncrDecr, New, Cast, Var, Array, Dispatch,
    ConstInt, ConstString, ConstBool,
)
from .errors import (
    ParseError, SyntaxErrorRecovery, create_unexpected_token_error,
    create_invalid_expression_error, create_invalid_assignment_target_error,
    create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)


# Operator spelling -> node class, one table per precedence level
EQUALITY_OPERATORS: Dict[str, Type[BinaryExpr]] = {
    "==": CompEq,
    "!=": CompNe,
}

RELATIONAL_OPERATORS: Dict[str, Type[BinaryExpr]] = {
    "<": CompLt,
    ">": CompGt,
    "<=": CompLeq,
    ">=": CompGeq,
}

ADDITIVE_OPERATORS: Dict[str, Type[BinaryExpr]] = {
    "+": ArithPlus,
    "-": ArithMinus,
}

MULTIPLICATIVE_OPERATORS: Dict[str, Type[BinaryExpr]] = {
    "*": ArithTimes,
    "/": ArithDivide,
    "%": ArithModulus,
}

# Identifiers that qualify a member access
RECEIVER_QUALIFIERS = ("this", "super")


class TokenCursor:
    """
    The single lookahead token over a token source.

    The source is anything with a scan() method returning the next Token
    (normally a Lexer). Once EOF is current the cursor stops pulling.
    """

    def __init__(self, source):
        self.source = source
        self.current: Token = source.scan()
        self.consumed = 0

    def advance(self) -> Token:
        """Consume the current token and return it."""
        token = self.current
        if token.type != TokenType.EOF:
            self.current = self.source.scan()
            self.consumed += 1
        return token


class Parser:
    """
    Bantam Java parser.

    Usage:
        handler = ErrorHandler()
        program = Parser(handler).parse("Main.btm")
        if handler.has_errors(): ...
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None):
        """
        Initialize the parser.

        Args:
            error_handler: Sink for lexical and syntax errors
        """
        self.error_handler = error_handler if error_handler is not None else ErrorHandler()
        self.filename: Optional[str] = None
        self._cursor: Optional[TokenCursor] = None
        self._last_reported: Optional[Token] = None

        self._init_parsing_tables()

    def _init_parsing_tables(self):
        """Statement dispatch on the kind of the first token."""
        self.statement_parsers: Dict[TokenType, Callable[[], Stmt]] = {
            TokenType.IF: self._parse_if,
            TokenType.LCURLY: self._parse_block,
            TokenType.VAR: self._parse_decl,
            TokenType.RETURN: self._parse_return,
            TokenType.FOR: self._parse_for,
            TokenType.WHILE: self._parse_while,
            TokenType.BREAK: self._parse_break,
        }

    def parse(self, source, filename: Optional[str] = None) -> Program:
        """
        Parse a source file or text stream into an AST.

        Args:
            source: Path to a source file, or a text stream with read()
            filename: Name used in diagnostics (defaults to the path / stream name)

        Returns:
            Program AST node; syntax errors are in self.error_handler

        Raises:
            CompilationError: If the source is missing or unreadable. Nothing
                is parsed and no diagnostic is recorded in that case.
        """
        if hasattr(source, "read"):
            lexer = Lexer.from_stream(source, filename, self.error_handler)
        else:
            lexer = Lexer.from_file(source, self.error_handler)
            if filename is not None:
                lexer.filename = filename

        return self.parse_tokens(lexer, lexer.filename)

    def parse_tokens(self, token_source, filename: str = "<tokens>") -> Program:
        """Parse everything a token source produces, up to EOF."""
        self.filename = filename
        self._last_reported = None
        errors_before = self.error_handler.error_count()
        logger.debug("Parsing %s", filename)

        self._cursor = TokenCursor(token_source)
        try:
            program = self._parse_program()
        finally:
            self._cursor = None

        logger.debug(
            "Parsed %s: %d classes, %d new diagnostics",
            filename, len(program.classes), self.error_handler.error_count() - errors_before
        )
        return program

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def _parse_program(self) -> Program:
        """<Program> ::= <Class> | <Class> <Program>"""
        location = self._peek().location
        classes: List[Class] = []

        while not self._check(TokenType.EOF):
            start = self._cursor.consumed
            try:
                classes.append(self._parse_class())
            except (ParseError, RecursionError) as e:
                self._report(e)
                self._synchronize_class(start)

        return Program(classes, location=location)

    def _parse_class(self) -> Class:
        """
        <Class> ::= CLASS <Identifier> <ExtendsClause> { <MemberList> }
        <ExtendsClause> ::= EXTENDS <Identifier> | EMPTY
        """
        start_token = self._consume(TokenType.CLASS)
        name = self._parse_identifier()

        parent = None
        if self._match(TokenType.EXTENDS):
            parent = self._parse_identifier()

        self._consume(TokenType.LCURLY)
        members: List[Member] = []

        while self._peek().type not in SyntaxErrorRecovery.MEMBER_BOUNDARIES:
            start = self._cursor.consumed
            try:
                members.append(self._parse_member())
            except (ParseError, RecursionError) as e:
                self._report(e)
                self._synchronize_member(start)

        self._consume(TokenType.RCURLY)

        return Class(name, parent, members, filename=self.filename, location=start_token.location)

    def _parse_member(self) -> Member:
        """
        <Member> ::= <Field> | <Method>
        <Method> ::= <Type> <Identifier> ( <Parameters> ) <Block>
        <Field> ::= <Type> <Identifier> <InitialValue> ;
        """
        location = self._peek().location
        member_type = self._parse_type()
        name = self._parse_identifier()

        # The token after the name is the only decision point
        if self._match(TokenType.LPAREN):
            params = self._parse_formals()
            self._consume(TokenType.RPAREN)
            body = self._parse_block()
            return Method(member_type, name, params, body, location=location)

        init = None
        if self._match(TokenType.ASSIGN):
            init = self._parse_expression()
        self._consume(TokenType.SEMICOLON)

        return Field(member_type, name, init, location=location)

    def _parse_formals(self) -> List[Formal]:
        """
        <Parameters>  ::= EMPTY | <Formal> <MoreFormals>
        <MoreFormals> ::= EMPTY | , <Formal> <MoreFormals>
        """
        params: List[Formal] = []

        if not self._check(TokenType.RPAREN):
            params.append(self._parse_formal())
            while self._match(TokenType.COMMA):
                params.append(self._parse_formal())

        return params

    def _parse_formal(self) -> Formal:
        """<Formal> ::= <Type> <Identifier>"""
        location = self._peek().location
        formal_type = self._parse_type()
        name = self._parse_identifier()
        return Formal(formal_type, name, location=location)

    def _parse_type(self) -> str:
        """<Type> ::= <Identifier> | <Identifier> [ ]"""
        name = self._parse_identifier()
        if self._match(TokenType.LBRACKET):
            self._consume(TokenType.RBRACKET)
            return name + "[]"
        return name

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_statement(self) -> Stmt:
        """
        <Stmt> ::= <WhileStmt> | <ReturnStmt> | <BreakStmt> | <DeclStmt>
                 | <ExpressionStmt> | <ForStmt> | <BlockStmt> | <IfStmt>
        """
        parse_fn = self.statement_parsers.get(self._peek().type, self._parse_expression_stmt)
        return parse_fn()

    def _parse_block(self) -> Block:
        """<BlockStmt> ::= { <Body> }, <Body> ::= EMPTY | <Stmt> <Body>"""
        start_token = self._consume(TokenType.LCURLY)
        stmts: List[Stmt] = []

        while self._peek().type not in SyntaxErrorRecovery.MEMBER_BOUNDARIES:
            start = self._cursor.consumed
            try:
                stmts.append(self._parse_statement())
            except (ParseError, RecursionError) as e:
                self._report(e)
                self._synchronize_statement(start)

        self._consume(TokenType.RCURLY)
        return Block(stmts, location=start_token.location)

    def _parse_if(self) -> If:
        """<IfStmt> ::= IF ( <Expr> ) <Stmt> | IF ( <Expr> ) <Stmt> ELSE <Stmt>"""
        start_token = self._consume(TokenType.IF)
        self._consume(TokenType.LPAREN)
        cond = self._parse_expression()
        self._consume(TokenType.RPAREN)

        # A nested if has already taken any else that belongs to it
        then_stmt = self._parse_statement()
        else_stmt = None
        if self._match(TokenType.ELSE):
            else_stmt = self._parse_statement()

        return If(cond, then_stmt, else_stmt, location=start_token.location)

    def _parse_while(self) -> While:
        """<WhileStmt> ::= WHILE ( <Expression> ) <Stmt>"""
        start_token = self._consume(TokenType.WHILE)
        self._consume(TokenType.LPAREN)
        cond = self._parse_expression()
        self._consume(TokenType.RPAREN)
        body = self._parse_statement()

        return While(cond, body, location=start_token.location)

    def _parse_for(self) -> For:
        """
        <ForStmt> ::= FOR ( <Start> ; <Terminate> ; <Increment> ) <Stmt>
        each clause ::= EMPTY | <Expression>
        """
        start_token = self._consume(TokenType.FOR)
        self._consume(TokenType.LPAREN)

        init = None
        if not self._check(TokenType.SEMICOLON):
            init = self._parse_expression()
        self._consume(TokenType.SEMICOLON)

        cond = None
        if not self._check(TokenType.SEMICOLON):
            cond = self._parse_expression()
        self._consume(TokenType.SEMICOLON)

        update = None
        if not self._check(TokenType.RPAREN):
            update = self._parse_expression()
        self._consume(TokenType.RPAREN)

        body = self._parse_statement()

        return For(init, cond, update, body, location=start_token.location)

    def _parse_decl(self) -> Decl:
        """<DeclStmt> ::= VAR <Identifier> = <Expression> ;"""
        start_token = self._consume(TokenType.VAR)
        name = self._parse_identifier()

        # Every local variable must be initialized
        self._consume(TokenType.ASSIGN)
        init = self._parse_expression()
        self._consume(TokenType.SEMICOLON)

        return Decl(name, init, location=start_token.location)

    def _parse_return(self) -> Return:
        """<ReturnStmt> ::= RETURN <Expression> ; | RETURN ;"""
        start_token = self._consume(TokenType.RETURN)

        value = None
        if not self._check(TokenType.SEMICOLON):
            value = self._parse_expression()
        self._consume(TokenType.SEMICOLON)

        return Return(value, location=start_token.location)

    def _parse_break(self) -> Break:
        """<BreakStmt> ::= BREAK ;"""
        start_token = self._consume(TokenType.BREAK)
        self._consume(TokenType.SEMICOLON)
        return Break(location=start_token.location)

    def _parse_expression_stmt(self) -> ExprStmt:
        """<ExpressionStmt> ::= <Expression> ;"""
        location = self._peek().location
        expr = self._parse_expression()
        self._consume(TokenType.SEMICOLON)
        return ExprStmt(expr, location=location)

    # ------------------------------------------------------------------
    # Expressions, loosest binding first
    # ------------------------------------------------------------------

    def _parse_expression(self) -> Expr:
        """
        <Expression> ::= <LogicalOrExpr> <OptionalAssignment>
        <OptionalAssignment> ::= EMPTY | = <Expression>
        """
        left = self._parse_or()

        if not self._check(TokenType.ASSIGN):
            return left

        # Only the name/receiver shape is captured; legality is checked later
        if isinstance(left, Var):
            self._advance()
            value = self._parse_expression()
            return Assign(left.name, left.receiver, value, location=left.location)
        if isinstance(left, Array):
            self._advance()
            value = self._parse_expression()
            return ArrayAssign(left.name, left.receiver, left.index, value, location=left.location)

        raise create_invalid_assignment_target_error(self._peek().location, self._peek())

    def _parse_or(self) -> Expr:
        """<LogicalOR> ::= <LogicalAND> <LogicalORRest>"""
        location = self._peek().location
        left = self._parse_and()

        while self._check_lexeme(TokenType.BINARYLOGIC, "||"):
            self._advance()
            right = self._parse_and()
            left = LogicOr(left, right, location=location)

        return left

    def _parse_and(self) -> Expr:
        """<LogicalAND> ::= <ComparisonExpr> <LogicalANDRest>"""
        location = self._peek().location
        left = self._parse_equality()

        while self._check_lexeme(TokenType.BINARYLOGIC, "&&"):
            self._advance()
            right = self._parse_equality()
            left = LogicAnd(left, right, location=location)

        return left

    def _parse_equality(self) -> Expr:
        """
        <ComparisonExpr> ::= <RelationalExpr> <equalOrNotEqual> <RelationalExpr>
                           | <RelationalExpr>

        At most one operator: a == b == c is a syntax error, not a fold.
        """
        location = self._peek().location
        left = self._parse_relational()

        token = self._peek()
        if token.type == TokenType.COMPARE and token.lexeme in EQUALITY_OPERATORS:
            self._advance()
            right = self._parse_relational()
            left = EQUALITY_OPERATORS[token.lexeme](left, right, location=location)

        return left

    def _parse_relational(self) -> Expr:
        """
        <RelationalExpr> ::= <AddExpr> | <AddExpr> <ComparisonOp> <AddExpr>
                           | <AddExpr> INSTANCEOF <Type>

        Non-chaining, like equality.
        """
        location = self._peek().location
        left = self._parse_additive()

        token = self._peek()
        if token.type == TokenType.COMPARE and token.lexeme in RELATIONAL_OPERATORS:
            self._advance()
            right = self._parse_additive()
            left = RELATIONAL_OPERATORS[token.lexeme](left, right, location=location)
        elif token.type == TokenType.INSTANCEOF:
            self._advance()
            type_name = self._parse_type()
            left = Instanceof(left, type_name, location=location)

        return left

    def _parse_additive(self) -> Expr:
        """<AddExpr> ::= <MultExpr> <MoreMultExpr>"""
        location = self._peek().location
        left = self._parse_multiplicative()

        while self._check(TokenType.PLUSMINUS) and self._peek().lexeme in ADDITIVE_OPERATORS:
            operator = self._advance().lexeme
            right = self._parse_multiplicative()
            left = ADDITIVE_OPERATORS[operator](left, right, location=location)

        return left

    def _parse_multiplicative(self) -> Expr:
        """<MultExpr> ::= <NewCastOrUnary> <MoreNCU>"""
        location = self._peek().location
        left = self._parse_new_cast_or_unary()

        while self._check(TokenType.MULDIV) and self._peek().lexeme in MULTIPLICATIVE_OPERATORS:
            operator = self._advance().lexeme
            right = self._parse_new_cast_or_unary()
            left = MULTIPLICATIVE_OPERATORS[operator](left, right, location=location)

        return left

    def _parse_new_cast_or_unary(self) -> Expr:
        """<NewCastOrUnary> ::= <NewExpression> | <CastExpression> | <UnaryPrefix>"""
        if self._check(TokenType.NEW):
            return self._parse_new()
        if self._check(TokenType.CAST):
            return self._parse_cast()
        return self._parse_unary_prefix()

    def _parse_new(self) -> New:
        """<NewExpression> ::= NEW <Identifier> ( ) | NEW <Identifier> [ <Expression> ]"""
        start_token = self._consume(TokenType.NEW)
        type_name = self._parse_identifier()

        if self._match(TokenType.LPAREN):
            self._consume(TokenType.RPAREN)
            return New(type_name, None, location=start_token.location)

        if self._match(TokenType.LBRACKET):
            size = self._parse_expression()
            self._consume(TokenType.RBRACKET)
            return New(type_name, size, location=start_token.location)

        raise create_unexpected_token_error("'(' or '['", self._peek())

    def _parse_cast(self) -> Cast:
        """<CastExpression> ::= CAST ( <Type> , <Expression> )"""
        start_token = self._consume(TokenType.CAST)
        self._consume(TokenType.LPAREN)
        type_name = self._parse_type()
        self._consume(TokenType.COMMA)
        expr = self._parse_expression()
        self._consume(TokenType.RPAREN)

        return Cast(type_name, expr, location=start_token.location)

    def _parse_unary_prefix(self) -> Expr:
        """
        <UnaryPrefix> ::= <PrefixOp> <UnaryPrefix> | <UnaryPostfix>
        <PrefixOp> ::= - | ! | ++ | --
        """
        token = self._peek()

        if self._check_lexeme(TokenType.PLUSMINUS, "-"):
            self._advance()
            return Neg(self._parse_unary_prefix(), location=token.location)
        if token.type == TokenType.UNARYNOT:
            self._advance()
            return Not(self._parse_unary_prefix(), location=token.location)
        if token.type in (TokenType.UNARYINCR, TokenType.UNARYDECR):
            self._advance()
            operand = self._parse_unary_prefix()
            return IncrDecr(
                operand,
                is_postfix=False,
                is_increment=token.type == TokenType.UNARYINCR,
                location=token.location
            )

        return self._parse_unary_postfix()

    def _parse_unary_postfix(self) -> Expr:
        """
        <UnaryPostfix> ::= <Primary> <PostfixOp>
        <PostfixOp> ::= ++ | -- | EMPTY
        """
        location = self._peek().location
        expr = self._parse_primary()

        token = self._peek()
        if token.type in (TokenType.UNARYINCR, TokenType.UNARYDECR):
            self._advance()
            return IncrDecr(
                expr,
                is_postfix=True,
                is_increment=token.type == TokenType.UNARYINCR,
                location=location
            )

        return expr

    def _parse_primary(self) -> Expr:
        """
        <Primary> ::= ( <Expression> ) | <IntegerConst> | <BooleanConst>
                    | <StringConst> | <VarExpr> | <DispatchExpr>
        <VarExpr> ::= <VarExprPrefix> <Identifier> <VarExprSuffix>
        <VarExprPrefix> ::= SUPER . | THIS . | EMPTY
        <VarExprSuffix> ::= [ <Expr> ] | EMPTY
        <DispatchExpr> ::= <DispatchExprPrefix> <Identifier> ( <Arguments> )
        <DispatchExprPrefix> ::= <Primary> . | EMPTY
        """
        token = self._peek()
        location = token.location

        if token.type == TokenType.LPAREN:
            self._advance()
            expr = self._parse_expression()
            self._consume(TokenType.RPAREN)
        elif token.type == TokenType.INTCONST:
            self._advance()
            expr = ConstInt(token.lexeme, location=location)
        elif token.type == TokenType.STRCONST:
            self._advance()
            expr = ConstString(token.value, location=location)
        elif token.type == TokenType.BOOLEAN:
            self._advance()
            expr = ConstBool(token.lexeme, location=location)
        elif token.type == TokenType.IDENTIFIER and token.lexeme in RECEIVER_QUALIFIERS:
            self._advance()
            expr = Var(None, token.lexeme, location=location)
        elif token.type == TokenType.IDENTIFIER:
            expr = self._parse_member_suffix(None, location)
        else:
            raise create_invalid_expression_error(token)

        # Fold each ". name suffix" into a node whose receiver is everything so far
        while self._match(TokenType.DOT):
            expr = self._parse_member_suffix(expr, location)

        return expr

    def _parse_member_suffix(self, receiver: Optional[Expr], location) -> Expr:
        """<Identifier> followed by nothing, [ <Expression> ] or ( <Arguments> )."""
        name = self._parse_identifier()

        if self._match(TokenType.LBRACKET):
            index = self._parse_expression()
            self._consume(TokenType.RBRACKET)
            return Array(receiver, name, index, location=location)

        if self._match(TokenType.LPAREN):
            args = self._parse_arguments()
            self._consume(TokenType.RPAREN)
            return Dispatch(receiver, name, args, location=location)

        return Var(receiver, name, location=location)

    def _parse_arguments(self) -> List[Expr]:
        """
        <Arguments> ::= EMPTY | <Expression> <MoreArgs>
        <MoreArgs>  ::= EMPTY | , <Expression> <MoreArgs>
        """
        args: List[Expr] = []

        if not self._check(TokenType.RPAREN):
            args.append(self._parse_expression())
            while self._match(TokenType.COMMA):
                args.append(self._parse_expression())

        return args

    # ------------------------------------------------------------------
    # Terminals
    # ------------------------------------------------------------------

    def _parse_identifier(self) -> str:
        return self._consume(TokenType.IDENTIFIER).lexeme

    # ------------------------------------------------------------------
    # Error recovery
    # ------------------------------------------------------------------

    def _report(self, error: Union[ParseError, RecursionError]):
        """Register a syntax error, once per offending token."""
        if isinstance(error, RecursionError):
            error = create_nesting_too_deep_error(self._peek())
        if error.token is not None and error.token is self._last_reported:
            return
        self._last_reported = error.token
        logger.debug("Syntax error in %s at %s: %s", self.filename, error.location, error.message)
        error.register_with(self.error_handler, self.filename)

    def _skip_failed_token(self, start: int) -> Optional[Token]:
        """Consume one token if the failed construct consumed none."""
        if self._cursor.consumed == start and not self._check(TokenType.EOF):
            return self._advance()
        return None

    def _synchronize_statement(self, start: int):
        """Skip past the next ';' or up to the start of the next statement."""
        skipped = self._skip_failed_token(start)
        if skipped is not None and skipped.type == TokenType.SEMICOLON:
            return

        while self._peek().type not in SyntaxErrorRecovery.STATEMENT_BOUNDARIES:
            if self._advance().type == TokenType.SEMICOLON:
                return

    def _synchronize_member(self, start: int):
        """Skip past the next ';' or the next balanced { ... } body."""
        skipped = self._skip_failed_token(start)
        if skipped is not None:
            if skipped.type == TokenType.SEMICOLON:
                return
            if skipped.type == TokenType.LCURLY:
                self._skip_braces()
                return

        while self._peek().type not in SyntaxErrorRecovery.MEMBER_BOUNDARIES:
            token = self._advance()
            if token.type == TokenType.SEMICOLON:
                return
            if token.type == TokenType.LCURLY:
                self._skip_braces()
                return

    def _synchronize_class(self, start: int):
        """Skip up to the next class declaration."""
        self._skip_failed_token(start)
        while self._peek().type not in SyntaxErrorRecovery.CLASS_BOUNDARIES:
            self._advance()

    def _skip_braces(self):
        """
        Skip to just after the '}' closing an already consumed '{'.

        Stops early before a 'class' keyword, which always starts a new class.
        """
        depth = 1
        while depth > 0 and self._peek().type not in SyntaxErrorRecovery.CLASS_BOUNDARIES:
            token = self._advance()
            if token.type == TokenType.LCURLY:
                depth += 1
            elif token.type == TokenType.RCURLY:
                depth -= 1

    # ------------------------------------------------------------------
    # Utility methods
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        """Return current token without consuming."""
        return self._cursor.current

    def _advance(self) -> Token:
        """Consume and return current token."""
        return self._cursor.advance()

    def _check(self, token_type: TokenType) -> bool:
        return self._cursor.current.type == token_type

    def _check_lexeme(self, token_type: TokenType, lexeme: str) -> bool:
        current = self._cursor.current
        return current.type == token_type and current.lexeme == lexeme

    def _match(self, token_type: TokenType) -> bool:
        """Check if current token matches type and consume if so."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _consume(self, token_type: TokenType, expected: Optional[str] = None) -> Token:
        """Consume token of expected type or raise a ParseError."""
        if self._check(token_type):
            return self._advance()
        raise create_unexpected_token_error(expected or token_type, self._peek(), code="P002")


def parse_string(source: str, filename: str = "<string>",
                 error_handler: Optional[ErrorHandler] = None) -> Program:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        error_handler: Sink for diagnostics; pass one in to inspect them

    Returns:
        Program AST
    """
    parser = Parser(error_handler)
    return parser.parse_tokens(Lexer(source, filename, parser.error_handler), filename)


def parse_file(filepath: Union[str, "os.PathLike[str]"],
               error_handler: Optional[ErrorHandler] = None) -> Program:
    """
    Convenience function to parse a source file.

    Raises:
        CompilationError: If the file cannot be read
    """
    return Parser(error_handler).parse(filepath)
