"""
Abstract Syntax Tree node definitions for Bantam Java.

Every node is a frozen dataclass carrying the source location of its leading
token. Lists of children are stored as tuples, so an empty block or an empty
argument list is an empty tuple rather than None. Locations are excluded
from equality, which lets two trees be compared purely by structure.

The node set is closed: Program, Class, the Member variants, the Stmt
variants and the Expr variants below. Downstream passes dispatch on the
concrete class, either with isinstance/match or through ASTVisitor.
"""

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, Iterator, Optional, Tuple

from ..lexer.tokens import SourceLocation


@dataclass(frozen=True)
class ASTNode:
    """Base class for all AST nodes."""
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False, kw_only=True)

    def __post_init__(self):
        # Freeze any list handed in by the caller
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, list):
                object.__setattr__(self, f.name, tuple(value))

    @property
    def node_type(self) -> str:
        return type(self).__name__

    @property
    def line(self) -> int:
        return self.location.line if self.location else 0

    def children(self) -> Iterator["ASTNode"]:
        """Yield child nodes in field order."""
        for f in fields(self):
            if f.name == "location":
                continue
            value = getattr(self, f.name)
            if isinstance(value, ASTNode):
                yield value
            elif isinstance(value, tuple):
                for item in value:
                    if isinstance(item, ASTNode):
                        yield item

    def to_dict(self) -> Dict[str, Any]:
        """Convert the node and all descendants into plain dictionaries."""
        result: Dict[str, Any] = {"kind": self.node_type, "line": self.line}
        for f in fields(self):
            if f.name == "location":
                continue
            result[f.name] = _to_plain(getattr(self, f.name))
        return result


def _to_plain(value: Any) -> Any:
    if isinstance(value, ASTNode):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_to_plain(item) for item in value]
    return value


class ASTVisitor:
    """
    Visitor over the closed node set.

    visit() calls visit_<ClassName>(node) when the subclass defines it and
    generic_visit(node) otherwise; generic_visit visits every child.
    """

    def visit(self, node: ASTNode) -> Any:
        method = getattr(self, f"visit_{type(node).__name__}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: ASTNode) -> Any:
        for child in node.children():
            self.visit(child)
        return None


# ============================================================================
# Category bases
# ============================================================================

@dataclass(frozen=True)
class Member(ASTNode):
    """Base class for class members (fields and methods)."""


@dataclass(frozen=True)
class Stmt(ASTNode):
    """Base class for statements."""


@dataclass(frozen=True)
class Expr(ASTNode):
    """Base class for expressions."""


# ============================================================================
# Top-level nodes
# ============================================================================

@dataclass(frozen=True)
class Class(ASTNode):
    """Class declaration; parent is None when there is no extends clause."""
    name: str
    parent: Optional[str]
    members: Tuple[Member, ...] = ()
    filename: Optional[str] = None


@dataclass(frozen=True)
class Program(ASTNode):
    """Root AST node: every class of one source file, in source order."""
    classes: Tuple[Class, ...] = ()


# ============================================================================
# Members
# ============================================================================

@dataclass(frozen=True)
class Formal(ASTNode):
    """Formal parameter of a method."""
    type: str
    name: str


@dataclass(frozen=True)
class Field(Member):
    type: str
    name: str
    init: Optional[Expr] = None


@dataclass(frozen=True)
class Block(Stmt):
    stmts: Tuple[Stmt, ...] = ()


@dataclass(frozen=True)
class Method(Member):
    return_type: str
    name: str
    params: Tuple[Formal, ...]
    body: Block


# ============================================================================
# Statements
# ============================================================================

@dataclass(frozen=True)
class If(Stmt):
    cond: Expr
    then: Stmt
    else_: Optional[Stmt] = None


@dataclass(frozen=True)
class While(Stmt):
    cond: Expr
    body: Stmt


@dataclass(frozen=True)
class For(Stmt):
    """for loop; each of the three header clauses may be absent."""
    init: Optional[Expr]
    cond: Optional[Expr]
    update: Optional[Expr]
    body: Stmt


@dataclass(frozen=True)
class Break(Stmt):
    pass


@dataclass(frozen=True)
class Return(Stmt):
    value: Optional[Expr] = None


@dataclass(frozen=True)
class Decl(Stmt):
    """Local variable declaration (var name = init;)."""
    name: str
    init: Expr


@dataclass(frozen=True)
class ExprStmt(Stmt):
    expr: Expr


# ============================================================================
# Expressions
# ============================================================================

@dataclass(frozen=True)
class Assign(Expr):
    """Assignment to a variable, optionally qualified by a receiver."""
    name: str
    receiver: Optional[Expr]
    value: Expr


@dataclass(frozen=True)
class ArrayAssign(Expr):
    """Assignment to an array element."""
    name: str
    receiver: Optional[Expr]
    index: Expr
    value: Expr


@dataclass(frozen=True)
class BinaryExpr(Expr):
    """Base class for two-operand expressions."""
    left: Expr
    right: Expr

    operator: ClassVar[str] = ""


@dataclass(frozen=True)
class LogicOr(BinaryExpr):
    operator: ClassVar[str] = "||"


@dataclass(frozen=True)
class LogicAnd(BinaryExpr):
    operator: ClassVar[str] = "&&"


@dataclass(frozen=True)
class CompEq(BinaryExpr):
    operator: ClassVar[str] = "=="


@dataclass(frozen=True)
class CompNe(BinaryExpr):
    operator: ClassVar[str] = "!="


@dataclass(frozen=True)
class CompLt(BinaryExpr):
    operator: ClassVar[str] = "<"


@dataclass(frozen=True)
class CompGt(BinaryExpr):
    operator: ClassVar[str] = ">"


@dataclass(frozen=True)
class CompLeq(BinaryExpr):
    operator: ClassVar[str] = "<="


@dataclass(frozen=True)
class CompGeq(BinaryExpr):
    operator: ClassVar[str] = ">="


@dataclass(frozen=True)
class ArithPlus(BinaryExpr):
    operator: ClassVar[str] = "+"


@dataclass(frozen=True)
class ArithMinus(BinaryExpr):
    operator: ClassVar[str] = "-"


@dataclass(frozen=True)
class ArithTimes(BinaryExpr):
    operator: ClassVar[str] = "*"


@dataclass(frozen=True)
class ArithDivide(BinaryExpr):
    operator: ClassVar[str] = "/"


@dataclass(frozen=True)
class ArithModulus(BinaryExpr):
    operator: ClassVar[str] = "%"


@dataclass(frozen=True)
class Instanceof(Expr):
    expr: Expr
    type: str


@dataclass(frozen=True)
class UnaryExpr(Expr):
    operand: Expr

    operator: ClassVar[str] = ""


@dataclass(frozen=True)
class Neg(UnaryExpr):
    operator: ClassVar[str] = "-"


@dataclass(frozen=True)
class Not(UnaryExpr):
    operator: ClassVar[str] = "!"


@dataclass(frozen=True)
class IncrDecr(Expr):
    """
    ++ or -- applied to an operand.

    is_postfix selects the evaluation rule: the prefix form yields the
    updated value, the postfix form yields the original one.
    """
    operand: Expr
    is_postfix: bool
    is_increment: bool = True

    @property
    def operator(self) -> str:
        return "++" if self.is_increment else "--"


@dataclass(frozen=True)
class New(Expr):
    """Object instantiation, or array instantiation when size is present."""
    type: str
    size: Optional[Expr] = None


@dataclass(frozen=True)
class Cast(Expr):
    type: str
    expr: Expr


@dataclass(frozen=True)
class Var(Expr):
    receiver: Optional[Expr]
    name: str


@dataclass(frozen=True)
class Array(Expr):
    """Array element reference."""
    receiver: Optional[Expr]
    name: str
    index: Expr


@dataclass(frozen=True)
class Dispatch(Expr):
    """Method call; receiver is None for an implicit receiver."""
    receiver: Optional[Expr]
    method: str
    args: Tuple[Expr, ...] = ()


@dataclass(frozen=True)
class ConstInt(Expr):
    literal: str

    @property
    def value(self) -> int:
        return int(self.literal)


@dataclass(frozen=True)
class ConstString(Expr):
    literal: str

    @property
    def value(self) -> str:
        return self.literal


@dataclass(frozen=True)
class ConstBool(Expr):
    literal: str

    @property
    def value(self) -> bool:
        return self.literal == "true"


# List aliases used in signatures
ClassList = Tuple[Class, ...]
MemberList = Tuple[Member, ...]
FormalList = Tuple[Formal, ...]
StmtList = Tuple[Stmt, ...]
ExprList = Tuple[Expr, ...]
