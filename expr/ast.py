import enum
from dataclasses import dataclass
from typing import List, Union

from .location import Annotation, Span


class UnaryOpKind(enum.Enum):
    PLUS = "+"
    MINUS = "-"


class UnaryOp(Annotation[UnaryOpKind]):
    @classmethod
    def plus(cls, span: Span) -> "UnaryOp":
        return cls(UnaryOpKind.PLUS, span)

    @classmethod
    def minus(cls, span: Span) -> "UnaryOp":
        return cls(UnaryOpKind.MINUS, span)


class BinaryOpKind(enum.Enum):
    ADD = "+"
    SUB = "-"
    MULT = "*"
    DIV = "/"


class BinaryOp(Annotation[BinaryOpKind]):
    @classmethod
    def add(cls, span: Span) -> "BinaryOp":
        return cls(BinaryOpKind.ADD, span)

    @classmethod
    def sub(cls, span: Span) -> "BinaryOp":
        return cls(BinaryOpKind.SUB, span)

    @classmethod
    def mult(cls, span: Span) -> "BinaryOp":
        return cls(BinaryOpKind.MULT, span)

    @classmethod
    def div(cls, span: Span) -> "BinaryOp":
        return cls(BinaryOpKind.DIV, span)


@dataclass(frozen=True)
class Node:
    span: Span


@dataclass(frozen=True)
class Number(Node):
    value: int


@dataclass(frozen=True)
class UnaryOperation(Node):
    op: UnaryOp
    operand: "Exp"

    @classmethod
    def of(cls, op: UnaryOp, operand: "Exp") -> "UnaryOperation":
        return cls(op.span.merge(operand.span), op, operand)


@dataclass(frozen=True)
class BinaryOperation(Node):
    op: BinaryOp
    left: "Exp"
    right: "Exp"

    @classmethod
    def of(cls, op: BinaryOp, left: "Exp", right: "Exp") -> "BinaryOperation":
        return cls(left.span.merge(op.span).merge(right.span), op, left, right)


Exp = Union[Number, UnaryOperation, BinaryOperation]


def format_ast_node(node, is_last=True, prefix="") -> List[str]:
    """
    Render an AST node as tree-drawing lines.

    Args:
        node: The AST node to render
        is_last: Whether this is the last child of its parent
        prefix: Prefix string for the current line
    """
    connector = "└── " if is_last else "├── "
    current_prefix = prefix + connector
    next_prefix = prefix + ("    " if is_last else "│   ")

    if isinstance(node, Number):
        return [f"{current_prefix}Number: {node.value} ({node.span!r})"]

    if isinstance(node, UnaryOperation):
        lines = [f"{current_prefix}UnaryOp: {node.op.value.name} ({node.span!r})"]
        lines += format_ast_node(node.operand, True, next_prefix)
        return lines

    if isinstance(node, BinaryOperation):
        lines = [f"{current_prefix}BinaryOp: {node.op.value.name} ({node.span!r})"]
        lines.append(f"{next_prefix}├── Left:")
        lines += format_ast_node(node.left, True, next_prefix + "│   ")
        lines.append(f"{next_prefix}└── Right:")
        lines += format_ast_node(node.right, True, next_prefix + "    ")
        return lines

    return [f"{current_prefix}Unknown node: {node.__class__.__name__}"]


def format_ast(node: Node) -> str:
    return "\n".join(format_ast_node(node))


def print_ast(node: Node):
    """Print the AST starting from the given node."""
    print(format_ast(node))
