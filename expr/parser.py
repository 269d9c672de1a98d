import logging
from typing import Callable, List, Optional, Sequence

from .ast import (
    BinaryOp,
    BinaryOperation,
    Exp,
    Number,
    UnaryOp,
    UnaryOperation,
)
from .error import CompileError, ParseError, ParseErrorKind
from .location import Span
from .scanner import lex
from .scanner.token import Token, TokenKind

# each "(" costs about seven stack frames, so stay well under the interpreter limit
MAX_NESTING_DEPTH = 100


class Parser:
    """
    Recursive-descent parser over a token list.

    Grammar, loosest binding first:

        expr  := expr3
        expr3 := expr2 (("+" | "-") expr2)*
        expr2 := expr1 (("*" | "/") expr1)*
        expr1 := ("+" | "-")? atom
        atom  := NUMBER | "(" expr ")"
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens: List[Token] = list(tokens)
        self.index = 0
        self.depth = 0

    def peek(self) -> Optional[Token]:
        if self.index >= len(self.tokens):
            return None
        return self.tokens[self.index]

    def consume(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self.index += 1
        return token

    def fconsume(self) -> Token:
        if token := self.consume():
            return token
        raise ParseError.eof(self.eof_span())

    def eof_span(self) -> Span:
        if not self.tokens:
            return Span(0, 0)
        end = self.tokens[-1].span.end
        return Span(end, end)

    def parse(self) -> Exp:
        exp = self.parse_expr()
        if token := self.consume():
            raise ParseError.at(ParseErrorKind.REDUNDANT_EXPRESSION, token)
        return exp

    def parse_expr(self) -> Exp:
        return self.parse_expr3()

    def parse_expr3(self) -> Exp:
        return self.parse_left_binop(self.parse_expr2, self.parse_expr3_op)

    def parse_expr3_op(self) -> BinaryOp:
        return self.parse_binop(
            {TokenKind.PLUS: BinaryOp.add, TokenKind.MINUS: BinaryOp.sub}
        )

    def parse_expr2(self) -> Exp:
        return self.parse_left_binop(self.parse_expr1, self.parse_expr2_op)

    def parse_expr2_op(self) -> BinaryOp:
        return self.parse_binop(
            {TokenKind.ASTERISK: BinaryOp.mult, TokenKind.SLASH: BinaryOp.div}
        )

    def parse_binop(self, ops: dict) -> BinaryOp:
        token = self.peek()
        if token is None:
            raise ParseError.eof(self.eof_span())
        if token.kind not in ops:
            raise ParseError.at(ParseErrorKind.NOT_OPERATOR, token)
        self.consume()
        return ops[token.kind](token.span)

    def parse_left_binop(
        self,
        subexpr_parser: Callable[[], Exp],
        op_parser: Callable[[], BinaryOp],
    ) -> Exp:
        e = subexpr_parser()
        while self.peek() is not None:
            try:
                op = op_parser()
            except ParseError as err:
                if err.kind != ParseErrorKind.NOT_OPERATOR:
                    raise
                break
            r = subexpr_parser()
            e = BinaryOperation.of(op, e, r)
            logging.debug(f"reduced {op.value.name} at {e.span!r}")
        return e

    def parse_expr1(self) -> Exp:
        token = self.peek()
        if token is None or token.kind not in (TokenKind.PLUS, TokenKind.MINUS):
            return self.parse_atom()

        self.consume()
        if token.kind == TokenKind.PLUS:
            op = UnaryOp.plus(token.span)
        else:
            op = UnaryOp.minus(token.span)
        e = UnaryOperation.of(op, self.parse_atom())
        logging.debug(f"reduced unary {op.value.name} at {e.span!r}")
        return e

    def parse_atom(self) -> Exp:
        token = self.fconsume()

        match token.kind:
            case TokenKind.NUMBER:
                return Number(token.span, token.value)

            case TokenKind.LPAREN:
                self.depth += 1
                if self.depth > MAX_NESTING_DEPTH:
                    raise ParseError.nesting_too_deep(token, MAX_NESTING_DEPTH)
                e = self.parse_expr()
                closing = self.consume()
                if closing is None:
                    raise ParseError.unclosed_open_paren(token)
                if closing.kind != TokenKind.RPAREN:
                    raise ParseError.at(ParseErrorKind.REDUNDANT_EXPRESSION, closing)
                self.depth -= 1
                return e

        raise ParseError.at(ParseErrorKind.NOT_EXPRESSION, token)


def parse(tokens: Sequence[Token]) -> Exp:
    """Parse a whole token list into a single expression."""
    return Parser(tokens).parse()


def parse_source(source: str) -> Exp:
    try:
        return parse(lex(source))
    except CompileError as err:
        err.source = source
        raise
