"""Boolean condition evaluator.

Supports:
    - Variables: [a-z0-9_]+, looked up in a symbol table of booleans
    - Boolean: not, and, or (not > and > or, left associative)
    - Parentheses

Evaluation happens while parsing; no tree is built. Every rule returns a
ParseResult carrying a textual reconstruction of what it parsed, or None
when the input ran out before an operand was found.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConditionSyntaxError, IncompleteConditionError, NestingTooDeepError
from .scanner import Scanner, Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    reconstruction: str
    value: bool


class Parser:
    """Recursive descent parser for boolean conditions.

    A parser may be reused for any number of conditions, one at a time.
    It is not safe to share an instance between threads.
    """

    def __init__(self):
        self._scanner = Scanner()
        self._pushed: Token | None = None

    def parse(self, expr: str, symbols: Mapping[str, bool]) -> bool:
        """Evaluate a condition against a symbol table."""
        return self.explain(expr, symbols).value

    def explain(self, expr: str, symbols: Mapping[str, bool]) -> ParseResult:
        """Evaluate a condition and return its reconstruction with the value."""
        self._scanner.reset(expr, symbols)
        self._pushed = None

        try:
            result = self.parse_expression()
        except RecursionError as e:
            raise NestingTooDeepError() from e
        if result is None:
            raise IncompleteConditionError()

        token = self._pop_token()
        if token.kind is not TokenKind.EOF:
            raise ConditionSyntaxError(
                f"invalid condition, unexpected {token.describe()} after {result.reconstruction}",
                token,
            )

        logger.debug("Evaluated %r as %s -> %s", expr, result.reconstruction, result.value)
        return result

    def _pop_token(self) -> Token:
        if self._pushed is not None:
            token, self._pushed = self._pushed, None
            return token
        return self._scanner.next_token()

    def _push_token(self, token: Token) -> None:
        if self._pushed is not None:
            raise RuntimeError("lookahead buffer already holds a token")
        self._pushed = token

    def parse_expression(self) -> ParseResult | None:
        return self.parse_or()

    def parse_or(self) -> ParseResult | None:
        left = self.parse_and()
        if left is None:
            return None

        while True:
            token = self._pop_token()
            if token.kind is not TokenKind.OR:
                self._push_token(token)
                return left

            right = self.parse_and()
            if right is None:
                return None
            left = ParseResult(
                f"{left.reconstruction} or {right.reconstruction}",
                left.value or right.value,
            )

    def parse_and(self) -> ParseResult | None:
        left = self.parse_not()
        if left is None:
            return None

        while True:
            token = self._pop_token()
            if token.kind is not TokenKind.AND:
                self._push_token(token)
                return left

            right = self.parse_not()
            if right is None:
                return None
            left = ParseResult(
                f"{left.reconstruction} and {right.reconstruction}",
                left.value and right.value,
            )

    def parse_not(self) -> ParseResult | None:
        negations = 0
        while True:
            token = self._pop_token()
            match token.kind:
                case TokenKind.EOF:
                    return None
                case TokenKind.NOT:
                    negations += 1
                case _:
                    self._push_token(token)
                    break

        operand = self.parse_primary()
        if operand is None:
            return None
        return ParseResult(
            "not " * negations + operand.reconstruction,
            operand.value if negations % 2 == 0 else not operand.value,
        )

    def parse_primary(self) -> ParseResult | None:
        token = self._pop_token()
        match token.kind:
            case TokenKind.EOF:
                return None
            case TokenKind.LPAREN:
                pass
            case _:
                self._push_token(token)
                return self.parse_variable()

        inner = self.parse_expression()
        if inner is None:
            return None

        token = self._pop_token()
        if token.kind is not TokenKind.RPAREN:
            raise ConditionSyntaxError(
                f"invalid condition, expected {TokenKind.RPAREN}, got {token.describe()}", token
            )
        return ParseResult(f"({inner.reconstruction})", inner.value)

    def parse_variable(self) -> ParseResult | None:
        token = self._pop_token()
        match token.kind:
            case TokenKind.EOF:
                return None
            case TokenKind.VARIABLE:
                return ParseResult(token.name, token.value)
        raise ConditionSyntaxError(
            f"invalid condition, expected VARIABLE, got {token.describe()}", token
        )


def evaluate(expr: str, symbols: Mapping[str, bool]) -> bool:
    """Evaluate a condition expression against a symbol table.

    Args:
        expr: Condition expression (e.g., "name1 and not (name2 or name3)")
        symbols: Variable name to boolean value

    Returns:
        Boolean result of evaluation

    Raises:
        ConditionError: If the expression is invalid or names an unknown variable
    """
    return Parser().parse(expr, symbols)


def explain(expr: str, symbols: Mapping[str, bool]) -> ParseResult:
    """Like evaluate(), but also return the reconstructed expression."""
    return Parser().explain(expr, symbols)
