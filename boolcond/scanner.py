"""Lexical scanner for boolean conditions.

Tokens are produced on demand, straight from the input string. Variables
are resolved against the symbol table the moment they are scanned, so an
unknown name fails before the parser ever sees it.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from .errors import ConditionLexError, UnknownVariableError

IDENTIFIER_CHARS = "abcdefghijklmnopqrstuvwxyz0123456789_"


class TokenKind(Enum):
    NOT = "not"
    AND = "and"
    OR = "or"
    LPAREN = "("
    RPAREN = ")"
    VARIABLE = "variable"
    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A single lexical unit. Only VARIABLE tokens carry a name and value."""

    kind: TokenKind
    name: str = ""
    value: bool = False
    position: int = 0

    def describe(self) -> str:
        if self.kind is TokenKind.VARIABLE:
            return f"{self.name}({self.kind})"
        return str(self.kind)


# Order matters: keywords win over identifiers, and a keyword only counts
# when the next character cannot continue an identifier.
TOKEN_PATTERNS = [
    (re.compile(r"[ \t]+"), None),
    (re.compile(r"or(?![a-z0-9_])"), TokenKind.OR),
    (re.compile(r"and(?![a-z0-9_])"), TokenKind.AND),
    (re.compile(r"not(?![a-z0-9_])"), TokenKind.NOT),
    (re.compile(r"\("), TokenKind.LPAREN),
    (re.compile(r"\)"), TokenKind.RPAREN),
    (re.compile(r"[a-z0-9_]+"), TokenKind.VARIABLE),
]


class Scanner:
    """Turns a condition string into tokens, one call at a time."""

    def __init__(self, text: str = "", symbols: Mapping[str, bool] | None = None):
        self.reset(text, symbols if symbols is not None else {})

    def reset(self, text: str, symbols: Mapping[str, bool]) -> None:
        self.text = text
        self.symbols = symbols
        self.index = 0

    def next_token(self) -> Token:
        """Scan the next token, or EOF once the input is exhausted.

        Raises:
            UnknownVariableError: If an identifier is not in the symbol table
            ConditionLexError: If no token can start at the current position
        """
        while self.index < len(self.text):
            start = self.index
            for pattern, kind in TOKEN_PATTERNS:
                match = pattern.match(self.text, start)
                if match:
                    break
            else:
                raise ConditionLexError(
                    f"Invalid character at position {start}: {self.text[start]!r}", start
                )

            self.index = match.end()
            if kind is None:
                continue
            if kind is TokenKind.VARIABLE:
                return self._variable(match.group(), start)
            return Token(kind, position=start)

        return Token(TokenKind.EOF, position=self.index)

    def _variable(self, name: str, position: int) -> Token:
        if name not in self.symbols:
            raise UnknownVariableError(name, position)
        return Token(TokenKind.VARIABLE, name, bool(self.symbols[name]), position)


def tokenize(text: str, symbols: Mapping[str, bool]) -> list[Token]:
    """Scan a whole condition, including the trailing EOF token."""
    scanner = Scanner(text, symbols)
    tokens = []
    while True:
        token = scanner.next_token()
        tokens.append(token)
        if token.kind is TokenKind.EOF:
            return tokens
