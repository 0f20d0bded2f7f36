"""boolcond - Evaluate boolean conditions over a table of named flags."""

from .conditions import Parser, ParseResult, evaluate, explain
from .errors import (
    BoolcondError,
    ConditionError,
    ConditionLexError,
    ConditionSyntaxError,
    ExitCode,
    IncompleteConditionError,
    NestingTooDeepError,
    SymbolTableError,
    UnknownVariableError,
)
from .scanner import Token, TokenKind, tokenize

__version__ = "0.1.0"

__all__ = [
    "evaluate",
    "explain",
    "tokenize",
    "Parser",
    "ParseResult",
    "Token",
    "TokenKind",
    "BoolcondError",
    "ConditionError",
    "ConditionLexError",
    "UnknownVariableError",
    "ConditionSyntaxError",
    "IncompleteConditionError",
    "NestingTooDeepError",
    "SymbolTableError",
    "ExitCode",
]
