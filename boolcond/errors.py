"""boolcond error types and exit codes."""

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .scanner import Token


class ExitCode(IntEnum):
    """Process exit codes used by the command line front end."""
    SUCCESS = 0
    RUNTIME_ERROR = 1
    CONDITION_ERROR = 2
    INPUT_ERROR = 3


class BoolcondError(Exception):
    """Base error for all boolcond errors."""
    exit_code: ExitCode = ExitCode.RUNTIME_ERROR


class ConditionError(BoolcondError):
    """A condition could not be evaluated."""
    exit_code = ExitCode.CONDITION_ERROR


class ConditionLexError(ConditionError):
    """The scanner could not produce a token."""

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position


class UnknownVariableError(ConditionLexError):
    """A scanned identifier is missing from the symbol table."""

    def __init__(self, name: str, position: int):
        super().__init__(f"{name} does not exist", position)
        self.name = name


class ConditionSyntaxError(ConditionError):
    """A token of the wrong kind appeared where another was required."""

    def __init__(self, message: str, token: "Token"):
        super().__init__(message)
        self.token = token


class IncompleteConditionError(ConditionError):
    """Input ended, or an operator dangled, where an operand was required."""

    def __init__(self, message: str = "invalid condition"):
        super().__init__(message)


class NestingTooDeepError(ConditionError):
    """Parentheses nest deeper than the parser's recursion allows."""

    def __init__(self, message: str = "condition nested too deeply"):
        super().__init__(message)


class SymbolTableError(BoolcondError):
    """Error building a symbol table from user input."""
    exit_code = ExitCode.INPUT_ERROR
