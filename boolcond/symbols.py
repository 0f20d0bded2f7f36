"""Build symbol tables from JSON documents and NAME=VALUE assignments."""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .errors import SymbolTableError
from .scanner import IDENTIFIER_CHARS

logger = logging.getLogger(__name__)

TRUE_WORDS = {"true", "yes", "on", "1"}
FALSE_WORDS = {"false", "no", "off", "0"}


def parse_bool(text: str) -> bool:
    """Parse a boolean word such as true/false, yes/no, on/off or 1/0."""
    word = text.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise SymbolTableError(f"Not a boolean value: {text!r}")


def parse_assignment(text: str) -> tuple[str, bool]:
    """Parse a NAME=VALUE assignment.

    Examples:
        parse_assignment("debug=true") -> ("debug", True)
        parse_assignment("beta = off") -> ("beta", False)
    """
    name, sep, value = text.partition("=")
    name = name.strip()
    if not sep or not name:
        raise SymbolTableError(f"Expected NAME=VALUE, got {text!r}")
    return name, parse_bool(value)


def _check_name(name: str) -> None:
    if not name or any(c not in IDENTIFIER_CHARS for c in name):
        logger.warning("Symbol %r can never be referenced by a condition", name)


def load_symbols(data: Mapping[str, Any]) -> dict[str, bool]:
    """Validate a mapping and return it as a symbol table.

    Values must be booleans, or strings accepted by parse_bool().
    """
    if not isinstance(data, Mapping):
        raise SymbolTableError(f"Symbol table must be an object, got {type(data).__name__}")

    symbols = {}
    for name, value in data.items():
        if not isinstance(name, str):
            raise SymbolTableError(f"Symbol name must be a string, got {name!r}")
        if isinstance(value, bool):
            symbols[name] = value
        elif isinstance(value, str):
            symbols[name] = parse_bool(value)
        else:
            raise SymbolTableError(f"Symbol {name!r} must be a boolean, got {value!r}")
        _check_name(name)
    return symbols


def load_symbols_json(text: str) -> dict[str, bool]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SymbolTableError(f"Invalid JSON symbol table: {e}") from e
    return load_symbols(data)


def load_symbols_file(path: str | Path) -> dict[str, bool]:
    """Load a symbol table from a JSON file containing one object."""
    try:
        text = Path(path).read_text()
    except OSError as e:
        raise SymbolTableError(f"Cannot read symbol table {path}: {e}") from e
    return load_symbols_json(text)


def build_symbols(
    *,
    file: str | Path | None = None,
    json_text: str | None = None,
    assignments: Iterable[str] = (),
) -> dict[str, bool]:
    """Merge symbol sources; later sources override earlier ones.

    Order: file, then inline JSON, then NAME=VALUE assignments.
    """
    symbols: dict[str, bool] = {}
    if file:
        symbols.update(load_symbols_file(file))
    if json_text:
        symbols.update(load_symbols_json(json_text))
    for assignment in assignments:
        name, value = parse_assignment(assignment)
        _check_name(name)
        symbols[name] = value
    return symbols
