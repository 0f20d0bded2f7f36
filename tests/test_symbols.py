"""Tests for symbol table loading."""

import tempfile
import unittest
from pathlib import Path

from boolcond.errors import SymbolTableError
from boolcond.symbols import (
    build_symbols,
    load_symbols,
    load_symbols_file,
    load_symbols_json,
    parse_assignment,
    parse_bool,
)


class TestParseBool(unittest.TestCase):
    def test_true_words(self):
        for word in ["true", "TRUE", "yes", "on", "1", " True "]:
            self.assertTrue(parse_bool(word), word)

    def test_false_words(self):
        for word in ["false", "no", "Off", "0"]:
            self.assertFalse(parse_bool(word), word)

    def test_invalid(self):
        with self.assertRaises(SymbolTableError):
            parse_bool("maybe")


class TestParseAssignment(unittest.TestCase):
    def test_assignment(self):
        self.assertEqual(parse_assignment("debug=true"), ("debug", True))
        self.assertEqual(parse_assignment("beta = off"), ("beta", False))

    def test_missing_equals(self):
        with self.assertRaises(SymbolTableError):
            parse_assignment("debug")

    def test_missing_name(self):
        with self.assertRaises(SymbolTableError):
            parse_assignment("=true")


class TestLoadSymbols(unittest.TestCase):
    def test_booleans_and_strings(self):
        self.assertEqual(load_symbols({"a": True, "b": "no"}), {"a": True, "b": False})

    def test_rejects_non_boolean(self):
        with self.assertRaises(SymbolTableError):
            load_symbols({"a": 1})
        with self.assertRaises(SymbolTableError):
            load_symbols({"a": None})

    def test_rejects_non_object(self):
        with self.assertRaises(SymbolTableError):
            load_symbols_json("[true]")

    def test_invalid_json(self):
        with self.assertRaises(SymbolTableError):
            load_symbols_json("{a: true")

    def test_warns_on_unreferenceable_name(self):
        with self.assertLogs("boolcond.symbols", level="WARNING") as logs:
            symbols = load_symbols({"Feature": True})
        self.assertEqual(symbols, {"Feature": True})
        self.assertIn("Feature", logs.output[0])


class TestLoadSymbolsFile(unittest.TestCase):
    def test_load_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "flags.json"
            path.write_text('{"beta": true, "legacy": false}')
            self.assertEqual(load_symbols_file(path), {"beta": True, "legacy": False})

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(SymbolTableError):
                load_symbols_file(Path(tmpdir) / "missing.json")


class TestBuildSymbols(unittest.TestCase):
    def test_later_sources_override(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "flags.json"
            path.write_text('{"a": true, "b": true, "c": true}')
            symbols = build_symbols(
                file=path,
                json_text='{"b": false, "c": false}',
                assignments=["c=true"],
            )
        self.assertEqual(symbols, {"a": True, "b": False, "c": True})

    def test_empty(self):
        self.assertEqual(build_symbols(), {})


if __name__ == "__main__":
    unittest.main()
