"""CLI entry point for boolcond."""

import argparse
import json
import logging
import sys

from . import BoolcondError, ExitCode, explain, tokenize
from .symbols import build_symbols


def _add_symbol_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("expression", help="Condition to evaluate")
    parser.add_argument("--vars", help="Symbol table as a JSON object")
    parser.add_argument("--vars-file", "-f", help="Path to JSON symbol table")
    parser.add_argument(
        "--set",
        "-s",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Set a single symbol (repeatable, overrides --vars)",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="boolcond",
        description="boolcond - Evaluate boolean conditions over named flags",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Eval command
    eval_parser = subparsers.add_parser("eval", help="Evaluate a condition")
    _add_symbol_options(eval_parser)
    eval_parser.add_argument(
        "--explain", action="store_true", help="Also print the parsed expression"
    )
    eval_parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )

    # Tokens command
    tokens_parser = subparsers.add_parser("tokens", help="List the tokens of a condition")
    _add_symbol_options(tokens_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return ExitCode.SUCCESS

    try:
        if args.command == "eval":
            return cmd_eval(args)
        elif args.command == "tokens":
            return cmd_tokens(args)
    except BoolcondError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return ExitCode.RUNTIME_ERROR

    return ExitCode.SUCCESS


def _symbols(args) -> dict[str, bool]:
    return build_symbols(file=args.vars_file, json_text=args.vars, assignments=args.set)


def cmd_eval(args) -> int:
    """Evaluate a condition."""
    result = explain(args.expression, _symbols(args))
    value = "true" if result.value else "false"

    if args.output == "json":
        output = {"expression": args.expression, "value": result.value}
        if args.explain:
            output["reconstruction"] = result.reconstruction
        print(json.dumps(output, indent=2))
    elif args.explain:
        print(f"{result.reconstruction} => {value}")
    else:
        print(value)
    return ExitCode.SUCCESS


def cmd_tokens(args) -> int:
    """List tokens."""
    for token in tokenize(args.expression, _symbols(args)):
        if token.name:
            print(f"  {token.position:4} {token.kind!s:8} {token.name}={str(token.value).lower()}")
        else:
            print(f"  {token.position:4} {token.kind!s}")
    return ExitCode.SUCCESS


if __name__ == "__main__":
    sys.exit(main())
