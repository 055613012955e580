"""Main CLI entry point for rdmtext."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.analyze import analyze_file, load_schemas
from ..codec.builder import StringMessageBuilder
from ..codec.printer import render_message
from ..config import BuilderConfig

_LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the rdmtext CLI.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="rdmtext: RDM Text Message Builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rdmtext --analyze schemas.py                              Analyze schemas
  rdmtext --schema schemas.py --message DEVICE_LABEL lamp   Build a message
  rdmtext --schema schemas.py --message DMX_ADDRESS --json 12
        """,
    )

    parser.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Analyze message schemas and show token counts",
    )

    parser.add_argument(
        "--schema",
        metavar="FILE",
        type=str,
        help="Python file defining the schemas to build against",
    )

    parser.add_argument(
        "--message",
        metavar="NAME",
        type=str,
        help="Name of the schema to build",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the built message as JSON instead of canonical text",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if tokens are left over after the last field",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"rdmtext {__version__}",
    )

    parser.add_argument(
        "tokens",
        nargs="*",
        metavar="TOKEN",
        help="Field values, in schema order",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=_LOG_LEVELS[min(args.verbose, len(_LOG_LEVELS) - 1)],
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Handle --analyze
    if args.analyze:
        file_path = Path(args.analyze)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            analyze_file(file_path)
            return 0
        except Exception as e:
            print(f"Error analyzing file: {e}", file=sys.stderr)
            return 1

    # Handle --schema/--message
    if args.schema:
        if not args.message:
            print("Error: --schema requires --message NAME", file=sys.stderr)
            return 1
        return _build(
            Path(args.schema), args.message, args.tokens, strict=args.strict, as_json=args.json
        )

    # If no command specified, show help
    parser.print_help()
    return 0


def _build(file_path: Path, name: str, tokens: list[str], strict: bool, as_json: bool) -> int:
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        schemas = load_schemas(file_path)
    except Exception as e:
        print(f"Error loading schemas: {e}", file=sys.stderr)
        return 1

    schema = schemas.get(name)
    if schema is None:
        available = ", ".join(sorted(schemas)) or "none"
        print(f"Error: Unknown message {name} (available: {available})", file=sys.stderr)
        return 1

    builder = StringMessageBuilder(tokens, BuilderConfig(allow_trailing_tokens=not strict))
    builder.traverse(schema)
    message = builder.get_message()
    if message is None:
        error = builder.get_error()
        if error is not None:
            print(f"Error with field {error.path}: {error.reason}", file=sys.stderr)
        return 1

    if as_json:
        print(message.model_dump_json(indent=2))
    else:
        sys.stdout.write(render_message(message))
    return 0


if __name__ == "__main__":
    sys.exit(main())
