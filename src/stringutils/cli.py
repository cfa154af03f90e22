"""
stringutils Command-Line Interface.

Exposes the string helpers as shell commands.

Usage:
    stringutils has-length "some text"
    stringutils has-text -q "   "          # Exit status 1
    stringutils replace an XY banana
    stringutils tokenize ",;" "a, b;;c" --json
    echo "a b" | stringutils tokenize " "  # Read from stdin
    stringutils tokenize , -f input.csv    # Read from a file
    stringutils info
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from stringutils import __version__
from stringutils.errors import InputError, StringUtilsError
from stringutils.strings import has_length, has_text, replace, tokenize

logger = logging.getLogger("stringutils")


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.CYAN = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    import os

    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the TEXT / --file input selection shared by text commands."""
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Input text (default: read standard input)",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help="Read input text from a UTF-8 file",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="stringutils",
        description="stringutils - null-safe string checks, replacement and tokenization",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Logging level (default: warning)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Predicate commands
    for name, help_text in (
        ("has-length", "Check that the text is not empty"),
        ("has-text", "Check that the text contains a non-whitespace character"),
    ):
        predicate_parser = subparsers.add_parser(name, help=help_text)
        _add_input_arguments(predicate_parser)
        predicate_parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Print nothing; report the result through the exit status",
        )

    # Replace command
    replace_parser = subparsers.add_parser(
        "replace",
        help="Replace every occurrence of a substring",
    )
    replace_parser.add_argument("old", help="Substring to replace")
    replace_parser.add_argument("new", help="Substring to insert")
    _add_input_arguments(replace_parser)

    # Tokenize command
    tokenize_parser = subparsers.add_parser(
        "tokenize",
        aliases=["t"],
        help="Split text at any of the given delimiter characters",
    )
    tokenize_parser.add_argument(
        "delimiters",
        help="Delimiter characters; each one separates tokens on its own",
    )
    _add_input_arguments(tokenize_parser)
    tokenize_parser.add_argument(
        "--no-trim",
        action="store_true",
        help="Keep leading and trailing whitespace of each token",
    )
    tokenize_parser.add_argument(
        "--keep-empty",
        action="store_true",
        help="Keep tokens that are empty after trimming",
    )
    tokenize_parser.add_argument(
        "--json",
        action="store_true",
        help="Print tokens as a JSON array instead of one per line",
    )

    subparsers.add_parser(
        "info",
        help="Show version and command information",
    )

    return parser


def read_input(args: argparse.Namespace) -> str:
    """Return the input text selected by TEXT, --file or standard input."""
    input_path: Optional[Path] = args.file

    if input_path is not None and args.text is not None:
        raise InputError("Give either TEXT or --file, not both")

    if input_path is not None:
        if not input_path.is_file():
            raise InputError("File not found", input_path)
        logger.debug(f"Reading input from {input_path}")
        try:
            return input_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            raise InputError("Input is not valid UTF-8", input_path)
        except OSError as e:
            raise InputError(f"Cannot read file ({e.strerror})", input_path)

    if args.text is not None:
        return args.text

    logger.debug("Reading input from standard input")
    try:
        return sys.stdin.read()
    except UnicodeDecodeError:
        raise InputError("Input is not valid UTF-8")


def _report_predicate(result: bool, quiet: bool) -> int:
    if quiet:
        return 0 if result else 1
    print("true" if result else "false")
    return 0


def cmd_has_length(args: argparse.Namespace) -> int:
    """Handle the has-length command."""
    try:
        text = read_input(args)
    except StringUtilsError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    result = has_length(text)
    logger.debug(f"has_length -> {result}")
    return _report_predicate(result, args.quiet)


def cmd_has_text(args: argparse.Namespace) -> int:
    """Handle the has-text command."""
    try:
        text = read_input(args)
    except StringUtilsError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    result = has_text(text)
    logger.debug(f"has_text -> {result}")
    return _report_predicate(result, args.quiet)


def cmd_replace(args: argparse.Namespace) -> int:
    """Handle the replace command."""
    try:
        text = read_input(args)
    except StringUtilsError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    result = replace(text, args.old, args.new)
    if result is text:
        logger.debug(f"No occurrence of {args.old!r}; input returned unchanged")

    # Input read from a file or stdin usually ends with its own newline
    print(result, end="" if result.endswith("\n") else "\n")
    return 0


def cmd_tokenize(args: argparse.Namespace) -> int:
    """Handle the tokenize command."""
    try:
        text = read_input(args)
    except StringUtilsError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    tokens = tokenize(
        text,
        args.delimiters,
        trim_tokens=not args.no_trim,
        ignore_empty_tokens=not args.keep_empty,
    )
    logger.debug(f"tokenize -> {len(tokens)} token(s)")

    if args.json:
        print(json.dumps(tokens, ensure_ascii=False))
    else:
        for token in tokens:
            print(token)
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info command."""
    print(f"""
{Colors.BOLD}stringutils{Colors.RESET}
===========

{Colors.CYAN}Version:{Colors.RESET} {__version__}

{Colors.CYAN}Commands:{Colors.RESET}
  stringutils has-length [TEXT]          Text is not empty
  stringutils has-text [TEXT]            Text has a non-whitespace character
  stringutils replace OLD NEW [TEXT]     Replace every occurrence of OLD
  stringutils tokenize DELIMS [TEXT]     Split at any delimiter character

{Colors.CYAN}Input:{Colors.RESET}
  TEXT argument, -f/--file PATH, or standard input
""")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    log_level = getattr(logging, args.log_level.upper())
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.setLevel(log_level)

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "has-length": cmd_has_length,
        "has-text": cmd_has_text,
        "replace": cmd_replace,
        "tokenize": cmd_tokenize,
        "t": cmd_tokenize,
        "info": cmd_info,
    }

    handler = command_handlers.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
