from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple
from lexer import Lexer
from tokens import Token, TokenType
from errors import LexerError, ParseError
from ast_nodes import ProgramNode
from parser import Parser
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render

logger = logging.getLogger(__name__)

PROMPT = ">> "


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_text(text: str) -> Tuple[ProgramNode, List[ParseError]]:
    """Parse source text into a program plus the errors recorded on the way."""
    parser = Parser(Lexer(text))
    program = parser.parse_program()
    return program, parser.errors


def print_token_stream(text: str, limit: int = 50) -> None:
    """Print tokens one by one; lexical errors are shown inline and scanning goes on."""
    lexer = Lexer(text)
    lines: List[str] = []
    count = 0
    while True:
        try:
            token = lexer.next_token()
        except LexerError as e:
            lines.append(f"  {count:3}: Lexical error: {e}")
            count += 1
            continue
        lines.append(f"  {count:3}: {token}")
        count += 1
        if token.type == TokenType.EOF:
            break

    print(f"Tokens ({count}):")
    for line in lines[:limit]:
        print(line)
    if count > limit:
        print(f"  ... and {count - limit} more")


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_tree: bool = False,
    print_json: bool = False,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> List[ParseError]:
    """Process a single program: lex, parse and print the requested views.

    The program is always echoed back in its surface form; the other views
    are toggled by the flags. Returns the parse errors so callers can decide
    on an exit status.
    """
    if print_tokens:
        print_token_stream(text)

    program, errors = parse_text(text)

    surface = PrettyPrinter.print_program(program)
    if surface:
        print(surface)

    if print_tree:
        print("\nAST:")
        print(PrettyPrinter.print_ast(program))

    if print_json:
        print(json.dumps(ast_to_json(program), indent=2))

    if viz_path:
        try:
            write_and_render(program, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            # The Graphviz binaries are optional; report and keep going.
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    for e in errors:
        print(f"Parse error ({e.kind}): {e}")

    return errors


def interactive_mode(
    print_tokens: bool = False,
    print_tree: bool = False,
    print_json: bool = False,
) -> None:
    """Run the interactive REPL: read a line, parse it, print the program."""
    print("Monkey parser REPL (type 'quit' to exit)")

    while True:
        try:
            text = input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting...")
            break

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            break

        if not text:
            continue

        process_program(
            text,
            print_tokens=print_tokens,
            print_tree=print_tree,
            print_json=print_json,
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse Monkey source from a file or interactively from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--tree", dest="print_tree", action="store_true", help="Print the AST as a tree"
    )
    parser.add_argument(
        "--json", dest="print_json", action="store_true", help="Print the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        dest="verbose",
        action="store_true",
        help="Log parser recovery details",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
    )

    if args.interactive:
        interactive_mode(
            print_tokens=args.print_tokens,
            print_tree=args.print_tree,
            print_json=args.print_json,
        )
        return 0

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1

        logger.debug("parsing %s (%d chars)", args.file, len(text))
        errors = process_program(
            text,
            print_tokens=args.print_tokens,
            print_tree=args.print_tree,
            print_json=args.print_json,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
        )
        return 1 if errors else 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
