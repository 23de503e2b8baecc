"""
Command-line entry point for interpt.

Parses a file (or an inline snippet) and prints the rendered program,
its tokens, or an indented node dump. Without any source it starts the
interactive loop.

xwest
"""

import argparse
import logging
import sys
from collections import Counter
from typing import List, Optional, TextIO

from . import __version__
from .lexer.lexer import Lexer
from .parser.ast_nodes import ASTNode, walk
from .parser.parser import Parser
from . import repl

logger = logging.getLogger(__name__)


def _dump(node: ASTNode, out: TextIO, depth: int = 0):
    out.write(f"{'  ' * depth}{node.node_type.value}: {node}\n")
    for child in node.children():
        _dump(child, out, depth + 1)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="interpt",
        description="Lex and parse interpt source code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    interpt program.mk                # Print the parsed program
    interpt -e "5 + 5 * 10"           # Parse an inline snippet
    interpt --tokens program.mk       # Print the token stream
    interpt --dump -e "let x = 1;"    # Print the AST node by node
    interpt                           # Start the interactive loop
        """
    )

    parser.add_argument('file', nargs='?',
                        help='Source file to parse')
    parser.add_argument('-e', '--eval', dest='source', metavar='SOURCE',
                        help='Parse SOURCE instead of a file')

    output = parser.add_mutually_exclusive_group()
    output.add_argument('--tokens', action='store_true',
                        help='Print tokens instead of the parsed program')
    output.add_argument('--dump', action='store_true',
                        help='Print every AST node with its rendering')

    parser.add_argument('--repl-mode', choices=repl.MODES, default='tokens',
                        help='What the interactive loop echoes (default: tokens)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')

    return parser


def _log_lexer_warnings(lexer: Lexer):
    if not lexer.has_warnings():
        return
    for warning in lexer.warnings:
        logger.warning("%s at %s", warning.message, warning.diagnostic.location)


def run(source: str, filename: str, args: argparse.Namespace, out: TextIO) -> int:
    """Process one source text; returns the exit status."""
    lexer = Lexer(source, filename)

    if args.tokens:
        for token in lexer.tokenize():
            out.write(f"{token}\n")
        _log_lexer_warnings(lexer)
        return 0

    parser = Parser(lexer)
    program = parser.parse_program()
    _log_lexer_warnings(lexer)

    if parser.diagnostics:
        for error in parser.diagnostics:
            out.write(str(error))
        categories = Counter(error.category for error in parser.diagnostics)
        logger.info("%d parse error(s): %s", len(parser.diagnostics),
                    ", ".join(f"{name} x{count}" for name, count in categories.items()))
        return 1

    logger.info("parsed %d statement(s), %d node(s)",
                len(program.statements), sum(1 for _ in walk(program)))

    if args.dump:
        _dump(program, out)
    else:
        out.write(f"{program}\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the interpt command"""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.source is not None and args.file is not None:
        arg_parser.error("give either a FILE or --eval SOURCE, not both")

    if args.source is not None:
        return run(args.source, "<eval>", args, sys.stdout)

    if args.file is not None:
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                source = f.read()
        except OSError as e:
            logger.error("cannot read %s: %s", args.file, e)
            return 1
        return run(source, args.file, args, sys.stdout)

    try:
        repl.start(sys.stdin, sys.stdout, mode=args.repl_mode)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
