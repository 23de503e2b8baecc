"""
Interactive read-print loop for interpt.

Each input line gets a fresh lexer. In "tokens" mode every token on the
line is printed until EOF; in "ast" mode the line is parsed and either
the rendered program or the parser errors are printed.

xwest
"""

import logging
import sys
from typing import TextIO

from .lexer.lexer import Lexer
from .parser.parser import Parser

logger = logging.getLogger(__name__)

PROMPT = ">> "
MODES = ("tokens", "ast")


def print_tokens(line: str, out: TextIO):
    for token in Lexer(line, "<stdin>"):
        out.write(f"{token}\n")


def print_program(line: str, out: TextIO):
    parser = Parser(Lexer(line, "<stdin>"))
    program = parser.parse_program()

    if parser.errors:
        out.write("parser errors:\n")
        for message in parser.errors:
            out.write(f"\t{message}\n")
        return

    out.write(f"{program}\n")


def start(in_stream: TextIO, out_stream: TextIO, mode: str = "tokens"):
    """
    Run the loop until ``in_stream`` is exhausted.

    Args:
        in_stream: Source of input lines
        out_stream: Where prompts and results are written
        mode: "tokens" to echo tokens, "ast" to echo the parsed program
    """
    if mode not in MODES:
        raise ValueError(f"Unknown REPL mode: {mode!r} (expected one of {', '.join(MODES)})")

    handle_line = print_tokens if mode == "tokens" else print_program
    logger.debug("starting REPL in %s mode", mode)

    while True:
        out_stream.write(PROMPT)
        out_stream.flush()

        line = in_stream.readline()
        if not line:
            return

        handle_line(line.rstrip("\n"), out_stream)


def main():
    """Console entry point: token-echo REPL on stdin/stdout."""
    start(sys.stdin, sys.stdout)


if __name__ == "__main__":
    main()
