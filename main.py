from __future__ import annotations
from typing import List
from lexer import Lexer, LexError
from tokens import Token, TokenType


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def format_token(index: int, token: Token, show_spans: bool = True) -> str:
    line = f"{index:3}: {token.type}"
    if token.value is not None:
        line += f" {token.value!r}"
    if show_spans:
        line += f" @ {token.span}"
    return line


def underline(text: str, error: LexError) -> List[str]:
    """Return the source line containing the error and a caret marker under it."""
    data = text.encode("utf-8")
    line_start = data.rfind(b"\n", 0, error.span.start) + 1
    line_end = data.find(b"\n", error.span.start)
    if line_end == -1:
        line_end = len(data)
    source_line = data[line_start:line_end].decode("utf-8", errors="replace")
    pad = len(data[line_start : error.span.start].decode("utf-8", errors="replace"))
    return [f"    {source_line}", "    " + " " * pad + "^"]


def dump_tokens(text: str, *, show_spans: bool = True, recover: bool = False) -> List[str]:
    """Lex `text` and return printable lines, one per token.

    Without `recover` the first lexical error is raised. With it, the error is
    reported inline and scanning resumes after the offending lexeme.
    """
    lexer = Lexer(text)
    lines = []
    index = 0
    while True:
        try:
            token = lexer.next_token()
        except LexError as e:
            if not recover:
                raise
            lines.append(f"error: {e}")
            lines.extend(underline(text, e))
            lexer.recover()
            continue
        lines.append(format_token(index, token, show_spans))
        index += 1
        if token.type == TokenType.EOF:
            break
    return lines


def process_program(text: str, *, show_spans: bool = True, recover: bool = False) -> None:
    try:
        for line in dump_tokens(text, show_spans=show_spans, recover=recover):
            print(line)
    except LexError as e:
        print(f"Syntax Error: {e}")
        for line in underline(text, e):
            print(line)


def interactive_mode(show_spans: bool = True, recover: bool = False) -> None:
    """Run an interactive token dump reading lines from stdin."""
    print("\nInteractive Lexer Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter source: ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            process_program(text, show_spans=show_spans, recover=recover)

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(
        description="Dump the token stream of a file or of lines read interactively"
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
    parser.add_argument(
        "--no-spans",
        dest="show_spans",
        action="store_false",
        help="Do not print token spans",
    )
    parser.add_argument(
        "--recover",
        dest="recover",
        action="store_true",
        help="Report lexical errors and keep scanning after the offending character",
    )

    args = parser.parse_args()

    if args.interactive:
        interactive_mode(show_spans=args.show_spans, recover=args.recover)
    elif args.file:
        try:
            with open(args.file, "r", encoding="utf-8", newline="") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            sys.exit(1)

        process_program(text, show_spans=args.show_spans, recover=args.recover)
    else:
        parser.print_help()
