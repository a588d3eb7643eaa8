#!/usr/bin/env python3
"""
Scanner Demo
============

Tokenizes a Teeny program and shows the statements the parser would
see, one per line. Run from the repository root:

    python examples/scanner_demo.py examples/fibonacci.teeny
"""

import sys
from pathlib import Path

from teeny_sdk import Scanner, TokenKind, LexError


def main() -> int:
    path = Path(sys.argv[1] if len(sys.argv) > 1 else Path(__file__).parent / "fibonacci.teeny")
    scanner = Scanner(path.read_text(encoding="utf-8"), str(path))

    statement = []
    line = 1
    try:
        for token in scanner:
            if token.kind in (TokenKind.NEWLINE, TokenKind.END_OF_INPUT):
                if statement:
                    print(f"{line:>3}: " + " ".join(statement))
                statement = []
            else:
                if not statement:
                    line = token.line
                statement.append(f"{token.kind.name}({token.lexeme})")
    except LexError as e:
        print(e, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
