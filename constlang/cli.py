"""Interactive read-evaluate-print loop."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from constlang.errors import ConstLangError
from constlang.parser import Parser

PROMPT = "> "


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read statements from standard input until end of input, printing results."""
    parser = Parser()
    stdin, stdout, stderr = sys.stdin, sys.stdout, sys.stderr
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return 0
        try:
            result = parser.parse(line)
        except ConstLangError as error:
            stderr.write(f"Error: {error}\n")
            continue
        if result:
            stdout.write(f"{result}\n")


if __name__ == "__main__":
    raise SystemExit(main())