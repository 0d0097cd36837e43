from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .console import ConsoleInput, ConsoleOutput
from .diagnostics import Halt, SubstituteDiagnostic
from .engine import Engine
from .program import DEFAULT_MEMORY_SIZE


def _format_dump(memory, count: int) -> str:
    cells = [int(b) for b in memory[:count]]
    rows = [" ".join(f"{v:3d}" for v in cells[i:i + 8]) for i in range(0, len(cells), 8)]
    return "\n".join(rows)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run a program written in the eight-instruction tape language."
    )
    parser.add_argument("-e", "--execute", metavar="CODE", help="Program text (default: read from stdin)")
    parser.add_argument("--memory-size", type=int, default=DEFAULT_MEMORY_SIZE,
                        help=f"Number of cells (default {DEFAULT_MEMORY_SIZE}, minimum 5)")
    parser.add_argument("--halt-on-error", action="store_true",
                        help="Stop silently on errors instead of printing a message program")
    parser.add_argument("--dump", type=int, default=0, metavar="N", help="Print the first N cells after the run")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine events to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.execute is not None:
        source = args.execute
        read = ConsoleInput(sys.stdin)
    else:
        source = sys.stdin.read()
        read = None

    engine = Engine(
        read=read,
        write=ConsoleOutput(sys.stdout),
        memory_size=args.memory_size,
        policy=Halt() if args.halt_on_error else SubstituteDiagnostic(),
    )
    outcome = engine.run(source)

    if args.dump > 0:
        sys.stdout.write("\n" + _format_dump(engine.memory, args.dump) + "\n")
    sys.stdout.flush()

    if outcome.is_fault:
        if args.halt_on_error and engine.last_fault is not None:
            sys.stderr.write(f"{engine.last_fault}\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
