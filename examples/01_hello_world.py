#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfi.api import run_string


def main():
    code = """
    ++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]
    >>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++.
    """

    result = run_string(code)
    sys.stdout.write(result.text)
    if result.text != "Hello World!\n":
        print(f"BAD: {result.text!r}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
