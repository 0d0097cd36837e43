#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfi import Engine
from bfi.console import ConsoleInput, ConsoleOutput


def main():
    # Echo one line back, stopping at the newline.
    code = ",----------[++++++++++.,----------]"

    engine = Engine(read=ConsoleInput(prompt="type a line: "), write=ConsoleOutput(), memory_size=8)
    engine.run(code)
    print()


if __name__ == "__main__":
    main()
