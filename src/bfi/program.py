from __future__ import annotations

from typing import Tuple

from .errors import Outcome

LEGAL_CHARS = '<>+-.,[]'
MIN_MEMORY_SIZE = 5
DEFAULT_MEMORY_SIZE = 30000


def is_code_char(ch: str) -> bool:
    return ch in LEGAL_CHARS


def filter_source(source: str) -> str:
    return ''.join(c for c in source if is_code_char(c))


def check_brackets(program: str) -> Outcome:
    # A negative depth means an unmatched ']' no matter what follows.
    depth = 0
    for ch in program:
        if ch == '[':
            depth += 1
        elif ch == ']':
            depth -= 1
        if depth < 0:
            break
    return Outcome.OK if depth == 0 else Outcome.SYNTAX_ERROR


def load(source: str) -> Tuple[str, Outcome]:
    program = filter_source(source)
    return program, check_brackets(program)


def clamp_memory_size(memory_size: int) -> int:
    return max(int(memory_size), MIN_MEMORY_SIZE)
