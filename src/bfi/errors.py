from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Outcome(Enum):
    OK = "ok"
    SYNTAX_ERROR = "syntax_error"
    RIGHT_OVERFLOW = "right_overflow"
    LEFT_OVERFLOW = "left_overflow"

    @property
    def is_fault(self) -> bool:
        return self is not Outcome.OK


_DESCRIPTIONS = {
    Outcome.SYNTAX_ERROR: "uneven brackets",
    Outcome.RIGHT_OVERFLOW: "memory pointer moved past the last cell",
    Outcome.LEFT_OVERFLOW: "memory pointer moved before the first cell",
}


def _build_context(program: str, position: int, *, context: int = 8) -> str:
    if not program:
        return "  (empty program)"
    idx = min(max(0, position), len(program) - 1)
    start = max(0, idx - context)
    end = min(len(program), idx + context + 1)
    caret = ' ' * (idx - start) + '^'
    return f"  {program[start:end]}\n  {caret}"


def _hint_for(outcome: Outcome, program: str) -> Optional[str]:
    if outcome is Outcome.SYNTAX_ERROR:
        opens = program.count('[')
        closes = program.count(']')
        if opens > closes:
            return f"{opens - closes} '[' never closed."
        if closes > opens:
            return f"{closes - opens} extra ']'."
        return "A ']' appears before its matching '['."
    if outcome is Outcome.RIGHT_OVERFLOW:
        return 'Increase the memory size or check for a runaway ">" loop.'
    if outcome is Outcome.LEFT_OVERFLOW:
        return 'Cell 0 is the leftmost cell; check for a runaway "<" loop.'
    return None


def _first_unbalanced(program: str) -> int:
    depth = 0
    opened: List[int] = []
    for i, ch in enumerate(program):
        if ch == '[':
            depth += 1
            opened.append(i)
        elif ch == ']':
            depth -= 1
            if depth < 0:
                return i
            opened.pop()
    return opened[0] if opened else -1


@dataclass(frozen=True)
class Fault:
    outcome: Outcome
    position: int
    memory_pointer: int
    message: str

    def __str__(self) -> str:
        return self.message


def make_fault(*, outcome: Outcome, program: str, position: int, memory_pointer: int) -> Fault:
    """Build a Fault with a context snippet pointing at the offending instruction.

    For syntax errors ``position`` is ignored and the first unbalanced bracket
    is located instead.
    """
    if outcome is Outcome.SYNTAX_ERROR:
        position = _first_unbalanced(program)
    ctx = _build_context(program, position)
    hint = _hint_for(outcome, program)
    hint_block = f"\nHint: {hint}" if hint else ""
    where = f"instruction {position}" if position >= 0 else "program"
    return Fault(
        outcome=outcome,
        position=position,
        memory_pointer=memory_pointer,
        message=f"{outcome.name}: {_DESCRIPTIONS[outcome]} ({where}, cell {memory_pointer})\n{ctx}{hint_block}",
    )
