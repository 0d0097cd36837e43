from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from .errors import Outcome

if TYPE_CHECKING:
    from .engine import Engine


# Canned programs that print an error message through the output capability.
# Each is balanced and stays within cells 0..4, so it runs on a tape of
# MIN_MEMORY_SIZE cells.
UNEVEN_BRACKETS_PROGRAM = (
    '++++++++++++++++++++++++++++++++>++++++++++[>++++++++++++>+++++++++++>++++++++++<<<-]'
    '>---.>.>+.<<+.>>.<.<<<.>>>>---.<++++.>-.++.<-------.>++.<<--.-.'
)
RIGHT_OVERFLOW_PROGRAM = (
    '++++++++++++++++++++++++++++++++>++++++++++[>++++++++++++>+++++++++++>++++++++++<<<-]'
    '>>+.<---.-.<<.>>>.>++.<<<<.>>>--.>-.<.++.+++.<+++++.<<.>>>>---.<---.<----.>-.>++.<<--.<<.>>++.'
)
LEFT_OVERFLOW_PROGRAM = (
    '++++++++++++++++++++++++++++++++>++++++++++[>++++++++++++>+++++++++++>++++++++++<<<-]'
    '>>+.<---.-.<<.>>>.>++.<<<<.>>>--.>-.<.++.+++.<+++++.<<.>>>>---.<---.<----.>-.>++.<<--.<<.>>>--.'
)

DIAGNOSTIC_PROGRAMS: Dict[Outcome, str] = {
    Outcome.SYNTAX_ERROR: UNEVEN_BRACKETS_PROGRAM,
    Outcome.RIGHT_OVERFLOW: RIGHT_OVERFLOW_PROGRAM,
    Outcome.LEFT_OVERFLOW: LEFT_OVERFLOW_PROGRAM,
}

DIAGNOSTIC_MESSAGES: Dict[Outcome, bytes] = {
    Outcome.SYNTAX_ERROR: b'uneven brackets',
    Outcome.RIGHT_OVERFLOW: b'out of memory bounds u',
    Outcome.LEFT_OVERFLOW: b'out of memory bounds l',
}


class DiagnosticPolicy:
    """Decides what the engine does after a fault.

    ``handle`` returns the program to continue with (executed from its first
    instruction), or ``None`` to stop the run. A replacement with uneven
    brackets stops the run, and so does a second fault of the same kind.
    """

    def handle(self, engine: "Engine", outcome: Outcome) -> Optional[str]:
        raise NotImplementedError


class SubstituteDiagnostic(DiagnosticPolicy):
    """Abandon the user program and run the canned message for the fault.

    Overflows reset the engine first. Uneven brackets only swap the program,
    so the message runs on whatever memory the run started with.
    """

    def handle(self, engine: "Engine", outcome: Outcome) -> Optional[str]:
        if outcome is not Outcome.SYNTAX_ERROR:
            engine.reset()
        return DIAGNOSTIC_PROGRAMS[outcome]


class Halt(DiagnosticPolicy):
    """Stop without output. Overflows still reset the engine."""

    def handle(self, engine: "Engine", outcome: Outcome) -> Optional[str]:
        if outcome is not Outcome.SYNTAX_ERROR:
            engine.reset()
        return None
