from __future__ import annotations

import logging
from typing import Optional, Set

from . import program as programs
from .diagnostics import DiagnosticPolicy, SubstituteDiagnostic
from .errors import Fault, Outcome, make_fault
from .instructions import InputCapability, IOPorts, OutputCapability, execute
from .state import EngineState

logger = logging.getLogger(__name__)


class Engine:
    """Interpreter for the eight-instruction tape language.

    ``read`` is called with no arguments for each ``,`` and returns a byte or
    ``None``; ``write`` receives each byte produced by ``.``. Either may be
    omitted. Faults never raise: they are handed to ``policy``, which by
    default replaces the running program with a canned message.
    """

    def __init__(
        self,
        read: Optional[InputCapability] = None,
        write: Optional[OutputCapability] = None,
        memory_size: int = programs.DEFAULT_MEMORY_SIZE,
        *,
        policy: Optional[DiagnosticPolicy] = None,
    ):
        self.io = IOPorts(read=read, write=write)
        self.policy = policy if policy is not None else SubstituteDiagnostic()
        self.state = EngineState.with_size(memory_size)
        self.last_fault: Optional[Fault] = None
        self._halted = False
        self._handled: Set[Outcome] = set()

    @property
    def memory(self):
        return self.state.memory

    @property
    def running(self) -> bool:
        return not self._halted and self.state.instruction_pointer + 1 < len(self.state.program)

    def reset(self, memory_size: Optional[int] = None) -> None:
        self.state.reset(memory_size)

    def load(self, source: str) -> Outcome:
        code, outcome = programs.load(source)
        self.state.program = code
        self.state.instruction_pointer = -1
        self.state.loop_depth = 0
        self._halted = False
        self.last_fault = None
        self._handled.clear()
        logger.debug("loaded %d instructions, %d cells", len(code), self.state.memory_size)
        if outcome.is_fault:
            self._fault(outcome)
        return outcome

    def step(self) -> bool:
        """Execute the next instruction. Returns whether more remain."""
        if self._halted:
            return False
        state = self.state
        state.instruction_pointer += 1
        if state.instruction_pointer >= len(state.program):
            return False

        outcome = execute(state.program[state.instruction_pointer], state, self.io)
        if outcome.is_fault:
            self._fault(outcome)
        return self.running

    def run(self, source: str, reset: bool = True) -> Outcome:
        if reset:
            self.reset()
        outcome = self.load(source)
        while self.step():
            pass
        if self.last_fault is not None:
            outcome = self.last_fault.outcome
        return outcome

    def _fault(self, outcome: Outcome) -> None:
        state = self.state
        fault = make_fault(
            outcome=outcome,
            program=state.program,
            position=state.instruction_pointer,
            memory_pointer=state.memory_pointer,
        )
        logger.warning("%s", fault)
        # Keep the first fault of a run.
        if self.last_fault is None:
            self.last_fault = fault

        if outcome in self._handled:
            logger.warning("%s repeated while running a replacement program; halting", outcome.name)
            self._halted = True
            return
        self._handled.add(outcome)

        replacement = self.policy.handle(self, outcome)
        if replacement is None:
            self._halted = True
            return
        code = programs.filter_source(replacement)
        if programs.check_brackets(code).is_fault:
            logger.warning("replacement program has uneven brackets; halting")
            self._halted = True
            return
        state.program = code
        state.instruction_pointer = -1
        state.loop_depth = 0
