"""Instruction handlers.

Each handler takes the engine state and the I/O ports explicitly and returns
an :class:`~bfi.errors.Outcome`. Handlers never raise for program faults; a
pointer that leaves the tape is reported through the returned outcome.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .errors import Outcome
from .state import EngineState

InputCapability = Callable[[], Optional[int]]
OutputCapability = Callable[[int], object]


@dataclass(frozen=True)
class IOPorts:
    read: Optional[InputCapability] = None
    write: Optional[OutputCapability] = None


Handler = Callable[[EngineState, IOPorts], Outcome]


def _op_inc(state: EngineState, io: IOPorts) -> Outcome:
    state.cell = state.cell + 1
    return Outcome.OK


def _op_dec(state: EngineState, io: IOPorts) -> Outcome:
    state.cell = state.cell - 1
    return Outcome.OK


def _op_right(state: EngineState, io: IOPorts) -> Outcome:
    state.memory_pointer += 1
    if state.memory_pointer >= state.memory_size:
        return Outcome.RIGHT_OVERFLOW
    return Outcome.OK


def _op_left(state: EngineState, io: IOPorts) -> Outcome:
    state.memory_pointer -= 1
    if state.memory_pointer < 0:
        return Outcome.LEFT_OVERFLOW
    return Outcome.OK


def _op_output(state: EngineState, io: IOPorts) -> Outcome:
    if io.write is not None:
        io.write(state.cell)
    return Outcome.OK


def _op_input(state: EngineState, io: IOPorts) -> Outcome:
    value = io.read() if io.read is not None else None
    state.cell = 0 if value is None else int(value)
    return Outcome.OK


def _op_loop_open(state: EngineState, io: IOPorts) -> Outcome:
    state.loop_depth += 1
    if state.cell != 0:
        return Outcome.OK

    # Skip the body: walk forward to the ']' that closes this loop.
    program = state.program
    target = state.loop_depth - 1
    pos = state.instruction_pointer
    level = state.loop_depth
    while True:
        pos += 1
        if program[pos] == '[':
            level += 1
        elif program[pos] == ']':
            level -= 1
        if level == target:
            break

    state.instruction_pointer = pos
    state.loop_depth -= 1
    return Outcome.OK


def _op_loop_close(state: EngineState, io: IOPorts) -> Outcome:
    # Walk back to the matching '[' and land just before it so the
    # condition is re-evaluated on the next fetch.
    program = state.program
    target = state.loop_depth - 1
    pos = state.instruction_pointer
    level = state.loop_depth
    while True:
        pos -= 1
        if program[pos] == '[':
            level -= 1
        elif program[pos] == ']':
            level += 1
        if level == target:
            break

    state.instruction_pointer = pos - 1
    state.loop_depth -= 1
    return Outcome.OK


HANDLERS: Dict[str, Handler] = {
    '+': _op_inc,
    '-': _op_dec,
    '>': _op_right,
    '<': _op_left,
    '.': _op_output,
    ',': _op_input,
    '[': _op_loop_open,
    ']': _op_loop_close,
}


def execute(instruction: str, state: EngineState, io: IOPorts) -> Outcome:
    return HANDLERS[instruction](state, io)
