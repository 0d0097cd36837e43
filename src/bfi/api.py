from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .diagnostics import Halt, SubstituteDiagnostic
from .engine import Engine
from .errors import Fault, Outcome
from .program import DEFAULT_MEMORY_SIZE


@dataclass(frozen=True)
class RunOptions:
    memory_size: int = DEFAULT_MEMORY_SIZE
    halt_on_error: bool = False


@dataclass(frozen=True)
class RunResult:
    output: bytes
    outcome: Outcome
    memory: bytes
    memory_pointer: int
    fault: Optional[Fault] = None

    @property
    def text(self) -> str:
        return self.output.decode('latin-1')


def _byte_reader(data: bytes):
    it: Iterator[int] = iter(data)
    return lambda: next(it, None)


def run_string(source: str, *, input_data: bytes | str = b"", options: Optional[RunOptions] = None) -> RunResult:
    opts = options if options is not None else RunOptions()
    if isinstance(input_data, str):
        input_data = input_data.encode('latin-1')

    output = bytearray()
    engine = Engine(
        read=_byte_reader(input_data),
        write=output.append,
        memory_size=opts.memory_size,
        policy=Halt() if opts.halt_on_error else SubstituteDiagnostic(),
    )
    outcome = engine.run(source)
    return RunResult(
        output=bytes(output),
        outcome=outcome,
        memory=engine.memory.tobytes(),
        memory_pointer=engine.state.memory_pointer,
        fault=engine.last_fault,
    )
