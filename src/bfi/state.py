from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .program import MIN_MEMORY_SIZE, clamp_memory_size


def _zeroed(memory_size: int) -> np.ndarray:
    return np.zeros(clamp_memory_size(memory_size), dtype=np.uint8)


@dataclass
class EngineState:
    memory: np.ndarray = field(default_factory=lambda: _zeroed(MIN_MEMORY_SIZE))
    program: str = ''
    instruction_pointer: int = -1
    memory_pointer: int = 0
    loop_depth: int = 0

    @classmethod
    def with_size(cls, memory_size: int) -> "EngineState":
        return cls(memory=_zeroed(memory_size))

    def reset(self, memory_size: Optional[int] = None) -> None:
        self.instruction_pointer = -1
        self.memory_pointer = 0
        self.loop_depth = 0
        if memory_size is not None:
            self.memory = _zeroed(memory_size)
        else:
            self.memory.fill(0)

    @property
    def memory_size(self) -> int:
        return len(self.memory)

    @property
    def cell(self) -> int:
        return int(self.memory[self.memory_pointer])

    @cell.setter
    def cell(self, value: int) -> None:
        self.memory[self.memory_pointer] = value & 0xFF

