from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .config import TAPE_SIZE


@dataclass
class ExecutionState:
    tape_size: int = TAPE_SIZE
    memory: np.ndarray = field(init=False, repr=False)
    pointer: int = 0
    pc: int = 0
    steps: int = 0

    def __post_init__(self) -> None:
        self.memory = np.zeros(self.tape_size, dtype=np.uint8)

    def reset(self) -> None:
        self.memory.fill(0)
        self.pointer = 0
        self.pc = 0
        self.steps = 0

    @property
    def cell(self) -> int:
        return int(self.memory[self.pointer])
