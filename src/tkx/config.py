from __future__ import annotations

from dataclasses import dataclass


TAPE_SIZE = 65536
MAX_PROGRAM_OPS = 54000
# Instructions executed per kernel call before control returns to Python.
DEFAULT_BATCH_STEPS = 1_000_000


@dataclass(frozen=True)
class RunOptions:
    tape_size: int = TAPE_SIZE
    max_program_ops: int = MAX_PROGRAM_OPS
    batch_steps: int = DEFAULT_BATCH_STEPS

    def __post_init__(self) -> None:
        if self.tape_size < 1:
            raise ValueError(f"tape_size must be positive, got {self.tape_size}")
        if self.max_program_ops < 0:
            raise ValueError(f"max_program_ops must not be negative, got {self.max_program_ops}")
        if self.batch_steps < 1:
            raise ValueError(f"batch_steps must be positive, got {self.batch_steps}")
