from __future__ import annotations

import logging

from typing import Dict, List

import numpy as np

from .errors import InternalError, make_bracket_error
from .lexer import Program
from .opcodes import Opcode

logger = logging.getLogger(__name__)


def resolve_jumps(program: Program) -> Dict[int, int]:
    """Build a table mapping bracket positions for efficient jumping."""
    jump_table: Dict[int, int] = {}
    stack: List[int] = []

    for i, op in enumerate(program.ops):
        if op == Opcode.LOOP_START:
            stack.append(i)
        elif op == Opcode.LOOP_END:
            if not stack:
                raise make_bracket_error(
                    message="Unmatched ']'",
                    source=program.source,
                    offset=program.offsets[i],
                )
            start = stack.pop()
            jump_table[start] = i
            jump_table[i] = start

    if stack:
        raise make_bracket_error(
            message="Unmatched '['",
            source=program.source,
            offset=program.offsets[stack[-1]],
        )

    logger.debug("resolved %d bracket pairs", len(jump_table) // 2)
    return jump_table


def jump_array(program: Program, jump_table: Dict[int, int]) -> np.ndarray:
    """Dense form of the jump table for the kernel; non-brackets map to themselves."""
    arr = np.arange(len(program), dtype=np.int64)
    for i, op in enumerate(program.ops):
        if op == Opcode.LOOP_START or op == Opcode.LOOP_END:
            target = jump_table.get(i)
            if target is None:
                raise InternalError(message=f"InternalError: no jump target for bracket at instruction {i}")
            arr[i] = target
    return arr
