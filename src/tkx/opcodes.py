from __future__ import annotations

from enum import IntEnum
from typing import Dict


class Opcode(IntEnum):
    INC_PTR = 0
    DEC_PTR = 1
    INC_BYTE = 2
    DEC_BYTE = 3
    WRITE_BYTE = 4
    READ_BYTE = 5
    LOOP_START = 6
    LOOP_END = 7


SYMBOLS: Dict[str, Opcode] = {
    '>': Opcode.INC_PTR,
    '<': Opcode.DEC_PTR,
    '+': Opcode.INC_BYTE,
    '-': Opcode.DEC_BYTE,
    '.': Opcode.WRITE_BYTE,
    ',': Opcode.READ_BYTE,
    '[': Opcode.LOOP_START,
    ']': Opcode.LOOP_END,
}
