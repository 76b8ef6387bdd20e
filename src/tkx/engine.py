from __future__ import annotations

import logging
import sys
import time

from pathlib import Path
from typing import BinaryIO, Dict, Optional, Union

import numpy as np
from numba import njit

from .config import RunOptions
from .errors import InputExhaustedError, InternalError
from .jumps import jump_array, resolve_jumps
from .lexer import Program, read_source, tokenize
from .opcodes import Opcode
from .state import ExecutionState

logger = logging.getLogger(__name__)

# Plain ints so the kernel sees them as compile-time constants.
INC_PTR = int(Opcode.INC_PTR)
DEC_PTR = int(Opcode.DEC_PTR)
INC_BYTE = int(Opcode.INC_BYTE)
DEC_BYTE = int(Opcode.DEC_BYTE)
WRITE_BYTE = int(Opcode.WRITE_BYTE)
READ_BYTE = int(Opcode.READ_BYTE)
LOOP_START = int(Opcode.LOOP_START)
LOOP_END = int(Opcode.LOOP_END)

STOP_OUTPUT = 1
STOP_INPUT = 2
STOP_HALT = 3
STOP_BATCH = 4


@njit(cache=True)
def execute_until_io(program, memory, jumps, pc, pointer, max_steps):
    """
    Execute instructions from ``pc`` until one needs I/O.

    Stops *at* a WRITE_BYTE or READ_BYTE instruction (``pc`` is left pointing
    at it), when the program runs off the end, or after ``max_steps``
    instructions.

    Returns:
        tuple: (pc, pointer, stop_reason, steps)
    """
    mem_len = len(memory)
    prog_len = len(program)
    steps = 0

    while pc < prog_len:
        if steps >= max_steps:
            return pc, pointer, STOP_BATCH, steps

        command = program[pc]

        if command == INC_PTR:
            pointer += 1
            if pointer >= mem_len:
                pointer = 0
        elif command == DEC_PTR:
            pointer -= 1
            if pointer < 0:
                pointer = mem_len - 1
        elif command == INC_BYTE:
            memory[pointer] = (memory[pointer] + 1) & 255
        elif command == DEC_BYTE:
            memory[pointer] = (memory[pointer] - 1) & 255
        elif command == WRITE_BYTE:
            return pc, pointer, STOP_OUTPUT, steps
        elif command == READ_BYTE:
            return pc, pointer, STOP_INPUT, steps
        elif command == LOOP_START:
            if memory[pointer] == 0:
                pc = jumps[pc]
        elif command == LOOP_END:
            if memory[pointer] != 0:
                pc = jumps[pc]

        pc += 1
        steps += 1

    return pc, pointer, STOP_HALT, steps


class Interpreter:
    """
    Tape machine interpreter.

    Owns one fixed-size tape and one loaded program. Non-I/O instructions
    run inside the compiled kernel; every ``.`` and ``,`` is handled here
    so that output is flushed byte by byte and input blocks on the real
    stream.
    """

    def __init__(
        self,
        options: Optional[RunOptions] = None,
        *,
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[BinaryIO] = None,
    ):
        self.options = options or RunOptions()
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout.buffer
        self.state = ExecutionState(tape_size=self.options.tape_size)
        self.program: Optional[Program] = None
        self.jump_table: Dict[int, int] = {}
        self._program_arr = np.array([], dtype=np.int8)
        self._jumps_arr = np.array([], dtype=np.int64)

    def load_program(self, source: str) -> Program:
        start = time.perf_counter()
        program = tokenize(source, max_ops=self.options.max_program_ops)
        jump_table = resolve_jumps(program)

        self.program = program
        self.jump_table = jump_table
        self._program_arr = np.array(program.ops, dtype=np.int8)
        self._jumps_arr = jump_array(program, jump_table)
        self.state.reset()

        logger.debug("loaded %d instructions in %.2f ms", len(program), (time.perf_counter() - start) * 1000)
        return program

    def load_file(self, path: Union[str, Path], *, encoding: str = "utf-8") -> Program:
        return self.load_program(read_source(path, encoding=encoding))

    def run(self) -> ExecutionState:
        if self.program is None:
            raise InternalError(message="InternalError: run() called before a program was loaded")

        state = self.state
        start = time.perf_counter()

        while True:
            pc, pointer, stop_reason, steps = execute_until_io(
                self._program_arr, state.memory, self._jumps_arr,
                state.pc, state.pointer, self.options.batch_steps,
            )
            state.pc = int(pc)
            state.pointer = int(pointer)
            state.steps += int(steps)

            if stop_reason == STOP_HALT:
                break
            if stop_reason == STOP_OUTPUT:
                self._write_byte()
            elif stop_reason == STOP_INPUT:
                self._read_byte()

        logger.debug("halted after %d steps in %.2f ms", state.steps, (time.perf_counter() - start) * 1000)
        return state

    def _write_byte(self) -> None:
        state = self.state
        self.stdout.write(bytes((state.cell,)))
        self.stdout.flush()
        state.pc += 1
        state.steps += 1

    def _read_byte(self) -> None:
        state = self.state
        try:
            data = self.stdin.read(1)
        except OSError as e:
            raise InputExhaustedError(
                message=f"RuntimeError: unable to read input at instruction {state.pc}: {e}",
                pc=state.pc,
            ) from e
        if not data:
            raise InputExhaustedError(
                message=f"RuntimeError: input exhausted at instruction {state.pc}",
                pc=state.pc,
            )
        state.memory[state.pointer] = data[0]
        state.pc += 1
        state.steps += 1
