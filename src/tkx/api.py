from __future__ import annotations

import io

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .config import RunOptions
from .engine import Interpreter
from .jumps import resolve_jumps
from .lexer import Program, read_source, tokenize


@dataclass(frozen=True)
class RunResult:
    output: bytes
    steps: int
    pointer: int
    tape: np.ndarray


def load_string(source: str, *, options: Optional[RunOptions] = None) -> Program:
    """Tokenize and bracket-check source without running it."""
    opts = options or RunOptions()
    program = tokenize(source, max_ops=opts.max_program_ops)
    resolve_jumps(program)
    return program


def load_file(path: Union[str, Path], *, options: Optional[RunOptions] = None, encoding: str = "utf-8") -> Program:
    return load_string(read_source(path, encoding=encoding), options=options)


def run_string(source: str, input_data: bytes = b"", *, options: Optional[RunOptions] = None) -> RunResult:
    stdout = io.BytesIO()
    interpreter = Interpreter(options, stdin=io.BytesIO(input_data), stdout=stdout)
    interpreter.load_program(source)
    state = interpreter.run()
    return RunResult(
        output=stdout.getvalue(),
        steps=state.steps,
        pointer=state.pointer,
        tape=state.memory.copy(),
    )


def run_file(
    path: Union[str, Path],
    input_data: bytes = b"",
    *,
    options: Optional[RunOptions] = None,
    encoding: str = "utf-8",
) -> RunResult:
    return run_string(read_source(path, encoding=encoding), input_data, options=options)
