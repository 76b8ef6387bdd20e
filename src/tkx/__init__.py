
from .api import RunResult, load_file, load_string, run_file, run_string
from .config import MAX_PROGRAM_OPS, TAPE_SIZE, RunOptions
from .engine import Interpreter
from .errors import (
    InputExhaustedError,
    InternalError,
    ProgramTooLargeError,
    SourceReadError,
    TkxError,
    TkxLoadError,
    UnmatchedBracketError,
)
from .jumps import resolve_jumps
from .lexer import Program, tokenize
from .opcodes import Opcode

__all__ = [
    'Interpreter',
    'Opcode',
    'Program',
    'tokenize',
    'resolve_jumps',
    'RunOptions',
    'RunResult',
    'load_string',
    'load_file',
    'run_string',
    'run_file',
    'TAPE_SIZE',
    'MAX_PROGRAM_OPS',
    'TkxError',
    'TkxLoadError',
    'SourceReadError',
    'ProgramTooLargeError',
    'UnmatchedBracketError',
    'InputExhaustedError',
    'InternalError',
]
