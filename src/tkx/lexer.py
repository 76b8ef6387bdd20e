from __future__ import annotations

import logging

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union

from .config import MAX_PROGRAM_OPS
from .errors import SourceReadError, make_size_error
from .opcodes import Opcode, SYMBOLS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Program:
    """Opcode sequence produced by the loader.

    ``offsets[i]`` is the character offset in ``source`` of ``ops[i]``, used
    to point diagnostics at the offending bracket or instruction.
    """
    ops: Tuple[Opcode, ...]
    offsets: Tuple[int, ...]
    source: str = field(default='', repr=False)

    def __len__(self) -> int:
        return len(self.ops)


def tokenize(source: str, *, max_ops: int = MAX_PROGRAM_OPS) -> Program:
    """
    Convert source text into a Program.

    Every character outside ``> < + - . , [ ]`` is a comment and does not
    count toward ``max_ops``. The first instruction past the limit aborts
    the load with ProgramTooLargeError.
    """
    ops: List[Opcode] = []
    offsets: List[int] = []

    for pos, ch in enumerate(source):
        op = SYMBOLS.get(ch)
        if op is None:
            continue
        if len(ops) >= max_ops:
            raise make_size_error(limit=max_ops, source=source, offset=pos)
        ops.append(op)
        offsets.append(pos)

    logger.debug("tokenized %d instructions from %d characters", len(ops), len(source))
    return Program(ops=tuple(ops), offsets=tuple(offsets), source=source)


def read_source(path: Union[str, Path], *, encoding: str = "utf-8") -> str:
    p = Path(path)
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(message=f"LoadError: unable to read {p}: {e}", path=str(p)) from e
