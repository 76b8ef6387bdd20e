from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


def locate(source: str, offset: int) -> Tuple[int, int]:
    """Return the 1-based (line, column) of a character offset in source."""
    line = source.count('\n', 0, offset) + 1
    column = offset - (source.rfind('\n', 0, offset) + 1) + 1
    return line, column


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = max(1, min(line_no_1, len(lines)))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"  {'':4s} | {' ' * (column - 1)}^")
    return "\n".join(out)


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'bracket':
        if "unmatched ']'" in msg:
            return "A ']' closes the nearest open '[' before it. Remove it or add the missing '['."
        if "unmatched '['" in msg:
            return "Every '[' needs a matching ']' later in the program."
        return None
    if kind == 'size':
        return 'Only the characters > < + - . , [ ] count as instructions; comments are free.'
    return None


@dataclass
class TkxError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class TkxLoadError(TkxError):
    pass


@dataclass
class SourceReadError(TkxLoadError):
    path: str


@dataclass
class ProgramTooLargeError(TkxLoadError):
    line: int
    column: int
    context: str


@dataclass
class UnmatchedBracketError(TkxLoadError):
    line: int
    column: int
    context: str


@dataclass
class InputExhaustedError(TkxError):
    pc: int


@dataclass
class InternalError(TkxError):
    pass


def _positioned(message: str, source: str, offset: int, *, kind: str, label: str) -> Tuple[str, int, int, str]:
    line, column = locate(source, offset)
    ctx = _build_context(source.split('\n'), line, column)
    hint = _hint_for(message, kind=kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    text = f"{label}: {message} (line {line}, column {column})\n{ctx}{hint_block}"
    return text, line, column, ctx


def make_size_error(*, limit: int, source: str, offset: int) -> ProgramTooLargeError:
    text, line, column, ctx = _positioned(
        f"max program ops limit exceeded ({limit})",
        source,
        offset,
        kind='size',
        label='LoadError',
    )
    return ProgramTooLargeError(message=text, line=line, column=column, context=ctx)


def make_bracket_error(*, message: str, source: str, offset: int) -> UnmatchedBracketError:
    text, line, column, ctx = _positioned(message, source, offset, kind='bracket', label='BracketError')
    return UnmatchedBracketError(message=text, line=line, column=column, context=ctx)
