from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = min(max(1, line_no_1), max(1, len(lines)))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx and column > 0:
            out.append(f"       | {' ' * (column - 1)}^")
    return "\n".join(out)


def _hint_for(bracket: str) -> Optional[str]:
    if bracket == '[':
        return 'Every "[" needs a matching "]" later in the program.'
    if bracket == ']':
        return 'This "]" closes a loop that was never opened. Check for a missing "[" or an extra "]".'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class SourceLoadError(BFError):
    path: str


@dataclass
class UnmatchedBracketError(BFError):
    index: int
    line: int
    column: int
    context: str


@dataclass
class PointerUnderflowError(BFError):
    ip: int


@dataclass
class InputExhaustedError(BFError):
    ip: int


@dataclass
class OutputError(BFError):
    ip: int


def make_unmatched_bracket_error(*, source: str, bracket: str, index: int, line: int, column: int) -> UnmatchedBracketError:
    kind = 'open' if bracket == '[' else 'close'
    lines = source.split('\n')
    ctx = _build_context(lines, line, column)
    hint = _hint_for(bracket)
    hint_block = f"\nHint: {hint}" if hint else ""
    return UnmatchedBracketError(
        message=f"UnmatchedBracket: unmatched loop {kind} at index {index} (line {line}, column {column})\n{ctx}{hint_block}",
        index=index,
        line=line,
        column=column,
        context=ctx,
    )


def make_pointer_underflow_error(*, ip: int) -> PointerUnderflowError:
    return PointerUnderflowError(
        message=f"PointerUnderflow: cannot decrement pointer below zero (instruction {ip})",
        ip=ip,
    )


def make_input_exhausted_error(*, ip: int, reason: Optional[str] = None) -> InputExhaustedError:
    detail = f": {reason}" if reason else ""
    return InputExhaustedError(
        message=f"InputExhausted: input read error (instruction {ip}){detail}",
        ip=ip,
    )


def make_output_error(*, ip: int, reason: Optional[str] = None) -> OutputError:
    detail = f": {reason}" if reason else ""
    return OutputError(
        message=f"OutputFailure: output write error (instruction {ip}){detail}",
        ip=ip,
    )


def make_source_load_error(*, path: str, reason: Optional[str] = None) -> SourceLoadError:
    detail = f": {reason}" if reason else ""
    return SourceLoadError(
        message=f"SourceLoadFailure: failed to load file {path!r}{detail}",
        path=path,
    )
