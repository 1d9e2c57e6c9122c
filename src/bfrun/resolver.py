from __future__ import annotations

import logging

from dataclasses import dataclass
from typing import List, Tuple

from .errors import make_unmatched_bracket_error
from .lexer import Op, Program

logger = logging.getLogger(__name__)

NO_JUMP = -1


@dataclass(frozen=True)
class ResolvedProgram:
    program: Program
    jumps: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.program)

    @property
    def ops(self) -> Tuple[Op, ...]:
        return self.program.ops

    def target(self, index: int) -> int:
        return self.jumps[index]


def _scan_forward(ops: Tuple[Op, ...], start: int) -> int:
    depth = 1
    for p in range(start + 1, len(ops)):
        if ops[p] is Op.LOOP_OPEN:
            depth += 1
        elif ops[p] is Op.LOOP_CLOSE:
            depth -= 1
            if depth == 0:
                return p
    return NO_JUMP


def _scan_backward(ops: Tuple[Op, ...], start: int) -> int:
    depth = 1
    for p in range(start - 1, -1, -1):
        if ops[p] is Op.LOOP_CLOSE:
            depth += 1
        elif ops[p] is Op.LOOP_OPEN:
            depth -= 1
            if depth == 0:
                return p
    return NO_JUMP


def resolve_jumps(program: Program) -> ResolvedProgram:
    """Pair every ``[`` with its ``]`` and return the program with a jump table.

    Each bracket is matched independently by a linear scan, so deeply nested
    programs cost O(n^2). Fine for hand-written programs; a stack-based pass
    would be the fix for very large generated ones.

    Raises UnmatchedBracketError for the first bracket without a partner.
    """
    ops = program.ops
    jumps: List[int] = [NO_JUMP] * len(ops)

    for i, op in enumerate(ops):
        if op is Op.LOOP_OPEN:
            target = _scan_forward(ops, i)
        elif op is Op.LOOP_CLOSE:
            target = _scan_backward(ops, i)
        else:
            continue

        if target == NO_JUMP:
            line, column = program.position(i)
            raise make_unmatched_bracket_error(
                source=program.source,
                bracket=op.value,
                index=i,
                line=line,
                column=column,
            )
        jumps[i] = target

    logger.debug("resolved %d brackets", sum(1 for t in jumps if t != NO_JUMP))
    return ResolvedProgram(program=program, jumps=tuple(jumps))
