from __future__ import annotations

import logging

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Tuple

logger = logging.getLogger(__name__)


class Op(Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    INPUT = ','
    LOOP_OPEN = '['
    LOOP_CLOSE = ']'


BF_OPS = {op.value: op for op in Op}


@dataclass(frozen=True)
class Program:
    """Lexed instruction stream.

    ``positions[i]`` is the (line, column) of the character ``ops[i]`` was
    lexed from, both 1-based. ``source`` is kept so later passes can point
    back into the original text when they report errors.
    """

    ops: Tuple[Op, ...]
    positions: Tuple[Tuple[int, int], ...] = ()
    source: str = ''

    def __len__(self) -> int:
        return len(self.ops)

    def __getitem__(self, index: int) -> Op:
        return self.ops[index]

    def __iter__(self) -> Iterator[Op]:
        return iter(self.ops)

    def __str__(self) -> str:
        return render(self.ops)

    def position(self, index: int) -> Tuple[int, int]:
        if index < len(self.positions):
            return self.positions[index]
        return (0, 0)


def render(ops: Iterable[Op]) -> str:
    return ''.join(op.value for op in ops)


def tokenize(source: str) -> Program:
    # Anything outside the eight command characters is a comment.
    ops: List[Op] = []
    positions: List[Tuple[int, int]] = []
    line = 1
    col = 0
    for ch in source:
        if ch == '\n':
            line += 1
            col = 0
            continue
        col += 1
        op = BF_OPS.get(ch)
        if op is None:
            continue
        ops.append(op)
        positions.append((line, col))

    logger.debug("lexed %d instructions from %d characters", len(ops), len(source))
    return Program(ops=tuple(ops), positions=tuple(positions), source=source)
