from __future__ import annotations

from dataclasses import dataclass, field


class Tape:
    """Byte cells growing to the right from a fixed origin. Never shrinks."""

    def __init__(self) -> None:
        self._cells = bytearray()

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int) -> int:
        return self._cells[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._cells[index] = value & 0xFF

    def ensure(self, index: int) -> None:
        if index >= len(self._cells):
            self._cells.extend(bytes(index + 1 - len(self._cells)))

    def to_bytes(self) -> bytes:
        return bytes(self._cells)


@dataclass
class ExecutionState:
    ip: int = 0
    dp: int = 0
    tape: Tape = field(default_factory=Tape)
    steps: int = 0
