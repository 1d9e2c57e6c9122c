from __future__ import annotations

import logging
import sys

from typing import BinaryIO, Optional

from .errors import make_input_exhausted_error, make_output_error, make_pointer_underflow_error
from .lexer import Op
from .resolver import ResolvedProgram
from .state import ExecutionState

logger = logging.getLogger(__name__)


class Interpreter:
    """Runs a resolved program against a fresh tape.

    ``stdin`` and ``stdout`` are binary streams; when omitted, the process
    streams are looked up on first use, so a program that never reads does
    not care whether stdin is open. Each call to ``run`` builds a new state.
    """

    def __init__(
        self,
        program: ResolvedProgram,
        *,
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[BinaryIO] = None,
        flush_output: bool = True,
    ) -> None:
        self.program = program
        self.stdin = stdin
        self.stdout = stdout
        self.flush_output = flush_output
        self.state = ExecutionState()

    def _input_stream(self, ip: int) -> BinaryIO:
        if self.stdin is not None:
            return self.stdin
        # sys.stdin is None when the process was started with fd 0 closed.
        if sys.stdin is None:
            raise make_input_exhausted_error(ip=ip, reason='stdin is closed')
        return sys.stdin.buffer

    def _output_stream(self, ip: int) -> BinaryIO:
        if self.stdout is not None:
            return self.stdout
        if sys.stdout is None:
            raise make_output_error(ip=ip, reason='stdout is closed')
        return sys.stdout.buffer

    def _read_byte(self, ip: int) -> int:
        stream = self._input_stream(ip)
        try:
            data = stream.read(1)
        except OSError as exc:
            raise make_input_exhausted_error(ip=ip, reason=str(exc)) from exc
        if not data:
            raise make_input_exhausted_error(ip=ip, reason='end of input')
        return data[0]

    def _write_byte(self, ip: int, value: int) -> None:
        stream = self._output_stream(ip)
        try:
            stream.write(bytes((value,)))
            if self.flush_output:
                stream.flush()
        except OSError as exc:
            raise make_output_error(ip=ip, reason=str(exc)) from exc

    def _flush(self, ip: int) -> None:
        stream = self.stdout if self.stdout is not None else sys.stdout
        if stream is None:
            return
        try:
            stream.flush()
        except OSError as exc:
            raise make_output_error(ip=ip, reason=str(exc)) from exc

    def run(self) -> ExecutionState:
        state = ExecutionState()
        self.state = state
        tape = state.tape
        ops = self.program.ops
        jumps = self.program.jumps
        length = len(ops)

        while state.ip < length:
            # Grow the tape lazily so it only ever covers cells the program touched.
            tape.ensure(state.dp)
            op = ops[state.ip]

            if op is Op.MOVE_RIGHT:
                state.dp += 1
            elif op is Op.MOVE_LEFT:
                if state.dp == 0:
                    raise make_pointer_underflow_error(ip=state.ip)
                state.dp -= 1
            elif op is Op.INCREMENT:
                tape[state.dp] = (tape[state.dp] + 1) & 0xFF
            elif op is Op.DECREMENT:
                tape[state.dp] = (tape[state.dp] - 1) & 0xFF
            elif op is Op.OUTPUT:
                self._write_byte(state.ip, tape[state.dp])
            elif op is Op.INPUT:
                tape[state.dp] = self._read_byte(state.ip)
            elif op is Op.LOOP_OPEN:
                if tape[state.dp] == 0:
                    state.ip = jumps[state.ip]
            elif op is Op.LOOP_CLOSE:
                if tape[state.dp] != 0:
                    state.ip = jumps[state.ip]

            state.ip += 1
            state.steps += 1

        if not self.flush_output:
            self._flush(state.ip)
        logger.debug("program halted after %d steps, tape length %d", state.steps, len(tape))
        return state


def run_program(
    program: ResolvedProgram,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    flush_output: bool = True,
) -> ExecutionState:
    return Interpreter(program, stdin=stdin, stdout=stdout, flush_output=flush_output).run()
