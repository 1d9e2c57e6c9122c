"""
Execution engine semantics.
"""

import io
import sys

import pytest

from bfrun import (
    InputExhaustedError,
    Interpreter,
    OutputError,
    PointerUnderflowError,
    compile_string,
)


def test_hello_world(run_bf, hello_world):
    output, _ = run_bf(hello_world)
    assert output == b"Hello World!\n"


def test_echo_one_byte(run_bf):
    output, state = run_bf(",.", b"xyz")
    assert output == b"x"
    assert state.tape[0] == ord("x")


def test_echo_non_ascii_byte(run_bf):
    output, _ = run_bf(",.", b"\xff")
    assert output == b"\xff"


def test_empty_loop_is_skipped(run_bf):
    output, state = run_bf("[]")
    assert output == b""
    assert state.steps == 1


def test_loop_skip_lands_after_matching_close(run_bf):
    # The '+' right after ']' must run when the loop is skipped.
    _, state = run_bf("[>+<]+")
    assert state.tape[0] == 1
    assert len(state.tape) == 1


def test_increment_wraps(run_bf):
    _, state = run_bf("+" * 256)
    assert state.tape[0] == 0
    _, state = run_bf("+" * 255)
    assert state.tape[0] == 255


def test_decrement_wraps(run_bf):
    output, state = run_bf("-.")
    assert output == b"\xff"
    assert state.tape[0] == 255


def test_tape_grows_on_demand(run_bf):
    _, state = run_bf(">>>+")
    assert state.dp == 3
    assert state.tape.to_bytes() == b"\x00\x00\x00\x01"


def test_tape_never_shrinks(run_bf):
    _, state = run_bf(">>><<<")
    assert state.dp == 0
    assert len(state.tape) == 4


def test_move_left_at_origin_fails(run_bf):
    with pytest.raises(PointerUnderflowError) as excinfo:
        run_bf("<")
    assert excinfo.value.ip == 0
    assert "cannot decrement pointer below zero" in str(excinfo.value)


def test_move_left_fails_later_in_program(run_bf):
    with pytest.raises(PointerUnderflowError) as excinfo:
        run_bf("+>+<<")
    assert excinfo.value.ip == 4


def test_output_before_failure_is_written():
    stdout = io.BytesIO()
    interp = Interpreter(compile_string("+++.<"), stdin=io.BytesIO(), stdout=stdout)
    with pytest.raises(PointerUnderflowError):
        interp.run()
    assert stdout.getvalue() == b"\x03"


def test_input_at_eof_fails(run_bf):
    with pytest.raises(InputExhaustedError) as excinfo:
        run_bf(",", b"")
    assert "input read error" in str(excinfo.value)


def test_input_reads_one_byte_per_instruction(run_bf):
    output, _ = run_bf(",>,>,<<.>.>.", b"abcd")
    assert output == b"abc"


def test_input_os_error_is_input_exhausted():
    class BrokenStream(io.RawIOBase):
        def readable(self):
            return True

        def read(self, size=-1):
            raise OSError("device gone")

    interp = Interpreter(compile_string(","), stdin=BrokenStream(), stdout=io.BytesIO())
    with pytest.raises(InputExhaustedError) as excinfo:
        interp.run()
    assert "device gone" in str(excinfo.value)


def test_commentless_program_is_noop(run_bf):
    output, state = run_bf("this text has no commands at all")
    assert output == b""
    assert state.steps == 0
    assert len(state.tape) == 0


def test_counting_loop(run_bf):
    # 6 * 8 = 48 = '0'
    output, state = run_bf("++++++[>++++++++<-]>.")
    assert output == b"0"
    assert state.tape.to_bytes() == b"\x00\x30"


def test_each_run_gets_its_own_state():
    stdout = io.BytesIO()
    interp = Interpreter(compile_string("+++>."), stdin=io.BytesIO(), stdout=stdout)
    first = interp.run()
    second = interp.run()
    assert first is not second
    assert (first.ip, first.dp, first.steps) == (5, 1, 5)
    assert first.tape.to_bytes() == b"\x03\x00"
    assert second.tape.to_bytes() == b"\x03\x00"
    assert interp.state is second
    assert stdout.getvalue() == b"\x00\x00"


def test_process_stdin_is_only_needed_for_input(monkeypatch):
    stdout = io.BytesIO()
    with monkeypatch.context() as m:
        m.setattr(sys, "stdin", None)
        interp = Interpreter(compile_string("++."), stdout=stdout)
        state = interp.run()
        assert state.tape[0] == 2
        with pytest.raises(InputExhaustedError) as excinfo:
            Interpreter(compile_string("+,"), stdout=stdout).run()
    assert excinfo.value.ip == 1
    assert "stdin is closed" in str(excinfo.value)


def test_output_with_stdout_closed_fails(monkeypatch):
    with monkeypatch.context() as m:
        m.setattr(sys, "stdout", None)
        with pytest.raises(OutputError) as excinfo:
            Interpreter(compile_string("+>."), stdin=io.BytesIO()).run()
    assert excinfo.value.ip == 2
    assert "stdout is closed" in str(excinfo.value)


def test_output_os_error_is_output_error():
    class BrokenStream(io.RawIOBase):
        def writable(self):
            return True

        def write(self, b):
            raise OSError("pipe closed")

    interp = Interpreter(compile_string("."), stdin=io.BytesIO(), stdout=BrokenStream())
    with pytest.raises(OutputError) as excinfo:
        interp.run()
    assert "pipe closed" in str(excinfo.value)


def test_without_flush_output_still_reaches_stream():
    stdout = io.BytesIO()
    Interpreter(compile_string("+."), stdin=io.BytesIO(), stdout=stdout, flush_output=False).run()
    assert stdout.getvalue() == b"\x01"
