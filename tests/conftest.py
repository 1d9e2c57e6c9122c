import io

import pytest

from bfrun import compile_string, run_program

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


def execute_bf_code_inprocess(bf_code, input_data=b""):
    """Run BrainFuck code against in-memory streams; return (output, state)."""
    stdin = io.BytesIO(input_data)
    stdout = io.BytesIO()
    state = run_program(compile_string(bf_code), stdin=stdin, stdout=stdout)
    return stdout.getvalue(), state


@pytest.fixture
def run_bf():
    return execute_bf_code_inprocess


@pytest.fixture
def hello_world():
    return HELLO_WORLD
