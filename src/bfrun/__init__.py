
from .api import RunOptions, RunResult, compile_string, load_source, run_file, run_string
from .errors import (
    BFError,
    InputExhaustedError,
    OutputError,
    PointerUnderflowError,
    SourceLoadError,
    UnmatchedBracketError,
)
from .interpreter import Interpreter, run_program
from .lexer import Op, Program, render, tokenize
from .resolver import ResolvedProgram, resolve_jumps
from .state import ExecutionState, Tape

__all__ = [
    'BFError',
    'ExecutionState',
    'InputExhaustedError',
    'Interpreter',
    'Op',
    'OutputError',
    'PointerUnderflowError',
    'Program',
    'ResolvedProgram',
    'RunOptions',
    'RunResult',
    'SourceLoadError',
    'Tape',
    'UnmatchedBracketError',
    'compile_string',
    'load_source',
    'render',
    'resolve_jumps',
    'run_file',
    'run_program',
    'run_string',
    'tokenize',
]
