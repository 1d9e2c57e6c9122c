from __future__ import annotations

import logging

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .errors import make_source_load_error
from .interpreter import Interpreter
from .lexer import tokenize
from .resolver import ResolvedProgram, resolve_jumps
from .state import ExecutionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    encoding: str = "utf-8"
    flush_output: bool = True


@dataclass(frozen=True)
class RunResult:
    program: ResolvedProgram
    state: ExecutionState


def compile_string(source: str) -> ResolvedProgram:
    return resolve_jumps(tokenize(source))


def load_source(path: str | Path, *, encoding: str = "utf-8") -> str:
    p = Path(path)
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise make_source_load_error(path=str(p), reason=str(exc)) from exc


def run_string(
    source: str,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    options: Optional[RunOptions] = None,
) -> RunResult:
    opts = options or RunOptions()
    program = compile_string(source)
    interpreter = Interpreter(program, stdin=stdin, stdout=stdout, flush_output=opts.flush_output)
    state = interpreter.run()
    return RunResult(program=program, state=state)


def run_file(
    path: str | Path,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    options: Optional[RunOptions] = None,
) -> RunResult:
    opts = options or RunOptions()
    source = load_source(path, encoding=opts.encoding)
    logger.debug("loaded %s (%d characters)", path, len(source))
    return run_string(source, stdin=stdin, stdout=stdout, options=opts)
