from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .errors import BFSourceError
from .executor import Executor
from .parser import parse
from .state import DEFAULT_TAPE_SIZE, ExecutionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InterpretOptions:
    tape_size: int = DEFAULT_TAPE_SIZE
    wrap: bool = False


@dataclass(frozen=True)
class InterpretResult:
    state: ExecutionState
    steps: int


def run_string(
    source: str,
    *,
    options: Optional[InterpretOptions] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> InterpretResult:
    opts = InterpretOptions() if options is None else options
    # parse fully before touching the tape so a malformed program never runs
    program = parse(source)
    state = ExecutionState.create(opts.tape_size)
    executor = Executor(state, stdin=stdin, stdout=stdout, wrap=opts.wrap)
    executor.run(program)
    logger.debug("program finished after %d steps, pointer at %d", executor.steps, state.pointer)
    return InterpretResult(state=state, steps=executor.steps)


def read_source(path: str | Path, *, encoding: str = "utf-8") -> str:
    p = Path(path)
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise BFSourceError(message=f"SourceError: cannot read {p}: {e}", path=str(p)) from e


def run_file(
    path: str | Path,
    *,
    options: Optional[InterpretOptions] = None,
    encoding: str = "utf-8",
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> InterpretResult:
    return run_string(read_source(path, encoding=encoding), options=options, stdin=stdin, stdout=stdout)
