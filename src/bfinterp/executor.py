from __future__ import annotations

import logging
import sys
from typing import BinaryIO, List, Optional, Sequence

from .errors import InputExhaustedError, make_overflow_error
from .parser import (
    DecrementCell,
    IncrementCell,
    InputByte,
    Instruction,
    Loop,
    MovePointerBackward,
    MovePointerForward,
    OutputByte,
)
from .state import ExecutionState

logger = logging.getLogger(__name__)


class Executor:
    """
    Tree-walking executor with an explicit frame stack.

    Runs an instruction tree against one ExecutionState. I/O is byte
    oriented: each OutputByte writes one byte to ``stdout`` and flushes it,
    each InputByte consumes exactly one byte from ``stdin``.

    Cell arithmetic is checked unless ``wrap`` is set, in which case cells
    wrap modulo 256.
    """

    def __init__(
        self,
        state: ExecutionState,
        *,
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[BinaryIO] = None,
        wrap: bool = False,
    ):
        self.state = state
        self.stdin = sys.stdin.buffer if stdin is None else stdin
        self.stdout = sys.stdout.buffer if stdout is None else stdout
        self.wrap = wrap
        self.steps = 0

    def run(self, instructions: Sequence[Instruction]) -> None:
        state = self.state
        # [body, index of the next instruction]; every frame above the first
        # is the body of the Loop its parent frame points at
        frames: List[list] = [[instructions, 0]]
        while frames:
            frame = frames[-1]
            body, i = frame
            if i >= len(body):
                if len(frames) > 1 and state.read() != 0:
                    frame[1] = 0
                else:
                    frames.pop()
                    if frames:
                        frames[-1][1] += 1
                continue

            instr = body[i]
            self.steps += 1
            if isinstance(instr, Loop):
                if state.read() != 0:
                    frames.append([instr.body, 0])
                else:
                    frame[1] += 1
                continue

            if isinstance(instr, MovePointerForward):
                state.pointer += 1
            elif isinstance(instr, MovePointerBackward):
                state.pointer -= 1
            elif isinstance(instr, IncrementCell):
                self._add(1)
            elif isinstance(instr, DecrementCell):
                self._add(-1)
            elif isinstance(instr, OutputByte):
                self.stdout.write(bytes((state.read(),)))
                self.stdout.flush()
            elif isinstance(instr, InputByte):
                self._read_byte()
            else:
                raise TypeError(f"Unexpected instruction: {instr!r}")
            frame[1] = i + 1

    def _add(self, delta: int) -> None:
        value = self.state.read() + delta
        if not 0 <= value <= 0xFF:
            if not self.wrap:
                raise make_overflow_error(pointer=self.state.pointer, value=value)
            value &= 0xFF
        self.state.write(value)

    def _read_byte(self) -> None:
        data = self.stdin.read(1)
        if not data:
            raise InputExhaustedError(
                message=f"RuntimeError: input exhausted while reading into position {self.state.pointer}",
                pointer=self.state.pointer,
            )
        self.state.write(data[0])
