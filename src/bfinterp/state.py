from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import make_bounds_error

DEFAULT_TAPE_SIZE = 1024


@dataclass(eq=False)
class ExecutionState:
    """Fixed-size byte tape plus the data pointer.

    Moving the pointer is unchecked; only dereferencing it through
    ``read``/``write`` validates that it lies on the tape.
    """

    tape: np.ndarray
    pointer: int

    @classmethod
    def create(cls, tape_size: int = DEFAULT_TAPE_SIZE) -> "ExecutionState":
        if tape_size <= 0:
            raise ValueError(f"tape size must be positive, got {tape_size}")
        return cls(tape=np.zeros(tape_size, dtype=np.uint8), pointer=tape_size // 2)

    @property
    def tape_size(self) -> int:
        return len(self.tape)

    def reset(self) -> None:
        self.tape.fill(0)
        self.pointer = self.tape_size // 2

    def _index(self) -> int:
        # numpy would silently accept negative indices
        if not 0 <= self.pointer < self.tape_size:
            raise make_bounds_error(pointer=self.pointer, tape_size=self.tape_size)
        return self.pointer

    def read(self) -> int:
        return int(self.tape[self._index()])

    def write(self, value: int) -> None:
        self.tape[self._index()] = np.uint8(value)
