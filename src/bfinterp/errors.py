from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


def _build_context(program: str, position: int, *, context: int = 16) -> str:
    start = max(0, position - context)
    end = min(len(program), position + context + 1)

    window = program[start:end]
    lead = '...' if start > 0 else ''
    tail = '...' if end < len(program) else ''
    caret = ' ' * (len(lead) + position - start) + '^'
    return f"  {lead}{window}{tail}\n  {caret}"


def _hint_for(message: str) -> Optional[str]:
    msg = message.lower()
    if 'unmatched loop end' in msg:
        return 'Every "]" needs an earlier "[" at the same nesting level.'
    if 'unmatched loop start' in msg:
        return 'Add the missing "]" or remove the extra "[".'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BFSourceError(BFError):
    path: str


@dataclass
class BFParseError(BFError):
    position: int
    context: str


@dataclass
class BFRuntimeError(BFError):
    pointer: int


@dataclass
class TapeBoundsError(BFRuntimeError):
    tape_size: int


@dataclass
class CellOverflowError(BFRuntimeError):
    value: int


@dataclass
class InputExhaustedError(BFRuntimeError):
    pass


def make_parse_error(*, message: str, opcodes: Sequence, position: int) -> BFParseError:
    program = ''.join(op.value for op in opcodes)
    ctx = _build_context(program, position)
    hint = _hint_for(message)
    hint_block = f"\nHint: {hint}" if hint else ""
    return BFParseError(
        message=f"ParseError: {message}\n{ctx}{hint_block}",
        position=position,
        context=ctx,
    )


def make_bounds_error(*, pointer: int, tape_size: int) -> TapeBoundsError:
    return TapeBoundsError(
        message=f"RuntimeError: data pointer {pointer} is outside the tape [0, {tape_size})",
        pointer=pointer,
        tape_size=tape_size,
    )


def make_overflow_error(*, pointer: int, value: int) -> CellOverflowError:
    direction = 'overflow' if value > 255 else 'underflow'
    return CellOverflowError(
        message=f"RuntimeError: cell {direction} at position {pointer} (value would be {value})",
        pointer=pointer,
        value=value,
    )
