from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from .errors import make_parse_error
from .lexer import Opcode, lex

logger = logging.getLogger(__name__)


# ---------------- Instruction tree ----------------
@dataclass(frozen=True)
class MovePointerForward:
    pass


@dataclass(frozen=True)
class MovePointerBackward:
    pass


@dataclass(frozen=True)
class IncrementCell:
    pass


@dataclass(frozen=True)
class DecrementCell:
    pass


@dataclass(frozen=True)
class OutputByte:
    pass


@dataclass(frozen=True)
class InputByte:
    pass


@dataclass(frozen=True)
class Loop:
    body: Tuple["Instruction", ...]


Instruction = Union[
    MovePointerForward,
    MovePointerBackward,
    IncrementCell,
    DecrementCell,
    OutputByte,
    InputByte,
    Loop,
]

_SIMPLE = {
    Opcode.MOVE_POINTER_FORWARD: MovePointerForward(),
    Opcode.MOVE_POINTER_BACKWARD: MovePointerBackward(),
    Opcode.INCREMENT_CELL: IncrementCell(),
    Opcode.DECREMENT_CELL: DecrementCell(),
    Opcode.OUTPUT_BYTE: OutputByte(),
    Opcode.INPUT_BYTE: InputByte(),
}

_CHARS = {type(instr): op.value for op, instr in _SIMPLE.items()}


# ---------------- Structurer: opcodes -> tree ----------------
def parse_loops(opcodes: Sequence[Opcode]) -> List[Instruction]:
    """
    Group bracket-delimited spans of ``opcodes`` into nested Loop nodes.

    Open loops are kept on an explicit stack of (start index, body) pairs,
    so nesting depth is not bounded by the interpreter's recursion limit.
    A loop's body holds exactly the opcodes strictly between its delimiters.

    Raises:
        BFParseError: on a LoopEnd with no opening bracket, or when the
            stream ends inside an open loop. An unclosed loop is reported
            at the position of the outermost open LoopStart.
    """
    program: List[Instruction] = []
    stack: List[Tuple[int, List[Instruction]]] = [(-1, program)]

    for i, op in enumerate(opcodes):
        if op is Opcode.LOOP_START:
            stack.append((i, []))
        elif op is Opcode.LOOP_END:
            if len(stack) == 1:
                raise make_parse_error(
                    message=f"unmatched loop end at position {i}", opcodes=opcodes, position=i
                )
            _, body = stack.pop()
            stack[-1][1].append(Loop(tuple(body)))
        else:
            stack[-1][1].append(_SIMPLE[op])

    if len(stack) != 1:
        loop_begin = stack[1][0]
        raise make_parse_error(
            message=f"unmatched loop start at position {loop_begin}",
            opcodes=opcodes,
            position=loop_begin,
        )

    return program


def parse(source: str) -> List[Instruction]:
    program = parse_loops(lex(source))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("parsed %d top-level instructions (%d total)", len(program), count_instructions(program))
    return program


# ---------------- Emit + counts ----------------
def flatten(instructions: Sequence[Instruction]) -> str:
    """Render a tree back to canonical source text."""
    out: List[str] = []
    stack = [iter(instructions)]
    while stack:
        instr = next(stack[-1], None)
        if instr is None:
            stack.pop()
            if stack:
                out.append("]")
        elif isinstance(instr, Loop):
            out.append("[")
            stack.append(iter(instr.body))
        else:
            out.append(_CHARS[type(instr)])
    return "".join(out)


def count_instructions(instructions: Sequence[Instruction]) -> int:
    c = 0
    pending = [instructions]
    while pending:
        for instr in pending.pop():
            c += 1
            if isinstance(instr, Loop):
                pending.append(instr.body)
    return c
