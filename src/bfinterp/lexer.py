from __future__ import annotations

import logging
from enum import Enum
from typing import List

logger = logging.getLogger(__name__)


class Opcode(Enum):
    MOVE_POINTER_FORWARD = '>'
    MOVE_POINTER_BACKWARD = '<'
    INCREMENT_CELL = '+'
    DECREMENT_CELL = '-'
    OUTPUT_BYTE = '.'
    INPUT_BYTE = ','
    LOOP_START = '['
    LOOP_END = ']'


OPCODE_CHARS = frozenset(op.value for op in Opcode)


def lex(source: str) -> List[Opcode]:
    """Turn source text into a flat opcode list; every other character is a comment."""
    opcodes = [Opcode(ch) for ch in source if ch in OPCODE_CHARS]
    logger.debug("lexed %d opcodes from %d characters", len(opcodes), len(source))
    return opcodes
