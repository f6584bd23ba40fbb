import logging

from .api import InterpretOptions, InterpretResult, read_source, run_file, run_string
from .errors import (
    BFError,
    BFParseError,
    BFRuntimeError,
    BFSourceError,
    CellOverflowError,
    InputExhaustedError,
    TapeBoundsError,
)
from .executor import Executor
from .lexer import Opcode, lex
from .parser import Instruction, Loop, flatten, parse, parse_loops
from .state import DEFAULT_TAPE_SIZE, ExecutionState

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Opcode',
    'lex',
    'Instruction',
    'Loop',
    'parse',
    'parse_loops',
    'flatten',
    'ExecutionState',
    'DEFAULT_TAPE_SIZE',
    'Executor',
    'InterpretOptions',
    'InterpretResult',
    'read_source',
    'run_string',
    'run_file',
    'BFError',
    'BFParseError',
    'BFSourceError',
    'BFRuntimeError',
    'TapeBoundsError',
    'CellOverflowError',
    'InputExhaustedError',
]
