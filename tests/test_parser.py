#!/usr/bin/env python3
"""
Tests for bracket matching and tree construction.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfinterp.errors import BFParseError
from bfinterp.lexer import lex
from bfinterp.parser import (
    DecrementCell,
    IncrementCell,
    InputByte,
    Loop,
    MovePointerBackward,
    MovePointerForward,
    OutputByte,
    count_instructions,
    flatten,
    parse,
    parse_loops,
)


def test_transfer_program_structure():
    program = parse("++>++<[->+<]")
    assert len(program) == 7
    assert program[:6] == [
        IncrementCell(),
        IncrementCell(),
        MovePointerForward(),
        IncrementCell(),
        IncrementCell(),
        MovePointerBackward(),
    ]
    assert program[6] == Loop((DecrementCell(), MovePointerForward(), IncrementCell(), MovePointerBackward()))


def test_nested_loops():
    program = parse(",[.[-]>[<+>-]]")
    assert program == [
        InputByte(),
        Loop((
            OutputByte(),
            Loop((DecrementCell(),)),
            MovePointerForward(),
            Loop((MovePointerBackward(), IncrementCell(), MovePointerForward(), DecrementCell())),
        )),
    ]
    assert count_instructions(program) == 12


def test_empty_loop():
    assert parse("[]") == [Loop(())]


def test_sibling_loops():
    assert parse("[+][-]") == [Loop((IncrementCell(),)), Loop((DecrementCell(),))]


@pytest.mark.parametrize("source", [
    "",
    "+-<>.,",
    "[]",
    "[[[]]]",
    "+[->[+<]]>[.]",
    "[][[]][[][]]",
])
def test_flatten_restores_source(source):
    assert flatten(parse(source)) == source


def test_flatten_drops_comments():
    assert flatten(parse("a+ [b- c]")) == "+[-]"


def test_unmatched_start():
    with pytest.raises(BFParseError) as exc:
        parse("[")
    assert "unmatched loop start at position 0" in str(exc.value)
    assert exc.value.position == 0


def test_unmatched_end():
    with pytest.raises(BFParseError) as exc:
        parse("]")
    assert "unmatched loop end at position 0" in str(exc.value)
    assert exc.value.position == 0


def test_unmatched_end_position_ignores_comments():
    with pytest.raises(BFParseError) as exc:
        parse("+ comment [-] ]")
    assert exc.value.position == 4
    assert exc.value.context.splitlines()[0].strip() == "+[-]]"


def test_unmatched_start_reports_outer_bracket():
    with pytest.raises(BFParseError) as exc:
        parse_loops(lex("+[[]"))
    assert exc.value.position == 1


def test_error_message_has_hint():
    with pytest.raises(BFParseError) as exc:
        parse("]")
    assert "Hint:" in str(exc.value)


def test_deeply_nested_program():
    depth = 1500
    source = "[" * depth + "+" + "]" * depth
    program = parse(source)
    assert len(program) == 1
    assert count_instructions(program) == depth + 1
    assert flatten(program) == source


def test_deeply_nested_unmatched_start():
    with pytest.raises(BFParseError) as exc:
        parse("+" + "[" * 1500)
    assert exc.value.position == 1
