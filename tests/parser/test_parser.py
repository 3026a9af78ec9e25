import logging

import pytest

import temu.sasm.parser as parser
import temu.sasm.grammar as grammar
from temu.common.errors import UnresolvedTarget, UnknownInstruction


def test_lines_are_kept_one_to_one():
    program = parser.parse('IMM 0 5\n\n.start\nNOOP\n')

    assert program.lines == ('IMM 0 5', '', '.start', 'NOOP', '')
    assert len(program) == 5
    assert program[3] == 'NOOP'


def test_labels_point_at_their_own_line():
    program = parser.parse('IMM 0 1\n  .first\nIMM 1 2\n.second\r\nNOOP')

    assert dict(program.labels) == {'first': 1, 'second': 3}


def test_labels_are_case_sensitive():
    program = parser.parse('.Loop\n.loop\n')

    assert program.labels['Loop'] == 0
    assert program.labels['loop'] == 1


def test_malformed_lines_are_not_rejected():
    program = parser.parse('FOO BAR\nIMM x y\nJMP 00')

    assert len(program) == 3
    assert not program.labels


def test_duplicate_label_overwrites(caplog):
    with caplog.at_level(logging.WARNING):
        program = parser.parse('.twice\nIMM 0 1\n.twice\n')

    assert program.labels['twice'] == 2
    assert 'redeclared' in caplog.text


def test_label_table_is_read_only():
    program = parser.parse('.a\n')

    with pytest.raises(TypeError):
        program.labels['b'] = 1  # type: ignore


def test_resolve_label_before_literal():
    program = parser.parse('NOOP\n.3\nNOOP\nNOOP\n')

    assert program.resolve('3') == 1
    assert program.resolve('2') == 2


def test_resolve_unknown():
    program = parser.parse('.known\n')

    with pytest.raises(UnresolvedTarget):
        program.resolve('unknown')


@pytest.mark.parametrize('text, expected', [
    ('ADD 0 1 2', ('ADD', ['0', '1', '2'])),
    ('NOOP', ('NOOP', [])),
    ('imm   3\t-7', ('imm', ['3', '-7'])),
])
def test_split_statement(text, expected):
    assert grammar.split_statement(text) == expected


@pytest.mark.parametrize('text, expected', [
    ('42', 42),
    ('+3', 3),
    ('-1', -1),
    ('4x', None),
    ('x', None),
    ('', None),
])
def test_parse_integer(text, expected):
    assert grammar.parse_integer(text) == expected


def test_split_statement_on_unicode_whitespace():
    assert grammar.split_statement('ADD\xa00\x0c1　2') == ('ADD', ['0', '1', '2'])


def test_split_statement_miss_is_recoverable():
    with pytest.raises(UnknownInstruction):
        grammar.split_statement('')
