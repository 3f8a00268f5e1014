# -*- coding: utf-8 -*-

import pytest

from thresher.context import ThresherContext, get_context, set_context
from thresher.common import TRACE, DEBUG, INFO, WARN, ERROR
from thresher.thresholds import (ThresholdTable,
                                 ThresholdSpecError,
                                 parse_thresholds,
                                 format_thresholds)


def test_parse_basic():
    table = parse_thresholds(['net:D,db:W', 'http:E'])
    assert table == {'net': DEBUG, 'db': WARN, 'http': ERROR}
    assert list(table) == ['net', 'db', 'http']


def test_parse_all_abbreviations():
    table = parse_thresholds(['t:T,d:D,i:I,w:W,e:E'])
    assert table.to_dict() == {'t': 'trace', 'd': 'debug', 'i': 'info',
                               'w': 'warn', 'e': 'error'}


def test_parse_bare_pattern_is_trace():
    table = parse_thresholds(['chatty'])
    assert table['chatty'] is TRACE


def test_parse_unknown_abbreviation_is_trace():
    table = parse_thresholds(['mod:Z,other:'])
    assert table['mod'] is TRACE
    assert table['other'] is TRACE


def test_parse_unknown_abbreviation_noted():
    notes = []
    old_ctx = get_context()
    set_context(ThresherContext(note_handlers=[
        lambda name, msg: notes.append((name, msg))]))
    try:
        parse_thresholds(['mod:Z'])
    finally:
        set_context(old_ctx)
    assert len(notes) == 1
    assert notes[0][0] == 'parse_thresholds'
    assert "'Z'" in notes[0][1]


def test_parse_skips_empty_entries():
    table = parse_thresholds(['a:I,,b:W,', ''])
    assert table == {'a': INFO, 'b': WARN}


def test_parse_empty():
    assert parse_thresholds([]) == {}
    assert parse_thresholds(None) == {}
    assert isinstance(parse_thresholds([]), ThresholdTable)


def test_parse_single_string():
    assert parse_thresholds('a:E') == {'a': ERROR}


def test_parse_empty_pattern():
    assert parse_thresholds([':W']) == {'': WARN}


def test_parse_duplicate_last_wins():
    table = parse_thresholds(['a:E,b:I', 'a:D'])
    assert table['a'] is DEBUG
    assert list(table) == ['a', 'b']


def test_parse_too_many_colons():
    with pytest.raises(ThresholdSpecError) as exc_info:
        parse_thresholds(['ok:I,x:A:B'])
    assert exc_info.value.entry == 'x:A:B'
    assert 'x:A:B' in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)


def test_format_basic():
    table = parse_thresholds(['net:D,db:W'])
    assert format_thresholds(table) == 'net:Debug,db:Warn'
    assert format_thresholds(ThresholdTable()) == ''
    assert 'net:Debug' in repr(table)


def test_round_trip():
    table = parse_thresholds(['net:D,db:W,x:Z,:E,http'])
    reparsed = parse_thresholds([format_thresholds(table)])
    assert reparsed == table
    assert reparsed.to_dict() == table.to_dict()


def test_find_first_inserted_wins():
    table = parse_thresholds(['a:W,ab:E'])
    assert table.find('abc') is WARN
    table = parse_thresholds(['ab:E,a:W'])
    assert table.find('abc') is ERROR
    assert table.find('a') is WARN
    assert table.find('xyz') is None


def test_find_empty_pattern_matches_everything():
    table = parse_thresholds([':I'])
    assert table.find('anything') is INFO
    assert table.find('') is INFO
