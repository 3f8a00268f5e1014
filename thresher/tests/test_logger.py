# -*- coding: utf-8 -*-

import sys

import pytest

from thresher import Logger, Record, ThresholdResolver
from thresher.common import TRACE, DEBUG, INFO, WARN, ERROR
from thresher.emitters import AggregateEmitter
from thresher.sinks import FilteredSink, AggregateSink


def test_logger_callpoint():
    agg_sink = AggregateSink()
    log = Logger([agg_sink])
    lineno = sys._getframe().f_lineno + 1
    rec = log.info('hi')

    assert rec is agg_sink.records[-1]
    assert rec.module_path == __name__
    assert rec.target == __name__
    assert not rec.is_target_set
    assert rec.lineno == lineno
    assert '<Logger' in repr(log)


def test_logger_levels():
    agg_sink = AggregateSink()
    log = Logger([agg_sink], module='app.jobs')
    log.trace('t')
    log.debug('d')
    log.info('i')
    log.warn('w')
    log.error('e')
    log.log('warn', 'by name')

    assert [r.level for r in agg_sink.records] == [TRACE, DEBUG, INFO,
                                                   WARN, ERROR, WARN]
    assert all(r.module_path == 'app.jobs' for r in agg_sink.records)


def test_logger_target_and_args():
    agg_sink = AggregateSink()
    log = Logger([agg_sink])
    rec = log.warn('{} rows behind', 40, target='db.replica')
    assert rec.is_target_set
    assert rec.target == 'db.replica'
    assert rec.get_message() == '40 rows behind'


def test_logger_bad_kwargs():
    log = Logger()
    with pytest.raises(TypeError):
        log.info('hi', tagret='db')


def test_bad_message_args_fall_back():
    log = Logger([AggregateSink()])
    rec = log.info('{0} and {1}', 'only one')
    assert rec.get_message() == '{0} and {1}'


def test_sinks():
    agg_sink = AggregateSink()
    log = Logger()
    log.add_sink(agg_sink)
    log.add_sink(agg_sink)
    assert len(log.sinks) == 1

    with pytest.raises(TypeError):
        log.add_sink(object())

    log.set_sinks([])
    assert log.sinks == []


def test_logger_filtered_end_to_end():
    resolver = ThresholdResolver(['jobs:D'], ['audit:E'])
    aggr_emtr = AggregateEmitter()
    log = Logger([FilteredSink(resolver, emitter=aggr_emtr)],
                 module='app.jobs')
    log.trace('nope')
    log.debug('yep')
    log.warn('nope', target='audit.trail')
    log.error('yep', target='audit.trail')
    log.debug('nope', target='cache')

    entries = aggr_emtr.get_entries()
    assert len(entries) == 2
    assert entries[0].endswith('|D|yep')
    assert '(audit.trail)|E|yep' in entries[1]


def test_unknown_level():
    log = Logger([AggregateSink()])
    with pytest.raises(ValueError):
        log.log('warning', 'nope')
    with pytest.raises(ValueError):
        Record('verbose', 'nope')
    assert Record('Warn', 'yep').level is WARN
