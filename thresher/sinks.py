# -*- coding: utf-8 -*-

from collections import deque

from thresher.formatters import PlainFormatter
from thresher.emitters import StreamEmitter


class FilteredSink(object):
    """Connects a :class:`~thresher.filters.ThresholdResolver` to the
    output path. Each record is first checked against the *resolver*;
    only accepted records are rendered by the *formatter*, and each
    rendered entry is handed to the *emitter* exactly once. Rejected
    records are never formatted.

    Args:
        resolver: Any callable taking a Record and returning a bool,
            usually a ThresholdResolver.
        formatter: Callable rendering a Record to text. Defaults to
            :class:`~thresher.formatters.PlainFormatter`.
        emitter: Object with an ``emit_entry(record, entry)``
            method. Defaults to a StreamEmitter writing to stderr.
    """
    def __init__(self, resolver, formatter=None, emitter=None):
        if not callable(resolver):
            raise TypeError('expected callable resolver, not %r' % resolver)
        self.resolver = resolver
        self.formatter = formatter or PlainFormatter()
        self.emitter = emitter or StreamEmitter('stderr')

    def on_record(self, record):
        if not self.resolver(record):
            return False
        entry = self.formatter(record)
        self.emitter.emit_entry(record, entry)
        return True

    def __repr__(self):
        cn = self.__class__.__name__
        return ('<%s resolver=%r formatter=%r emitter=%r>'
                % (cn, self.resolver, self.formatter, self.emitter))


class AggregateSink(object):
    "A simple sink that just aggregates the records, unfiltered."
    def __init__(self, limit=None):
        self._limit = limit
        self.records = deque(maxlen=limit)

    def on_record(self, record):
        self.records.append(record)

    def __repr__(self):
        cn = self.__class__.__name__
        msg = '<%s limit=%r records=%r>' % (cn, self._limit, len(self.records))
        return msg
