# -*- coding: utf-8 -*-
"""Emitters are objects which take an entry in *text-form* and output
it somewhere, such as stdout/stderr, an in-memory buffer, or a file
opened by the application.
"""

import os
import sys
from collections import deque

from thresher.context import note


class AggregateEmitter(object):
    def __init__(self, limit=None):
        self._limit = limit
        self.items = deque(maxlen=limit)

    def get_entries(self):
        return [entry for record, entry in self.items]

    def get_entry(self, idx):
        return self.items[idx][1]

    def clear(self):
        self.items.clear()

    def emit_entry(self, record, entry):
        self.items.append((record, entry))

    def __repr__(self):
        cn = self.__class__.__name__
        args = (cn, self._limit, len(self.items))
        msg = '<%s limit=%r entry_count=%r>' % args
        return msg


class StreamEmitter(object):
    '''Writes entries to a text stream, be it a StringIO, an open text
    file, or the console, using the shortcut values ``"stdout"`` and
    ``"stderr"``.
    '''
    def __init__(self, stream, sep=None):
        if stream in ('stdout', 'stderr'):
            stream = getattr(sys, stream)
        if not callable(getattr(stream, 'write', None)):
            raise TypeError('%s expected a writable text stream, or shortcut'
                            ' values "stderr" or "stdout", not: %r'
                            % (self.__class__.__name__, stream))
        self.stream = stream
        self.sep = os.linesep if sep is None else sep

    def emit_entry(self, record, entry):
        try:
            self.stream.write(entry + self.sep if self.sep else entry)
        except Exception as e:
            note('stream_emit', 'got %r on %r.emit_entry()', e, self)
            raise
        self.flush()

    def flush(self):
        stream_flush = getattr(self.stream, 'flush', None)
        if not callable(stream_flush):
            return
        try:
            stream_flush()
        except Exception as e:
            note('stream_flush', 'got %r on %r.flush()', e, self)

    def __repr__(self):
        return '<%s stream=%r>' % (self.__class__.__name__, self.stream)
