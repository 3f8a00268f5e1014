# -*- coding: utf-8 -*-
"""The :class:`Logger` is the application developer's interface to
thresher. It creates :class:`Records <thresher.record.Record>`
stamped with the calling module and line, and publishes them to
:term:`sinks <sink>`, which decide what gets emitted.
"""

import sys

from boltons.tbutils import Callpoint

from thresher.record import Record
from thresher.common import TRACE, DEBUG, INFO, WARN, ERROR


class Logger(object):
    """
    Args:
        sinks (list): A list of sink objects, each with an
            ``on_record()`` method. Defaults to ``[]``. Sinks can be
            added later with :meth:`Logger.add_sink`.
        module (str): Module path stamped on every Record. Defaults to
            the module of each calling frame.

    >>> log = Logger()
    >>> rec = log.warn('pool at {}%', 95, target='db.pool')
    >>> rec.is_target_set
    True
    """
    record_type = Record

    def __init__(self, sinks=None, module=None):
        self.module = module
        self.set_sinks(sinks)

    @property
    def sinks(self):
        "A copy of all sinks set on this Logger."
        return list(self._sinks)

    def set_sinks(self, sinks):
        "Replace this Logger's sinks with *sinks*."
        self._sinks = []
        for s in sinks or []:
            self.add_sink(s)

    def add_sink(self, sink):
        """Add *sink* to this Logger's sinks. Does nothing if *sink* is
        already in this Logger's sinks.
        """
        if sink in self._sinks:
            return
        if not callable(getattr(sink, 'on_record', None)):
            raise TypeError('expected sink with on_record() method, not %r'
                            % sink)
        self._sinks.append(sink)

    def publish(self, record):
        for sink in self._sinks:
            sink.on_record(record)
        return record

    def _log(self, level, message, a, kw, frame):
        target = kw.pop('target', None)
        if kw:
            raise TypeError('unexpected keyword arguments: %r' % kw)
        callpoint = Callpoint.from_frame(frame)
        module_path = self.module or callpoint.module_name
        record = self.record_type(level, message, module_path=module_path,
                                  target=target, lineno=callpoint.lineno,
                                  args=a)
        return self.publish(record)

    def log(self, level, message, *a, **kw):
        "Publish a Record at *level*. Accepts *target* as a keyword argument."
        return self._log(level, message, a, kw, sys._getframe(1))

    def trace(self, message, *a, **kw):
        return self._log(TRACE, message, a, kw, sys._getframe(1))

    def debug(self, message, *a, **kw):
        return self._log(DEBUG, message, a, kw, sys._getframe(1))

    def info(self, message, *a, **kw):
        return self._log(INFO, message, a, kw, sys._getframe(1))

    def warn(self, message, *a, **kw):
        return self._log(WARN, message, a, kw, sys._getframe(1))

    def error(self, message, *a, **kw):
        return self._log(ERROR, message, a, kw, sys._getframe(1))

    def __repr__(self):
        cn = self.__class__.__name__
        return '<%s module=%r sinks=%r>' % (cn, self.module, self.sinks)
