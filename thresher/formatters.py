# -*- coding: utf-8 -*-
"""Renders :class:`~thresher.record.Record` instances into plain text
lines, with the callpoint first, then the target (only when it was
explicitly set), then the level and message::

    [app.db:42](audit)|W|pool at 95%

Formatters are any callable which accepts a Record and returns text.
"""

__all__ = ['PlainFormatter']


UNNAMED_MODULE = '<unnamed>'


class PlainFormatter(object):
    def __init__(self, show_target=True, show_callpoint=True):
        self.show_target = show_target
        self.show_callpoint = show_callpoint

    def __call__(self, record):
        parts = []
        if self.show_callpoint:
            parts.append('[%s:%s]' % (record.module_path or UNNAMED_MODULE,
                                      record.lineno or 0))
        if self.show_target and record.is_target_set:
            parts.append('(%s)' % record.target)
        parts.append('|%s|%s' % (record.level.abbr, record.get_message()))
        return ''.join(parts)

    def __repr__(self):
        cn = self.__class__.__name__
        return ('<%s show_target=%r show_callpoint=%r>'
                % (cn, self.show_target, self.show_callpoint))
