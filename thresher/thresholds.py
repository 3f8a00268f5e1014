# -*- coding: utf-8 -*-
"""Threshold specifications are the compact textual form of a
threshold table, as passed on the command line::

    net:D,db.pool:W,http

Each comma-separated entry is a substring *pattern*, optionally
followed by a colon and a level abbreviation (``T``, ``D``, ``I``,
``W``, ``E``). A bare pattern means ``T`` (trace). Abbreviations that
aren't recognized degrade to trace, rather than erroring, so that a
typo never hides log output. The full level names written by
:func:`format_thresholds` (``Info``, ``Warn``, ...) are accepted as
well, so serialized tables parse back to the same thresholds.

More than one colon in an entry is a configuration error and raises
:exc:`ThresholdSpecError`.
"""

from boltons.iterutils import first

from thresher.context import note
from thresher.common import TRACE, LEVEL_ABBR_MAP, get_level, get_level_by_abbr


__all__ = ['ThresholdTable', 'ThresholdSpecError',
           'parse_thresholds', 'format_thresholds']


ENTRY_SEP = ','
LEVEL_SEP = ':'
DEFAULT_ABBR = TRACE.abbr


class ThresholdSpecError(ValueError):
    def __init__(self, entry, raw_spec=None):
        self.entry = entry
        self.raw_spec = raw_spec
        msg = ('expected threshold entry of the form "pattern" or'
               ' "pattern:L", not %r' % entry)
        if raw_spec is not None and raw_spec != entry:
            msg += ' (in %r)' % raw_spec
        super(ThresholdSpecError, self).__init__(msg)


class ThresholdTable(dict):
    """A mapping of substring patterns to :class:`~thresher.common.Level`
    thresholds. Iteration order is insertion order, and that order is
    also the precedence: when several patterns match the same
    candidate string, the one inserted first wins. Setting an existing
    pattern replaces its level but keeps its place.
    """
    def find(self, candidate):
        "Returns the level of the first pattern found in *candidate*, or None."
        match = first(self.items(), key=lambda item: item[0] in candidate)
        if match is None:
            return None
        return match[1]

    def to_dict(self):
        return dict([(pattern, level.name) for pattern, level in self.items()])

    def __repr__(self):
        cn = self.__class__.__name__
        return '%s(%r)' % (cn, format_thresholds(self))


def _parse_level(level_str, pattern):
    if level_str in LEVEL_ABBR_MAP:
        return LEVEL_ABBR_MAP[level_str]
    level = get_level(level_str, None)
    if level is None:
        note('parse_thresholds', 'unrecognized level %r for pattern %r,'
             ' using %s', level_str, pattern, TRACE)
        level = get_level_by_abbr(level_str)
    return level


def parse_thresholds(raw_specs):
    """Parse a sequence of threshold specification strings into a single
    :class:`ThresholdTable`. A single string is treated as a sequence
    of one. When the same pattern appears more than once, the last
    occurrence sets its level.

    >>> parse_thresholds(['net:D,db:W', 'http'])
    ThresholdTable('net:Debug,db:Warn,http:Trace')
    """
    if isinstance(raw_specs, str):
        raw_specs = [raw_specs]
    table = ThresholdTable()
    for raw_spec in raw_specs or ():
        for entry in raw_spec.split(ENTRY_SEP):
            if not entry:
                continue
            parts = entry.split(LEVEL_SEP)
            if len(parts) == 1:
                pattern, level_str = parts[0], DEFAULT_ABBR
            elif len(parts) == 2:
                pattern, level_str = parts
            else:
                raise ThresholdSpecError(entry, raw_spec)
            table[pattern] = _parse_level(level_str, pattern)
    return table


def format_thresholds(table):
    """The inverse of :func:`parse_thresholds`, rendering full level
    names rather than abbreviations. An empty table renders as an
    empty string.
    """
    return ENTRY_SEP.join(['%s%s%s' % (pattern, LEVEL_SEP, level)
                           for pattern, level in table.items()])
