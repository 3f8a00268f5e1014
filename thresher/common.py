# -*- coding: utf-8 -*-

from boltons.funcutils import total_ordering


@total_ordering
class Level(object):
    def __init__(self, name, value, abbr=None):
        self.name = name.lower()
        self._value = value
        self.abbr = abbr or name[:1].upper()

    def __eq__(self, other):
        if self is other:
            return True
        elif self._value == getattr(other, '_value', None):
            return True
        return False

    def __lt__(self, other):
        if self is other:
            return False
        elif self._value < getattr(other, '_value', 100):
            return True
        return False

    def __hash__(self):
        return hash(self._value)

    def __str__(self):
        return self.name.title()

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__, self.name, self._value)


TRACE = Level('trace', 10, 'T')
DEBUG = Level('debug', 20, 'D')
INFO = Level('info', 50, 'I')
WARN = Level('warn', 70, 'W')
ERROR = Level('error', 90, 'E')
DEFAULT_LEVEL = INFO
DEFAULT_THRESHOLD = INFO
BUILTIN_LEVELS = (TRACE, DEBUG, INFO, WARN, ERROR)


def register_level(level_obj):
    if not isinstance(level_obj, Level):
        raise TypeError('expected Level object, not %r' % level_obj)

    LEVEL_ALIAS_MAP[level_obj.name.lower()] = level_obj
    LEVEL_ALIAS_MAP[level_obj.name.upper()] = level_obj
    LEVEL_ALIAS_MAP[level_obj.name.title()] = level_obj
    LEVEL_ALIAS_MAP[level_obj._value] = level_obj
    LEVEL_ALIAS_MAP[level_obj] = level_obj
    LEVEL_ABBR_MAP[level_obj.abbr] = level_obj
    LEVEL_LIST[:] = sorted(set(LEVEL_ALIAS_MAP.values()))


LEVEL_LIST = []
LEVEL_ALIAS_MAP = {}
LEVEL_ABBR_MAP = {}
for level in BUILTIN_LEVELS:
    register_level(level)
del level


def get_level(key, default=DEFAULT_LEVEL):
    return LEVEL_ALIAS_MAP.get(key, default)


def get_level_by_abbr(abbr):
    """Maps a single-letter abbreviation (``T``, ``D``, ``I``, ``W``,
    ``E``) to its :class:`Level`. Abbreviations are case-sensitive,
    and anything unrecognized maps to :data:`TRACE`, the most
    permissive threshold.
    """
    return LEVEL_ABBR_MAP.get(abbr, TRACE)
