# -*- coding: utf-8 -*-

import itertools

from thresher.context import note
from thresher.common import get_level


_REC_ID_ITER = itertools.count()


class Record(object):
    """The ``Record`` is the unit of logging in thresher: one message, at
    one level, from one place in the code. Records are usually
    created through :class:`~thresher.logger.Logger` methods.

    Args:
        level: Level of the Record, a :class:`~thresher.common.Level`
            or any alias :func:`~thresher.common.get_level` accepts,
            e.g., ``'warn'``.
        message (str): The message, with optional ``str.format``-style
            placeholders filled in from *args*.
        module_path (str): Dotted name of the module the Record was
            created in. Defaults to ``None``, treated as ``''`` when
            resolving thresholds.
        target (str): Explicit label for the Record. Defaults to
            *module_path*, meaning no explicit target is set.
        lineno (int): Line number of the callpoint.
        args (tuple): Positional values for *message*.

    >>> rec = Record('warn', 'pool at {}%', 'app.db', args=(95,))
    >>> rec.get_message()
    'pool at 95%'
    """
    def __init__(self, level, message, module_path=None, target=None,
                 lineno=None, args=()):
        self.record_id = next(_REC_ID_ITER)
        self.level = get_level(level, None)
        if self.level is None:
            raise ValueError('unrecognized level: %r' % (level,))
        self.message = message
        self.module_path = module_path
        self.target = module_path if target is None else target
        self.lineno = lineno
        self.args = tuple(args)

    @property
    def is_target_set(self):
        return (self.module_path or '') != (self.target or '')

    @property
    def level_name(self):
        return self.level.name

    def get_message(self):
        if not self.args:
            return self.message
        try:
            return self.message.format(*self.args)
        except Exception as e:
            note('record_message', 'got %r formatting message %r with %r',
                 e, self.message, self.args)
            return self.message

    def __repr__(self):
        cn = self.__class__.__name__
        return ('<%s %s module_path=%r target=%r message=%r>'
                % (cn, self.level.name, self.module_path, self.target,
                   self.message))
