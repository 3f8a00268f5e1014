# -*- coding: utf-8 -*-
"""The :class:`ThresholdResolver` decides, record by record, whether a
log record should be emitted. It holds two threshold tables, built
once from :mod:`threshold specifications <thresher.thresholds>`:

 * The *module table*, matched against the record's module path.
 * The *target table*, matched against the record's target, used only
   when the emitter set a target different from its module path.

+-------------------+--------------+----------------------+
|record             |table         |no pattern matches    |
+-------------------+--------------+----------------------+
|target == module   | module table | ``""`` fallback, Info|
+-------------------+--------------+----------------------+
|target != module   | target table | Info                 |
+-------------------+--------------+----------------------+

A record is accepted when its level is at least as urgent as the
resolved threshold. Resolvers are never mutated after construction,
so one resolver may be shared by any number of sinks and threads.
"""

from thresher.common import DEFAULT_THRESHOLD
from thresher.config import parse_args
from thresher.thresholds import (ThresholdTable,
                                 parse_thresholds,
                                 format_thresholds)


__all__ = ['ThresholdResolver']


MODULE_FLAG = '-d'
TARGET_FLAG = '-v'


class ThresholdResolver(object):
    """
    Args:
        module_specs (list): Threshold specification strings matched
            against module paths, e.g. ``['net:D,db:W']``.
        target_specs (list): Threshold specification strings matched
            against explicitly-set targets.

    Raises :exc:`~thresher.thresholds.ThresholdSpecError` if any entry
    is malformed, in which case no resolver is created.
    """
    def __init__(self, module_specs=None, target_specs=None):
        module_table = parse_thresholds(module_specs)
        target_table = parse_thresholds(target_specs)
        if not module_table:
            module_table[''] = DEFAULT_THRESHOLD
        self._module_table = module_table
        self._target_table = target_table

    @classmethod
    def from_args(cls, argv=None):
        "Create a resolver from ``-d``/``-v`` command-line flags."
        module_specs, target_specs = parse_args(argv)
        return cls(module_specs, target_specs)

    @property
    def module_table(self):
        "A copy of the module table. The resolver's own tables never change."
        return ThresholdTable(self._module_table)

    @property
    def target_table(self):
        "A copy of the target table."
        return ThresholdTable(self._target_table)

    def get_threshold(self, module_path, target=None):
        module_path = module_path or ''
        if target is None:
            target = module_path
        if target != module_path:
            level = self._target_table.find(target)
        else:
            level = self._module_table.find(module_path)
        if level is None:
            return DEFAULT_THRESHOLD
        return level

    def decide(self, record):
        threshold = self.get_threshold(record.module_path, record.target)
        return record.level >= threshold

    __call__ = decide

    def verbosity_string(self):
        """Summarizes the configuration as the command-line flags that
        would recreate it, e.g. ``'-d :Info -v db:Error'``.
        """
        parts = []
        if self._module_table:
            parts.append('%s %s' % (MODULE_FLAG,
                                    format_thresholds(self._module_table)))
        if self._target_table:
            parts.append('%s %s' % (TARGET_FLAG,
                                    format_thresholds(self._target_table)))
        return ' '.join(parts)

    def __repr__(self):
        cn = self.__class__.__name__
        return ('<%s module_table=%r target_table=%r>'
                % (cn, self._module_table, self._target_table))
