# -*- coding: utf-8 -*-
"""Command-line configuration for threshold resolvers. Both flags may
be repeated, and each value is a threshold specification as
understood by :func:`~thresher.thresholds.parse_thresholds`::

    myapp -d net:D,db:W -d http -v audit:E

The output of :meth:`ThresholdResolver.verbosity_string()
<thresher.filters.ThresholdResolver.verbosity_string>` parses back
into an equivalent configuration.
"""

import sys
import argparse


MODULE_FLAGS = ('-d', '--module-thresholds')
TARGET_FLAGS = ('-v', '--target-thresholds')


def build_parser(parser=None):
    """Adds the ``-d`` and ``-v`` flags to *parser*, creating a new
    :class:`argparse.ArgumentParser` if one isn't passed in, so that
    applications can mix the flags into their own parsers.
    """
    if parser is None:
        parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(*MODULE_FLAGS, dest='module_specs',
                        action='append', metavar='SPEC',
                        help='thresholds matched against module paths,'
                        ' e.g. "net:D,db:W"')
    parser.add_argument(*TARGET_FLAGS, dest='target_specs',
                        action='append', metavar='SPEC',
                        help='thresholds matched against explicit targets')
    return parser


class ThresholdArgsError(ValueError):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise ThresholdArgsError(message)


def _attach_values(argv):
    # patterns may start with "-", so the token after a flag is always
    # its value, never another option
    ret, argv = [], list(argv)
    while argv:
        arg = argv.pop(0)
        if arg in MODULE_FLAGS + TARGET_FLAGS and argv:
            if arg.startswith('--'):
                arg = '%s=%s' % (arg, argv.pop(0))
            else:
                arg = arg + argv.pop(0)
        ret.append(arg)
    return ret


def parse_args(argv=None):
    """Returns a ``(module_specs, target_specs)`` pair of lists. Raises
    :exc:`ThresholdArgsError` if a flag is missing its value.
    """
    if argv is None:
        argv = sys.argv[1:]
    elif isinstance(argv, str):
        argv = argv.split()
    parser = build_parser(_ArgumentParser(add_help=False))
    args, _ = parser.parse_known_args(_attach_values(argv))
    return args.module_specs or [], args.target_specs or []
