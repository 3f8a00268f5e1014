# -*- coding: utf-8 -*-

from thresher.context import get_context, set_context, note

from thresher.common import Level, TRACE, DEBUG, INFO, WARN, ERROR
from thresher.common import get_level, get_level_by_abbr
from thresher.thresholds import (ThresholdTable,
                                 ThresholdSpecError,
                                 parse_thresholds,
                                 format_thresholds)
from thresher.config import ThresholdArgsError
from thresher.filters import ThresholdResolver
from thresher.record import Record
from thresher.logger import Logger
from thresher.formatters import PlainFormatter
from thresher.emitters import StreamEmitter, AggregateEmitter
from thresher.sinks import FilteredSink, AggregateSink
