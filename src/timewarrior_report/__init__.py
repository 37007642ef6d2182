"""Parse the report stream Timewarrior hands to its extensions."""

from timewarrior_report.config.keys import ConfigKey, ValueKind
from timewarrior_report.config.parser import HeaderParserSettings
from timewarrior_report.config.report import ReportConfig
from timewarrior_report.domain.data import TimewarriorData
from timewarrior_report.domain.interval import Interval, sorted_by_id
from timewarrior_report.errors import (
    DuplicateKeyError,
    FormatError,
    HeaderTypeError,
    IntervalOrderError,
    ReportError,
    ReportIOError,
    StructureError,
)
from timewarrior_report.io.timestamps import format_timestamp, parse_timestamp
from timewarrior_report.sources.assembler import (
    parse,
    parse_file,
    parse_from_standard_input,
    parse_stream,
)
from timewarrior_report.sources.decoders import IntervalDecoder
from timewarrior_report.sources.header import HeaderParser

__all__ = [
    "ConfigKey",
    "DuplicateKeyError",
    "FormatError",
    "HeaderParser",
    "HeaderParserSettings",
    "HeaderTypeError",
    "Interval",
    "IntervalDecoder",
    "IntervalOrderError",
    "ReportConfig",
    "ReportError",
    "ReportIOError",
    "StructureError",
    "TimewarriorData",
    "ValueKind",
    "format_timestamp",
    "parse",
    "parse_file",
    "parse_from_standard_input",
    "parse_stream",
    "parse_timestamp",
    "sorted_by_id",
]
