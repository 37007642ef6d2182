"""Split a report stream into header and body and build :class:`TimewarriorData`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, List, Optional, TextIO, Tuple, Union

from timewarrior_report.config.parser import HeaderParserSettings
from timewarrior_report.domain.data import TimewarriorData
from timewarrior_report.sources.decoders import IntervalDecoder, read_all_text
from timewarrior_report.sources.header import HeaderParser
from timewarrior_report.sources.transports import (
    FsFileTransport,
    StdinTransport,
    StreamTransport,
    Transport,
)

logger = logging.getLogger(__name__)


def split_sections(text: str) -> Tuple[List[str], str]:
    """Return the header lines and the body text.

    The first blank line separates the two. Without one, everything is header
    and the body is empty.
    """
    # str.splitlines would also break on separators that JSON strings may hold.
    lines = text.replace("\r\n", "\n").split("\n")
    for i, line in enumerate(lines):
        if not line.strip():
            return lines[:i], "\n".join(lines[i + 1:])
    return lines, ""


def parse(
    raw: Union[str, bytes],
    *,
    settings: Optional[HeaderParserSettings] = None,
) -> TimewarriorData:
    text = read_all_text([raw]) if isinstance(raw, (bytes, bytearray)) else raw
    header, body = split_sections(text)
    config = HeaderParser(settings).parse(header)
    intervals = IntervalDecoder().decode(body)
    logger.debug(
        "assembled report: %d header lines, %d intervals", len(header), len(intervals))
    return TimewarriorData(config=config, intervals=intervals)


def parse_transport(
    transport: Transport,
    *,
    settings: Optional[HeaderParserSettings] = None,
) -> TimewarriorData:
    return parse(transport.read(), settings=settings)


def parse_from_standard_input(
    *, settings: Optional[HeaderParserSettings] = None
) -> TimewarriorData:
    """Read standard input to end-of-stream, then parse it."""
    return parse_transport(StdinTransport(), settings=settings)


def parse_file(
    path: Union[str, Path],
    *,
    settings: Optional[HeaderParserSettings] = None,
) -> TimewarriorData:
    return parse_transport(FsFileTransport(path), settings=settings)


def parse_stream(
    stream: Union[BinaryIO, TextIO],
    *,
    settings: Optional[HeaderParserSettings] = None,
) -> TimewarriorData:
    return parse_transport(StreamTransport(stream), settings=settings)
