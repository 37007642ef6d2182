from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from pydantic import ValidationError

from timewarrior_report.config.keys import ConfigKey, ValueKind
from timewarrior_report.config.parser import HeaderParserSettings
from timewarrior_report.config.report import ReportConfig
from timewarrior_report.errors import DuplicateKeyError, FormatError, HeaderTypeError
from timewarrior_report.io.timestamps import parse_timestamp

logger = logging.getLogger(__name__)


class HeaderParser:
    """Turn ``key: value`` header lines into a :class:`ReportConfig`.

    Lines are read until the first blank one. Each line is split on its first
    colon, so values may themselves contain colons. Known keys are converted
    to their declared kind; anything else is kept as an extra string field.
    """

    def __init__(self, settings: Optional[HeaderParserSettings] = None):
        self.settings = settings or HeaderParserSettings()

    def parse(self, lines: Iterable[str]) -> ReportConfig:
        known: Dict[ConfigKey, Any] = {}
        extras: Dict[str, str] = {}
        seen: set[str] = set()

        for number, line in enumerate(lines, start=1):
            if not line.strip():
                break
            key, raw = self._split(line, number)
            if key in seen:
                if self.settings.duplicates == "error":
                    raise DuplicateKeyError(
                        f"header key {key!r} repeated on line {number}", line=number, key=key)
                logger.warning(
                    "header key %r repeated on line %d; keeping the %s value",
                    key, number, self.settings.duplicates)
                if self.settings.duplicates == "first":
                    continue
            seen.add(key)

            member = ConfigKey.lookup(key)
            if member is None:
                extras[key] = raw
                continue
            value = self._convert(member, raw)
            if value is None:
                known.pop(member, None)
            else:
                known[member] = value

        logger.debug("parsed header: %d known, %d extra keys", len(known), len(extras))
        try:
            return ReportConfig.from_values(known, extras)
        except ValidationError as exc:
            raise FormatError(f"invalid report header: {exc}") from exc

    @staticmethod
    def _split(line: str, number: int) -> tuple[str, str]:
        key, sep, value = line.partition(":")
        if not sep:
            raise FormatError(
                f"header line {number} has no ':' separator: {line!r}", line=number)
        key = key.strip()
        if not key:
            raise FormatError(f"header line {number} has an empty key", line=number)
        return key, value.strip()

    def _convert(self, key: ConfigKey, raw: str) -> Any:
        if key.kind is ValueKind.STRING:
            return raw
        if key.kind is ValueKind.BOOLEAN:
            flag = self.settings.parse_bool(raw)
            if flag is None:
                raise HeaderTypeError(key.value, raw, "boolean")
            return flag
        # The host leaves range bounds empty for an unbounded report.
        if not raw:
            return None
        try:
            return parse_timestamp(raw)
        except FormatError as exc:
            raise HeaderTypeError(key.value, raw, "timestamp") from exc
