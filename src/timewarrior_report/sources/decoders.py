from __future__ import annotations

import codecs
import json
import logging
from typing import Any, Iterable, Optional, Tuple

from timewarrior_report.domain.interval import Interval
from timewarrior_report.errors import FormatError, IntervalOrderError, StructureError
from timewarrior_report.io.timestamps import parse_timestamp

logger = logging.getLogger(__name__)


def read_all_text(chunks: Iterable[bytes], encoding: str = "utf-8-sig") -> str:
    decoder = codecs.getincrementaldecoder(encoding)()
    parts: list[str] = []
    try:
        for chunk in chunks:
            parts.append(decoder.decode(chunk))
        parts.append(decoder.decode(b"", final=True))
    except UnicodeDecodeError as exc:
        raise FormatError(f"report stream is not valid {encoding}: {exc}") from exc
    return "".join(parts)


class IntervalDecoder:
    """Decode the JSON body of a report into intervals.

    The body must be an array of objects. A single invalid element fails the
    whole decode; elements are never skipped.
    """

    def decode(self, text: str) -> Tuple[Interval, ...]:
        if not text.strip():
            return ()
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError is a ValueError; so is the int digit limit.
            raise StructureError(f"report body could not be decoded as JSON: {exc}") from exc
        if not isinstance(data, list):
            raise StructureError(
                f"report body must be a JSON array, got {type(data).__name__}")
        intervals = tuple(self._decode_item(i, item) for i, item in enumerate(data))
        logger.debug("decoded %d intervals", len(intervals))
        return intervals

    def _decode_item(self, index: int, item: Any) -> Interval:
        if not isinstance(item, dict):
            raise StructureError(
                f"expected a JSON object, got {type(item).__name__}", index=index)
        if "start" not in item:
            raise StructureError("missing required 'start'", index=index)

        start = self._timestamp(index, "start", item["start"])
        end = None
        if item.get("end") is not None:
            end = self._timestamp(index, "end", item["end"])
        if end is not None and end < start:
            raise IntervalOrderError(
                f"end {item['end']!r} precedes start {item['start']!r}", index=index)

        return Interval(
            id=self._id(index, item.get("id")),
            start=start,
            end=end,
            tags=self._tags(index, item.get("tags")),
            annotation=self._annotation(index, item.get("annotation")),
        )

    @staticmethod
    def _timestamp(index: int, name: str, value: Any):
        if not isinstance(value, str):
            raise StructureError(
                f"'{name}' must be a string, got {type(value).__name__}", index=index)
        try:
            return parse_timestamp(value)
        except FormatError as exc:
            raise FormatError(f"interval #{index}: {exc}", key=name, index=index) from exc

    @staticmethod
    def _id(index: int, value: Any) -> Optional[int]:
        if value is None:
            return None
        # bool is an int subclass; JSON true/false is not an identifier.
        if isinstance(value, bool) or not isinstance(value, int):
            raise StructureError(
                f"'id' must be an integer, got {type(value).__name__}", index=index)
        return value

    @staticmethod
    def _tags(index: int, value: Any) -> frozenset:
        if value is None:
            return frozenset()
        if not isinstance(value, list):
            raise StructureError(
                f"'tags' must be an array, got {type(value).__name__}", index=index)
        for tag in value:
            if not isinstance(tag, str):
                raise StructureError(
                    f"'tags' entries must be strings, got {tag!r}", index=index)
        return frozenset(value)

    @staticmethod
    def _annotation(index: int, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        raise StructureError(
            f"'annotation' must be a string, got {type(value).__name__}", index=index)
