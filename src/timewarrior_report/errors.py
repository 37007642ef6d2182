"""Failure contract shared by every stage of report parsing.

Each error derives from :class:`ReportError` and from the builtin exception a
caller would naturally expect, so ``except ValueError`` or ``except TypeError``
keeps working for extensions that do not import this module.
"""

from __future__ import annotations

from typing import Optional


class ReportError(Exception):
    """Base class for every failure raised while reading a report stream."""


class FormatError(ReportError, ValueError):
    """A header line or timestamp does not have the expected shape."""

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        key: Optional[str] = None,
        index: Optional[int] = None,
    ):
        super().__init__(message)
        self.line = line
        self.key = key
        self.index = index


class DuplicateKeyError(FormatError):
    """A header key occurs more than once and duplicates are rejected."""


class HeaderTypeError(ReportError, TypeError):
    """A known header key carries a value that does not parse as its kind."""

    def __init__(self, key: str, value: str, expected: str):
        super().__init__(
            f"header key {key!r} expects a {expected} value, got {value!r}")
        self.key = key
        self.value = value
        self.expected = expected


class StructureError(ReportError, ValueError):
    """The JSON body, or one element of it, is structurally invalid."""

    def __init__(self, message: str, *, index: Optional[int] = None):
        if index is not None:
            message = f"interval #{index}: {message}"
        super().__init__(message)
        self.index = index


class IntervalOrderError(StructureError):
    """An interval ends before it starts."""


class ReportIOError(ReportError, OSError):
    """Reading the raw report payload from its source failed."""
