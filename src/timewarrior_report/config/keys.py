from __future__ import annotations

from enum import Enum
from typing import Optional


class ValueKind(str, Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"


class ConfigKey(str, Enum):
    """Header keys documented by the host's extension protocol.

    The enum value is the key exactly as it appears in the header; ``field``
    is the attribute name on :class:`~timewarrior_report.config.report.ReportConfig`.
    """

    TEMP_DIR = ("temp.dir", ValueKind.STRING)
    TEMP_DB = ("temp.db", ValueKind.STRING)
    TEMP_CONFIG = ("temp.config", ValueKind.STRING)
    TEMP_VERSION = ("temp.version", ValueKind.STRING)
    REPORT_NAME = ("temp.report.name", ValueKind.STRING)
    REPORT_START = ("temp.report.start", ValueKind.TIMESTAMP)
    REPORT_END = ("temp.report.end", ValueKind.TIMESTAMP)
    REPORT_TAGS = ("temp.report.tags", ValueKind.STRING)
    DEBUG = ("debug", ValueKind.BOOLEAN)
    VERBOSE = ("verbose", ValueKind.BOOLEAN)
    CONFIRMATION = ("confirmation", ValueKind.BOOLEAN)
    COLOR = ("color", ValueKind.BOOLEAN)

    def __new__(cls, name: str, kind: ValueKind):
        member = str.__new__(cls, name)
        member._value_ = name
        member.kind = kind
        return member

    @property
    def field(self) -> str:
        return self.name.lower()

    @classmethod
    def lookup(cls, name: str) -> Optional["ConfigKey"]:
        """Return the known key named ``name``, or None for an extra field."""
        try:
            return cls(name)
        except ValueError:
            return None
