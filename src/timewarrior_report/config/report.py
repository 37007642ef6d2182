from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from timewarrior_report.config.keys import ConfigKey


class ReportConfig(BaseModel):
    """Typed view of the report header.

    Every known key is an optional attribute: ``None`` means the host did not
    send it. Keys outside :class:`ConfigKey` are kept verbatim in ``extras``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    temp_dir: Optional[str] = None
    temp_db: Optional[str] = None
    temp_config: Optional[str] = None
    temp_version: Optional[str] = None
    report_name: Optional[str] = None
    report_start: Optional[datetime] = None
    report_end: Optional[datetime] = None
    report_tags: Optional[str] = None
    debug: Optional[bool] = None
    verbose: Optional[bool] = None
    confirmation: Optional[bool] = None
    color: Optional[bool] = None
    extras: Dict[str, str] = Field(
        default_factory=dict,
        description="Header keys outside the known set, unchanged.",
    )

    @field_validator("report_start", "report_end")
    @classmethod
    def _require_aware(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            raise ValueError("report range bounds must be timezone-aware")
        return value

    @classmethod
    def from_values(
        cls, known: Mapping[ConfigKey, Any], extras: Mapping[str, str]
    ) -> "ReportConfig":
        fields: Dict[str, Any] = {key.field: value for key, value in known.items()}
        return cls(extras=dict(extras), **fields)

    def get(self, key: ConfigKey | str) -> Any:
        """Return the typed value of a known key, or None when absent."""
        return getattr(self, _known(key).field)

    def has(self, key: ConfigKey | str) -> bool:
        return self.get(key) is not None

    def extra(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.extras.get(name, default)

    def present(self) -> Dict[ConfigKey, Any]:
        """Known keys the header actually carried, in enumeration order."""
        return {key: self.get(key) for key in ConfigKey if self.has(key)}

    def __hash__(self) -> int:
        return hash(tuple(self.get(key) for key in ConfigKey))


def _known(key: ConfigKey | str) -> ConfigKey:
    if isinstance(key, ConfigKey):
        return key
    found = ConfigKey.lookup(key)
    if found is None:
        raise KeyError(f"{key!r} is not a known header key; use extra() instead")
    return found
