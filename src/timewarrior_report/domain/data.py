from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterator, Mapping, Optional, Tuple, Union

from timewarrior_report.config.keys import ConfigKey
from timewarrior_report.config.report import ReportConfig
from timewarrior_report.domain.interval import Interval

if TYPE_CHECKING:
    from timewarrior_report.config.parser import HeaderParserSettings


@dataclass(frozen=True)
class TimewarriorData:
    """Everything a report extension receives: header config plus intervals."""

    config: ReportConfig
    intervals: Tuple[Interval, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.intervals, tuple):
            object.__setattr__(self, "intervals", tuple(self.intervals))

    @classmethod
    def from_string(
        cls,
        raw: Union[str, bytes],
        *,
        settings: Optional["HeaderParserSettings"] = None,
    ) -> "TimewarriorData":
        from timewarrior_report.sources.assembler import parse

        return parse(raw, settings=settings)

    @classmethod
    def from_std(
        cls, *, settings: Optional["HeaderParserSettings"] = None
    ) -> "TimewarriorData":
        from timewarrior_report.sources.assembler import parse_from_standard_input

        return parse_from_standard_input(settings=settings)

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        *,
        settings: Optional["HeaderParserSettings"] = None,
    ) -> "TimewarriorData":
        from timewarrior_report.sources.assembler import parse_file

        return parse_file(path, settings=settings)

    @property
    def extras(self) -> Mapping[str, str]:
        return self.config.extras

    def get(self, key: ConfigKey | str) -> Any:
        return self.config.get(key)

    def extra(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.config.extra(name, default)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)
