import copy
import pickle
import textwrap
from datetime import datetime, timezone

import pytest

from timewarrior_report.config.keys import ConfigKey
from timewarrior_report.config.parser import HeaderParserSettings
from timewarrior_report.domain.data import TimewarriorData
from timewarrior_report.errors import (
    DuplicateKeyError,
    FormatError,
    HeaderTypeError,
    StructureError,
)
from timewarrior_report.sources.assembler import parse, split_sections


def test_sample_report(sample_report: str) -> None:
    data = parse(sample_report)

    assert len(data) == 1
    (interval,) = data
    assert interval.id == 1
    assert interval.start == datetime(2023, 1, 1, 9, tzinfo=timezone.utc)
    assert interval.end == datetime(2023, 1, 1, 10, tzinfo=timezone.utc)
    assert interval.tags == {"work"}
    assert interval.annotation == "review"
    assert data.get(ConfigKey.DEBUG) is True
    assert data.get(ConfigKey.TEMP_DIR) == "/tmp"
    assert dict(data.extras) == {}


def test_bytes_and_text_parse_alike(sample_report: str) -> None:
    assert parse(sample_report.encode("utf-8")) == parse(sample_report)


def test_parsing_is_idempotent(sample_report: str) -> None:
    raw = sample_report.encode("utf-8")

    first, second = parse(raw), parse(raw)

    assert first == second
    assert hash(first) == hash(second)


def test_crlf_line_endings(sample_report: str) -> None:
    assert parse(sample_report.replace("\n", "\r\n")) == parse(sample_report)


def test_no_blank_line_means_header_only() -> None:
    data = parse("debug: off\nreports.day.hours: all")

    assert len(data) == 0
    assert data.intervals == ()
    assert data.get("debug") is False
    assert data.extra("reports.day.hours") == "all"


def test_header_followed_by_end_of_stream() -> None:
    data = parse("debug: on\n\n")

    assert data.intervals == ()


def test_empty_input() -> None:
    data = parse("")

    assert data.intervals == ()
    assert data.config.present() == {}


def test_multiline_json_body() -> None:
    raw = textwrap.dedent(
        """\
        temp.report.start: 20230101T000000Z
        temp.report.end:

        [
        {"start":"20230101T090000Z","end":"20230101T100000Z"},

        {"start":"20230101T110000Z"}
        ]
        """
    )

    data = parse(raw)

    assert [i.is_open for i in data] == [False, True]
    assert data.get(ConfigKey.REPORT_START) == datetime(2023, 1, 1, tzinfo=timezone.utc)
    assert data.get(ConfigKey.REPORT_END) is None


def test_annotation_with_unicode_line_separator_survives() -> None:
    raw = 'debug: on\n\n[{"start":"20230101T090000Z","annotation":"a\u2028b"}]'

    (interval,) = parse(raw)

    assert interval.annotation == "a\u2028b"


def test_malformed_header_line_is_format_error() -> None:
    with pytest.raises(FormatError):
        parse('malformed-line\n\n[{"start":"20230101T090000Z"}]')


def test_header_fails_before_body() -> None:
    with pytest.raises(HeaderTypeError):
        parse("debug: maybe\n\nnot json")


def test_missing_start_names_index() -> None:
    raw = 'debug: on\n\n[{"start":"20230101T090000Z"},{"id":2}]'

    with pytest.raises(StructureError, match="#1") as excinfo:
        parse(raw)

    assert excinfo.value.index == 1


def test_settings_are_forwarded() -> None:
    settings = HeaderParserSettings(duplicates="error")

    with pytest.raises(DuplicateKeyError):
        parse("debug: on\ndebug: off\n", settings=settings)


def test_invalid_utf8_bytes_are_format_error() -> None:
    with pytest.raises(FormatError):
        parse(b"temp.dir: \xc3\x28\n\n[]")


def test_split_sections() -> None:
    assert split_sections("a: 1\nb: 2\n\n[]\n") == (["a: 1", "b: 2"], "[]\n")
    assert split_sections("a: 1") == (["a: 1"], "")
    assert split_sections("\n[]") == ([], "[]")


def test_from_string_matches_parse(sample_report: str) -> None:
    assert TimewarriorData.from_string(sample_report) == parse(sample_report)


def test_result_survives_deepcopy_and_pickle(sample_report: str) -> None:
    data = parse("reports.day.hours: all\n" + sample_report)

    assert copy.deepcopy(data) == data
    assert pickle.loads(pickle.dumps(data)) == data
    assert data.extra("reports.day.hours") == "all"
