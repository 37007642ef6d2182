from datetime import datetime, timedelta, timezone

import pytest

from timewarrior_report.errors import FormatError
from timewarrior_report.io.timestamps import format_timestamp, parse_timestamp


def test_parse_timestamp_returns_aware_utc() -> None:
    ts = parse_timestamp("20230101T090000Z")

    assert ts == datetime(2023, 1, 1, 9, 0, 0, tzinfo=timezone.utc)
    assert ts.tzinfo is timezone.utc


@pytest.mark.parametrize(
    "text",
    ["20230101T090000Z", "20240229T235959Z", "00010101T000000Z", "99991231T235959Z"],
)
def test_format_inverts_parse(text: str) -> None:
    assert format_timestamp(parse_timestamp(text)) == text


@pytest.mark.parametrize(
    "text",
    [
        "",
        "20230101T090000",
        "20230101T090000z",
        "2023-01-01T09:00:00Z",
        "20230101 090000Z",
        "20230101T090000Z ",
        " 20230101T090000Z",
        "20230101T090000Z\n",
        "2023011T090000ZZ",
        "20230101T9000000Z",
        "２０２３0101T090000Z",
    ],
)
def test_parse_timestamp_rejects_wrong_shape(text: str) -> None:
    with pytest.raises(FormatError, match="does not match"):
        parse_timestamp(text)


@pytest.mark.parametrize(
    "text",
    [
        "20231301T090000Z",
        "20230001T090000Z",
        "20230230T090000Z",
        "20230229T090000Z",
        "20230101T240000Z",
        "20230101T096000Z",
        "20230101T090060Z",
        "00000101T000000Z",
    ],
)
def test_parse_timestamp_rejects_out_of_range(text: str) -> None:
    with pytest.raises(FormatError, match="out of range"):
        parse_timestamp(text)


def test_parse_timestamp_rejects_non_string() -> None:
    with pytest.raises(FormatError, match="must be a string"):
        parse_timestamp(20230101)


def test_format_timestamp_converts_other_zones_to_utc() -> None:
    cet = timezone(timedelta(hours=1))
    value = datetime(2023, 1, 1, 10, 0, 0, tzinfo=cet)

    assert format_timestamp(value) == "20230101T090000Z"


def test_format_timestamp_rejects_naive() -> None:
    with pytest.raises(FormatError, match="timezone-aware"):
        format_timestamp(datetime(2023, 1, 1))


def test_format_timestamp_rejects_sub_second() -> None:
    with pytest.raises(FormatError, match="sub-second"):
        format_timestamp(datetime(2023, 1, 1, microsecond=5, tzinfo=timezone.utc))
