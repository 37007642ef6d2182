from __future__ import annotations

import textwrap

import pytest


SAMPLE_REPORT = textwrap.dedent(
    """\
    temp.dir: /tmp
    debug: on

    [{"id":1,"start":"20230101T090000Z","end":"20230101T100000Z","tags":["work"],"annotation":"review"}]
    """
)


@pytest.fixture
def sample_report() -> str:
    return SAMPLE_REPORT


@pytest.fixture
def write_report(tmp_path):
    """Return a helper that writes report text to a temp file."""

    def _write(content: str, name: str = "report.txt"):
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
