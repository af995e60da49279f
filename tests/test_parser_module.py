"""Tests for :mod:`envpilot.parser`."""

from __future__ import annotations

import io

import pytest

from envpilot.errors import EnvFileError
from envpilot.parser import parse_file, parse_line, parse_lines, parse_stream


def test_parse_lines_skips_comments_blanks_and_lines_without_separator():
    """Only well-formed ``KEY=value`` lines produce pairs."""

    lines = ["HOST=localhost", "#comment", "", "BAD LINE", "PORT=80"]

    assert list(parse_lines(lines)) == [("HOST", "localhost"), ("PORT", "80")]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("K=", ("K", "")),
        ("K==v", ("K", "=v")),
        ("  K  =  v  ", ("K", "v")),
        ("URL=http://x/?a=1#frag", ("URL", "http://x/?a=1#frag")),
        ("K=v\r\n", ("K", "v")),
        ("   # indented comment=1", None),
        ("=orphan", None),
        ("NO_EQUALS", None),
    ],
)
def test_parse_line_boundaries(line, expected):
    """Splitting happens at the first ``=`` and both halves are trimmed."""

    assert parse_line(line) == expected


def test_parse_stream_tolerates_crlf_and_keeps_duplicates_in_order():
    """CRLF endings are stripped and repeated keys are all reported in file order."""

    data = b"A=1\r\nB=two\r\nA=3\n"

    assert parse_stream(io.BytesIO(data)) == [("A", "1"), ("B", "two"), ("A", "3")]


def test_parse_file_of_only_comments_is_empty(tmp_path):
    """A file holding only comments and blank lines yields nothing."""

    env_file = tmp_path / ".env"
    env_file.write_text("# one\n\n# two\n")

    assert parse_file(env_file) == []


def test_parse_file_empty_file(tmp_path):
    """An empty file yields nothing."""

    env_file = tmp_path / ".env"
    env_file.write_bytes(b"")

    assert parse_file(env_file) == []


def test_parse_file_missing_raises_env_file_error(tmp_path):
    """A file that cannot be opened is reported as :class:`EnvFileError`."""

    with pytest.raises(EnvFileError, match="Error opening env file"):
        parse_file(tmp_path / "missing.env")


def test_parse_file_skips_lines_that_are_not_utf8(tmp_path):
    """An undecodable line is dropped like any other malformed line."""

    env_file = tmp_path / ".env"
    env_file.write_bytes(b"GOOD=1\nBAD=\xff\xfe\nCITY=K\xf6ln\nLAST=2\n")

    assert parse_file(env_file) == [("GOOD", "1"), ("LAST", "2")]


def test_parse_stream_wraps_read_errors():
    """I/O failures while reading are reported as :class:`EnvFileError`."""

    class BrokenStream(io.BytesIO):
        def __iter__(self):
            yield b"A=1\n"
            raise OSError("device went away")

    with pytest.raises(EnvFileError, match="device went away"):
        parse_stream(BrokenStream(), "broken.env")
