from __future__ import annotations

from datetime import date

import pytest

from muh2log.reader.normalizer import date_from_filename, decode_line, normalize_line


def test_strips_mirc_colors_and_controls():
    raw = "[12:00] <alice> \x0304,12red\x03 and \x02bold\x02\x1f!"
    assert normalize_line(raw) == "[12:00] <alice> red and bold!"


def test_collapses_whitespace_and_trims():
    assert normalize_line("  [12:00]\t<alice>   hi \r\n") == "[12:00] <alice> hi"


def test_truncates_to_max_length():
    assert normalize_line("abcdef  ghij", max_length=7) == "abcdef"


def test_blank_line_normalizes_to_empty():
    assert normalize_line("\x03\x02 \t\n") == ""


def test_decode_prefers_primary_encoding():
    assert decode_line("héllo".encode(), "utf-8", "latin-1") == ("héllo", False)


def test_decode_falls_back():
    assert decode_line("héllo".encode("latin-1"), "utf-8", "latin-1") == ("héllo", True)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("#chan.20100317.log", date(2010, 3, 17)),
        ("logs/2010-03-17_#chan.log", date(2010, 3, 17)),
        ("/var/log/20101399/#chan.20100101.log", date(2010, 1, 1)),
        ("#chan.log", None),
        ("#chan.20101399.log", None),
        ("#chan.1234567890.log", None),
    ],
)
def test_date_from_filename(name, expected):
    assert date_from_filename(name) == expected
