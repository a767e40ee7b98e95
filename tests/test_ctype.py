import string

import pytest

from minilibc.ctype import isalpha, isdigit, isspace

CODES = range(-1, 300)


def test_isdigit_selects_exactly_digits():
    assert {c for c in CODES if isdigit(c)} == set(map(ord, string.digits))


def test_isalpha_selects_exactly_ascii_letters():
    assert {c for c in CODES if isalpha(c)} == set(map(ord, string.ascii_letters))


def test_isspace_selects_exactly_whitespace():
    assert {c for c in CODES if isspace(c)} == set(map(ord, string.whitespace))


@pytest.mark.parametrize("ch", list(string.printable))
def test_string_and_code_agree(ch):
    assert isdigit(ch) == isdigit(ord(ch))
    assert isalpha(ch) == isalpha(ord(ch))
    assert isspace(ch) == isspace(ord(ch))


@pytest.mark.parametrize("ch", ["é", "٣", "\u00a0", "\u2003"])
def test_non_ascii_is_not_classified(ch):
    assert not (isdigit(ch) or isalpha(ch) or isspace(ch))