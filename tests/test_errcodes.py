import pytest

from minilibc.errcodes import Errno, strerror


def test_documented_values():
    assert Errno(75).name == "EOVERFLOW"
    assert Errno(110).name == "ETIMEDOUT"


def test_known_descriptions():
    assert strerror(Errno.ENOENT) == "No such file or directory"
    assert strerror(Errno.EOVERFLOW) == "Value too large for defined data type"


@pytest.mark.parametrize("member", list(Errno))
def test_every_code_has_a_description(member):
    text = strerror(member)
    assert text.strip() == text and len(text) > 0
    assert strerror(int(member)) == text


def test_descriptions_are_distinct():
    texts = [strerror(m) for m in Errno]
    assert len(set(texts)) == len(texts)


def test_codes_from_one_to_erange_are_contiguous():
    codes = [Errno(code).value for code in range(1, 35)]
    assert codes == list(range(1, 35))
    assert Errno(34).name == "ERANGE"
    assert all(len(strerror(code)) > 0 for code in codes)


@pytest.mark.parametrize("code", [0, -1, 35, 999])
def test_unknown_code(code):
    with pytest.raises(ValueError):
        strerror(code)