import pytest

from barcodekit.base import BLACK, TYPE_2OF5, TYPE_2OF5_INTERLEAVED, ColorScheme
from barcodekit.twooffive import add_checksum, encode, encode_with_color

STANDARD_12345670 = (
    "1101101011101010101110101110101011101110111010101010101110101110111010111010"
    "101011101110101010101011101110101011101110101101011"
)
INTERLEAVED_12345670 = (
    "101011101000101011100011101110100010100011101000111000101010101000111000111011101"
)


def test_add_checksum():
    assert add_checksum("1234567") == "12345670"


@pytest.mark.parametrize("content", ["1ABC", ""])
def test_add_checksum_rejects(content):
    with pytest.raises(ValueError):
        add_checksum(content)


def test_encode_rejects_letters():
    with pytest.raises(ValueError):
        encode("FOOBAR", False)


def _bars(code):
    _, _, width, _ = code.bounds()
    return "".join("1" if code.at(i, 0) == BLACK else "0" for i in range(width))


@pytest.mark.parametrize(
    "interleaved,text,expected",
    [(False, "12345670", STANDARD_12345670), (True, "12345670", INTERLEAVED_12345670)],
)
def test_encode_patterns(interleaved, text, expected):
    code = encode(text, interleaved)
    assert code.bounds()[2] == len(expected)
    assert _bars(code) == expected


def test_metadata_kinds():
    assert encode("12", False).metadata().code_kind == TYPE_2OF5
    assert encode("12", True).metadata().code_kind == TYPE_2OF5_INTERLEAVED
    assert encode("12", True).metadata().dimensions == 1
    assert encode("12", False).content() == "12"


def test_interleaved_odd_length_rejected():
    with pytest.raises(ValueError):
        encode("123", True)


def test_interleaved_letter_rejected():
    with pytest.raises(ValueError):
        encode("1A", True)


def test_empty_content_rejected():
    with pytest.raises(ValueError):
        encode("", False)


def test_encode_with_color():
    scheme = ColorScheme("rgb", (9, 9, 9), (1, 1, 1))
    code = encode_with_color("12345670", True, scheme)
    assert code.at(0, 0) == (1, 1, 1)
    assert code.at(1, 0) == (9, 9, 9)