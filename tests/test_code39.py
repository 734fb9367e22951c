import pytest

from barcodekit import code39
from barcodekit.core import TYPE_CODE39


def _bars(code):
    return "".join("1" if code.is_set(x, 0) else "0" for x in range(code.width))


def test_encode_alphabet():
    expected = (
        "1001011011010110101001011010110100101101101101001010101011001011011010110010101"
        "011011001010101010011011011010100110101011010011010101011001101011010101001101011010"
        "100110110110101001010101101001101101011010010101101101001010101011001101101010110010"
        "101101011001010101101100101100101010110100110101011011001101010101001011010110110010"
        "110101010011011010101010011011010110100101011010110010101101101100101010101001101011"
        "011010011010101011001101010101001011011011010010110101011001011010100101101101"
    )
    code = code39.encode("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789", False, False)
    assert code.width == len(expected)
    assert _bars(code) == expected


def test_at_uses_colour_scheme():
    code = code39.encode("A")
    assert code.at(0, 0) == code.color_scheme.foreground
    assert code.at(1, 0) == code.color_scheme.background


def test_metadata():
    code = code39.encode("ABC")
    assert code.metadata.code_kind == TYPE_CODE39
    assert code.metadata.dimensions == 1
    assert code.content == "ABC"


def test_checksum_adds_one_character():
    plain = code39.encode("HELLO", False, False)
    checked = code39.encode("HELLO", True, False)
    assert checked.width == plain.width + 13
    assert _bars(checked)[:plain.width - 12] == _bars(plain)[:plain.width - 12]


def test_numeric_checksum_value():
    assert code39.get_checksum("12") == "3"
    assert code39.encode("12", True, False).checksum == 3


def test_checksum_with_non_encodable_char():
    assert code39.get_checksum("A*") == "#"
    assert code39.get_checksum("a") == "#"


def test_lowercase_needs_full_ascii():
    with pytest.raises(ValueError):
        code39.encode("abc", False, False)


def test_star_rejected():
    with pytest.raises(ValueError):
        code39.encode("A*B", False, False)


def test_full_ascii_mode_expands_content():
    code = code39.encode("a", False, True)
    assert code.content == "+A"
    star = code39.encode("*", False, True)
    assert star.content == "/J"


def test_full_ascii_rejects_non_ascii():
    with pytest.raises(ValueError):
        code39.encode("\u00e9", False, True)