import pytest

from barcodekit.code93 import encode, get_checksum


def bars(code):
    return "".join("1" if code.is_set(x, 0) else "0" for x in range(code.width))


def test_checksum_c():
    assert get_checksum("TEST93", 20) == "+"


def test_checksum_k():
    assert get_checksum("TEST93+", 15) == "6"


def test_checksum_of_unknown_char_is_space():
    assert get_checksum("abc", 20) == " "


def test_encode():
    expected = (
        "1010111101101010001101001001101000101100101001100100101100010101011010001011001"
        "001011000101001101001000110101010110001010011001010001101001011001000101101101101001"
        "101100101101011001101001101100101101100110101011011001011001101001101101001110101000"
        "101001010010001010001001010000101001010001001001001001000101010100001000100101000010"
        "101001110101010000101010111101"
    )
    code = encode("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789", True, False)
    assert code.width == len(expected)
    assert bars(code) == expected


def test_frame_and_length():
    code = encode("TEST93", True, False)
    # start, six characters, two check characters, stop, termination bar
    assert code.width == 10 * 9 + 1
    assert bars(code).startswith("101011110")
    assert bars(code).endswith("1010111101")


def test_without_k_checksum_is_one_symbol_shorter():
    with_k = encode("TEST93", True, False)
    without_k = encode("TEST93", False, False)
    assert with_k.width - without_k.width == 9


def test_star_rejected_without_full_ascii():
    with pytest.raises(ValueError):
        encode("A*B", True, False)


def test_lowercase_needs_full_ascii():
    with pytest.raises(ValueError):
        encode("abc", True, False)


def test_full_ascii_prepares_content():
    code = encode("a*", True, True)
    assert code.content == "\u00f4A\u00f3J"
    assert code.metadata.code_kind == "Code 93"
    assert code.metadata.dimensions == 1


def test_full_ascii_rejects_non_ascii():
    with pytest.raises(ValueError):
        encode("ä", True, True)