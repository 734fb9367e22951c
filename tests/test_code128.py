import pytest

from barcodekit.code128 import (
    FNC1,
    FNC2,
    FNC3,
    FNC4,
    START_B,
    START_C,
    encode,
    encode_without_checksum,
    get_code_index_list,
    should_use_a_table,
    should_use_c_table,
)
from barcodekit.core import COLOR_SCHEME_16

ENC_FNC1 = "11110101110"
ENC_FNC2 = "11110101000"
ENC_FNC3 = "10111100010"
ENC_FNC4 = "10111101110"
ENC_START_B = "11010010000"
ENC_STOP = "1100011101011"


def bars(code):
    return "".join("1" if code.is_set(x, 0) else "0" for x in range(code.width))


@pytest.mark.parametrize(
    "text, expected",
    [
        (FNC1 + "A23", ENC_START_B + ENC_FNC1 + "10100011000" + "11001110010" + "11001011100" + "10100011110" + ENC_STOP),
        (FNC2 + "123", ENC_START_B + ENC_FNC2 + "10011100110" + "11001110010" + "11001011100" + "11100010110" + ENC_STOP),
        (FNC3 + "123", ENC_START_B + ENC_FNC3 + "10011100110" + "11001110010" + "11001011100" + "11101000110" + ENC_STOP),
        (FNC4 + "123", ENC_START_B + ENC_FNC4 + "10011100110" + "11001110010" + "11001011100" + "11100011010" + ENC_STOP),
    ],
)
def test_encode_function_chars(text, expected):
    assert bars(encode(text)) == expected


@pytest.mark.parametrize("text", ["", "ä"])
def test_unencodable(text):
    with pytest.raises(ValueError):
        encode(text)


def test_too_long_content():
    with pytest.raises(ValueError):
        encode("A" * 81)


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            "HI345678H",
            "110100100001100010100011000100010101110111101000101100011100010110110000101001011110111011000101000111011000101100011101011",
        ),
        ("334455", "11010011100101000110001000110111011101000110100100111101100011101011"),
        (
            FNC1 + "1234",
            "11010011100" + "11110101110" + "10110011100" + "10001011000" + "11101001100" + "1100011101011",
        ),
    ],
)
def test_encode_c_table(text, expected):
    assert bars(encode(text)) == expected


def test_checksum_value():
    assert encode(FNC1 + "1234").checksum == 24


def test_should_use_c_table():
    assert should_use_c_table([FNC1, "1", "2"], START_C) is True
    assert should_use_c_table([FNC1, "1"], START_C) is False
    assert should_use_c_table(["0", FNC1, "1"], START_C) is False
    assert should_use_c_table(["0", "1", FNC1, "2", "3"], START_B) is True
    assert should_use_c_table(["0", "1", FNC1], START_B) is False


def test_issue16():
    assert should_use_a_table(["\r", "A"], 0) is True
    assert should_use_a_table([FNC1, "\r"], 0) is True
    assert should_use_a_table([FNC1, "1", "2", "3"], 0) is False
    assert bars(encode(FNC3 + "$P\rI")) == (
        "110100001001011110001010010001100111011101101111011101011000100010110001010001100011101011"
    )


def test_datalogic():
    assert bars(encode(FNC3 + "$P\r")) == (
        "11010000100" + "10111100010" + "10010001100" + "11101110110"
        + "11110111010" + "11000100010" + "1100011101011"
    )
    assert bars(encode(FNC3 + "$P,Ae,P\r")) == (
        "11010010000" + "10111100010" + "10010001100" + "11101110110"
        + "10110011100" + "10100011000" + "10110010000" + "10110011100"
        + "11101110110" + "11101011110" + "11110111010" + "10110001000"
        + "1100011101011"
    )


def test_code_index_list_c_table():
    assert get_code_index_list("334455") == [START_C, 33, 44, 55]


def test_code_index_list_rejects_unknown_char():
    with pytest.raises(ValueError):
        get_code_index_list("ä")


def test_without_checksum_drops_check_symbol():
    with_cs = encode("334455")
    without = encode_without_checksum("334455")
    assert bars(without) == bars(with_cs)[:-24] + ENC_STOP
    assert without.width == with_cs.width - 11
    assert without.checksum is None


def test_without_checksum_rejects_empty():
    with pytest.raises(ValueError):
        encode_without_checksum("")


def test_metadata_and_colors():
    code = encode("334455")
    assert code.metadata.code_kind == "Code 128"
    assert code.metadata.dimensions == 1
    assert code.content == "334455"
    assert code.at(0, 0) == COLOR_SCHEME_16.foreground
    assert code.at(2, 0) == COLOR_SCHEME_16.background