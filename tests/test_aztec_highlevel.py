import pytest

from barcodekit.aztec_highlevel import (
    BinaryShiftToken,
    Mode,
    SimpleToken,
    State,
    high_level_encode,
)
from barcodekit.bitlist import BitList


def bit_str(bits: BitList) -> str:
    return "".join("X" if b else "." for b in bits)


def encoded(data) -> str:
    return bit_str(high_level_encode(data))


def expected(bits: str) -> str:
    return bits.replace(" ", "")


@pytest.mark.parametrize(
    "data, bits",
    [
        (b"A. b.", "...X. ..... ...XX XXX.. ...XX XXXX. XX.X"),
        (
            b"Lorem ipsum.",
            ".XX.X XXX.. X.... X..XX ..XX. .XXX. ....X .X.X. X...X X.X.. X.XX. .XXX. XXXX. XX.X",
        ),
        (
            b"Lo. Test 123.",
            ".XX.X XXX.. X.... ..... ...XX XXX.. X.X.X ..XX. X.X.. X.X.X  XXXX. ...X ..XX .X.. .X.X XX.X",
        ),
        (b"Lo...x", ".XX.X XXX.. X.... XXXX. XX.X XX.X XX.X XXX. XXX.. XX..X"),
        (
            b". x://abc/.",
            "..... ...XX XXX.. XX..X ..... X.X.X ..... X.X.. ..... X.X.. ...X. ...XX ..X.. ..... X.X.. XXXX. XX.X",
        ),
        (b"ABCdEFG", "...X. ...XX ..X.. XXXXX ....X .XX..X.. ..XX. ..XXX .X..."),
    ],
)
def test_high_level_encode(data, bits):
    assert encoded(data) == expected(bits)


def test_high_level_encode_boarding_pass_length():
    data = (
        b"09  UAG    ^160MEUCIQC0sYS/HpKxnBELR1uB85R20OoqqwFGa0q2uEi"
        b"Ygh6utAIgLl1aBVM4EOTQtMQQYH9M2Z3Dp4qnA/fwWuQ+M8L3V8U="
    )
    assert len(high_level_encode(data)) == 823


@pytest.mark.parametrize(
    "data, bits",
    [
        (b"N\x00N", ".XXXX XXXXX ....X ........ .XXXX"),
        (b"N\x00n", ".XXXX XXXXX ...X. ........ .XX.XXX."),
        (b"N\x00\x80 A", ".XXXX XXXXX ...X. ........ X....... ....X ...X."),
        (
            b"\x00a\xff\x80 A",
            "XXXXX ..X.. ........ .XX....X XXXXXXXX X....... ....X ...X.",
        ),
        (b"1234\x00", "XXXX. ..XX .X.. .X.X .XX. XXX. XXXXX ....X ........"),
    ],
)
def test_high_level_encode_binary(data, bits):
    assert encoded(data) == expected(bits)


BINARY_SOURCE = bytes(128 + (i % 30) for i in range(3001))


def _binary_length(i: int) -> int:
    if i <= 31:
        return 8 * i + 10
    if i <= 62:
        return 8 * i + 20
    if i <= 2078:
        return 8 * i + 21
    return 8 * i + 31


@pytest.mark.parametrize(
    "i",
    [1, 2, 3, 10, 29, 30, 31, 32, 33, 60, 61, 62, 63, 64, 2076, 2077, 2078, 2079, 2080, 2100],
)
def test_binary_shift_lengths(i):
    length = _binary_length(i)
    data = BINARY_SOURCE[:i]
    assert len(high_level_encode(data)) == length
    if i not in (1, 32, 2079):
        assert len(high_level_encode(b"a" + BINARY_SOURCE[: i - 1])) == length
        assert len(high_level_encode(BINARY_SOURCE[: i - 1] + b"a")) == length
    assert len(high_level_encode(b"a" + data + b"b")) == length + 15


def test_str_input_matches_bytes_input():
    assert encoded("Lorem ipsum.") == encoded(b"Lorem ipsum.")


def test_empty_input_gives_empty_bits():
    assert len(high_level_encode(b"")) == 0


def test_mode_bit_counts():
    assert Mode.DIGIT.bit_count == 4
    assert Mode.UPPER.bit_count == 5
    assert Mode.PUNCT.bit_count == 5
    # upper -> digit latch is 5 bits, then one 4-bit digit code
    assert State().latch_and_append(Mode.DIGIT, 2).bit_count == 9
    # upper -> punct latch is 10 bits, then one 5-bit punct code
    assert State().latch_and_append(Mode.PUNCT, 2).bit_count == 15


def test_simple_token_str():
    assert str(SimpleToken(None, 5, 5)) == "<00101>"
    assert str(SimpleToken(None, 14, 4)) == "<1110>"


def test_binary_shift_token_str():
    assert str(BinaryShiftToken(None, 3, 4)) == "<3::6>"


def test_binary_shift_token_writes_header_and_bytes():
    bits = BitList()
    BinaryShiftToken(None, 1, 2).append_to(bits, b"x\x01\x02")
    assert bit_str(bits) == expected("XXXXX ...X. .......X ......X.")


def test_latch_and_append_counts_latch_bits():
    state = State().latch_and_append(Mode.LOWER, 2)
    assert state.mode is Mode.LOWER
    assert state.bit_count == 10
    assert bit_str(state.to_bit_list(b"a")) == expected("XXX.. ...X.")


def test_latch_to_same_mode_adds_only_code():
    state = State().latch_and_append(Mode.UPPER, 2)
    assert state.bit_count == 5


def test_shift_and_append_keeps_mode():
    state = State().shift_and_append(Mode.PUNCT, 3)
    assert state.mode is Mode.UPPER
    assert state.bit_count == 10
    assert bit_str(state.to_bit_list(b". ")) == expected("..... ...XX")


def test_binary_shift_costs():
    state = State().add_binary_shift_char(0)
    assert state.binary_shift_byte_count == 1
    assert state.bit_count == 18
    state = state.add_binary_shift_char(1)
    assert state.bit_count == 26


def test_binary_shift_from_digit_latches_to_upper():
    digit = State().latch_and_append(Mode.DIGIT, 2)
    state = digit.add_binary_shift_char(1)
    assert state.mode is Mode.UPPER
    assert state.bit_count == digit.bit_count + 4 + 18


def test_end_binary_shift_without_run_returns_same_state():
    state = State().latch_and_append(Mode.LOWER, 2)
    assert state.end_binary_shift(1) is state


def test_end_binary_shift_closes_run():
    state = State().add_binary_shift_char(0).add_binary_shift_char(1).end_binary_shift(2)
    assert state.binary_shift_byte_count == 0
    assert str(state.tokens) == "<0::1>"


def test_is_better_than_or_equal_to():
    cheap = State()
    costly = State().latch_and_append(Mode.LOWER, 2)
    assert cheap.is_better_than_or_equal_to(State())
    assert not costly.is_better_than_or_equal_to(cheap)
    binary = State().add_binary_shift_char(0)
    assert not State(bit_count=10).is_better_than_or_equal_to(binary)
    assert State(bit_count=8).is_better_than_or_equal_to(binary)


def test_state_str():
    state = State().latch_and_append(Mode.LOWER, 2)
    assert str(state) == "M:1 bits=10 bytes=0: [<11100> <00010>]"