import pytest

from barcodekit.bitlist import BitList


def test_new_list_is_all_false():
    bl = BitList(10)
    assert len(bl) == 10
    assert not any(bl)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        BitList(-1)


def test_add_bit_appends_in_order():
    bl = BitList()
    bl.add_bit(True, False, True)
    bl.add_bit(False)
    assert list(bl) == [True, False, True, False]


@pytest.mark.parametrize("value", range(256))
def test_add_byte_get_bytes_round_trip(value):
    bl = BitList()
    bl.add_byte(value)
    assert bl.get_bytes() == bytes([value])


def test_add_bits_round_trip_through_bytes():
    bl = BitList()
    bl.add_bits(0xBEEF, 16)
    assert int.from_bytes(bl.get_bytes(), "big") == 0xBEEF


def test_add_bits_keeps_only_low_bits():
    wide = BitList()
    wide.add_bits(0x1FF, 8)
    narrow = BitList()
    narrow.add_byte(0xFF)
    assert wide == narrow


def test_add_bits_zero_count_adds_nothing():
    bl = BitList()
    bl.add_bits(7, 0)
    assert len(bl) == 0


def test_get_bytes_pads_last_byte():
    bl = BitList()
    bl.add_bit(True)
    assert bl.get_bytes() == b"\x80"


def test_get_bytes_length():
    for n in range(20):
        assert len(BitList(n).get_bytes()) == (n + 7) // 8


def test_set_and_get_bit():
    bl = BitList(5)
    bl.set_bit(3, True)
    assert bl.get_bit(3) is True
    assert [bl.get_bit(i) for i in range(5)].count(True) == 1
    bl.set_bit(3, False)
    assert bl.get_bit(3) is False


@pytest.mark.parametrize("index", [-1, 5, 100])
def test_out_of_range_raises(index):
    bl = BitList(5)
    with pytest.raises(IndexError):
        bl.get_bit(index)
    with pytest.raises(IndexError):
        bl.set_bit(index, True)