import pytest

from leafedit.pkgint import PackedInts, pack4, pack8, pack16


def test_pack16_layout():
    assert pack16(0x1234, 0xABCD) == 0xABCD1234


def test_pack8_layout():
    assert pack8(0x01, 0x02, 0x03, 0x04) == 0x04030201


def test_four_bit_round_trip():
    units = [1, 2, 3, 4, 5, 6, 7, 8, 15, 0, 9, 10, 11, 12, 13, 14]
    table = PackedInts(4, [pack4(*units[:8]), pack4(*units[8:])])
    assert [table[i] for i in range(len(table))] == units


def test_eight_bit_round_trip():
    units = [0, 255, 17, 128, 3, 4, 5, 6]
    table = PackedInts(8, [pack8(*units[:4]), pack8(*units[4:])])
    assert list(table) == units


def test_sixteen_bit_round_trip():
    units = [65535, 0, 4096, 7]
    table = PackedInts(16, [pack16(*units[:2]), pack16(*units[2:])])
    assert [table[i] for i in range(4)] == units


def test_length():
    assert len(PackedInts(4, [0, 0])) == 16
    assert len(PackedInts(16, [0])) == 2


def test_bad_width():
    with pytest.raises(ValueError):
        PackedInts(12, [0])


def test_out_of_range():
    table = PackedInts(8, [pack8(1, 2, 3, 4)])
    assert table[0] == 1
    assert table[3] == 4
    with pytest.raises(IndexError):
        table[4]
    with pytest.raises(IndexError):
        table[-1]