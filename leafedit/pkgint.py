"""Small integers packed into 32-bit words, as used by state-machine tables."""

from __future__ import annotations

from collections.abc import Iterable

_MASK32 = 0xFFFFFFFF

# bits per unit -> (index shift, shift mask, bit shift, unit mask)
_LAYOUTS = {
    4: (3, 7, 2, 0x0000000F),
    8: (2, 3, 3, 0x000000FF),
    16: (1, 1, 4, 0x0000FFFF),
}


def pack16(a: int, b: int) -> int:
    """Pack two 16-bit units into one word, first unit lowest."""
    return ((b << 16) | a) & _MASK32


def pack8(a: int, b: int, c: int, d: int) -> int:
    """Pack four 8-bit units into one word, first unit lowest."""
    return pack16((b << 8) | a, (d << 8) | c)


def pack4(a: int, b: int, c: int, d: int, e: int, f: int, g: int, h: int) -> int:
    """Pack eight 4-bit units into one word, first unit lowest."""
    return pack8((b << 4) | a, (d << 4) | c, (f << 4) | e, (h << 4) | g)


class PackedInts:
    """Read-only sequence of fixed-width units stored in 32-bit words."""

    def __init__(self, bits: int, data: Iterable[int]) -> None:
        try:
            self._idxsft, self._sftmsk, self._bitsft, self._unitmsk = _LAYOUTS[bits]
        except KeyError:
            raise ValueError(f"unit width must be 4, 8 or 16 bits, not {bits}") from None
        self.bits = bits
        self.data = tuple(int(word) & _MASK32 for word in data)

    def __len__(self) -> int:
        return len(self.data) * (32 // self.bits)

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range")
        word = self.data[index >> self._idxsft]
        return (word >> ((index & self._sftmsk) << self._bitsft)) & self._unitmsk