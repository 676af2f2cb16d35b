"""A fixed-size bitmap of small non-negative integers."""

from __future__ import annotations


class BitMap:
    """Set of integers in ``0..nbits`` stored one bit each."""

    def __init__(self, nbits: int) -> None:
        if nbits < 0:
            raise ValueError("nbits must not be negative")
        self.nbits = nbits
        self._data = bytearray(nbits // 8 + 1)

    def add(self, value: int) -> None:
        """Mark *value* as present; values outside ``0..nbits`` overflow."""
        if value < 0 or value > self.nbits:
            raise ValueError(f"{value} overflows a bitmap of {self.nbits} bits")
        self._data[value // 8] |= 1 << (value % 8)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or value < 0 or value > self.nbits:
            return False
        return bool(self._data[value // 8] & (1 << (value % 8)))