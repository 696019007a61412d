"""Table-driven CRC computation for 8, 16 and 32 bit registers."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable

PRESETS = {
    "CRC8_07": (8, 0x07),
    "CRC8_31": (8, 0x31),
    "CRC16_8005": (16, 0x8005),
    "CRC16_1021": (16, 0x1021),
    "CRC16_3D65": (16, 0x3D65),
    "CRC32_04C11DB7": (32, 0x04C11DB7),
}

_WIDTHS = (8, 16, 32)


def reflect(value: int, bits: int) -> int:
    """Reverse the order of the lowest ``bits`` bits of ``value``."""
    result = 0
    for bit in range(bits):
        if value & 1:
            result |= 1 << (bits - 1 - bit)
        value >>= 1
    return result


@lru_cache(maxsize=None)
def _table(width: int, poly: int) -> tuple[int, ...]:
    mask = (1 << width) - 1
    top_bit = 1 << (width - 1)
    entries = []
    for i in range(256):
        reg = i << (width - 8)
        for _ in range(8):
            carry = reg & top_bit
            reg = (reg << 1) & mask
            if carry:
                reg ^= poly
        entries.append(reg)
    return tuple(entries)


class Crc:
    """Incremental CRC calculator with configurable reflection and output XOR."""

    def __init__(
        self,
        width: int,
        poly: int,
        init: int = 0,
        xor_out: int = 0,
        ref_in: bool = False,
        ref_out: bool = False,
    ) -> None:
        if width not in _WIDTHS:
            raise ValueError(f"unsupported CRC width: {width}")
        self._width = width
        self._mask = (1 << width) - 1
        self._poly = poly & self._mask
        self._init = init & self._mask
        self._xor_out = xor_out & self._mask
        self._ref_in = ref_in
        self._ref_out = ref_out
        self._register = self._init
        self._table = _table(width, self._poly)

    @property
    def width(self) -> int:
        return self._width

    @property
    def poly(self) -> int:
        return self._poly

    def put_byte(self, byte: int) -> None:
        """Feed a single byte into the register."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte out of range: {byte}")
        if self._ref_in:
            byte = reflect(byte, 8)
        top = (self._register >> (self._width - 8)) ^ byte
        self._register = ((self._register << 8) & self._mask) ^ self._table[top]

    def put_bytes(self, data: Iterable[int]) -> None:
        """Feed a sequence of bytes into the register."""
        for byte in data:
            self.put_byte(byte)

    def done(self) -> int:
        """Return the checksum and reset the register to its initial value."""
        value = reflect(self._register, self._width) if self._ref_out else self._register
        self._register = self._init
        return value ^ self._xor_out

    def calc(self, data: Iterable[int]) -> int:
        """Compute the checksum of ``data`` in one call."""
        self.put_bytes(data)
        return self.done()