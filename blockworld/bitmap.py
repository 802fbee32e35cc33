"""A fixed-size set of bits."""

from __future__ import annotations


class Bitmap:
    """A zero-initialised array of ``size`` bits."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("bitmap size must be non-negative")
        self._size = size
        # storage is rounded up in 64-bit words, one more than size // 64
        self._data = bytearray(((size // 64) + 1) * 8)

    def _check(self, n: int) -> None:
        if not 0 <= n < self._size:
            raise IndexError(f"bit {n} out of range for bitmap of {self._size}")

    def set(self, n: int) -> None:
        self._check(n)
        self._data[n // 8] |= 1 << (n % 8)

    def get(self, n: int) -> bool:
        self._check(n)
        return bool(self._data[n // 8] & (1 << (n % 8)))

    def clear(self, n: int) -> None:
        self._check(n)
        self._data[n // 8] &= ~(1 << (n % 8)) & 0xFF

    def __len__(self) -> int:
        return self._size

    def __contains__(self, n: object) -> bool:
        return isinstance(n, int) and 0 <= n < self._size and self.get(n)