"""Read-only view over a packed bitset, least significant bit first."""

from __future__ import annotations


class BitsetView:
    """A view over *num_bits* bits packed into *data*."""

    __slots__ = ("_data", "_num_bits")

    def __init__(self, data: bytes | bytearray | memoryview | None = None, num_bits: int = 0) -> None:
        self._data = memoryview(data if data is not None else b"").cast("B")
        self._num_bits = num_bits if data is not None else 0

    @property
    def data(self) -> memoryview:
        return self._data

    def __len__(self) -> int:
        return self._num_bits

    def empty(self) -> bool:
        return self._num_bits == 0

    def byte_size(self) -> int:
        """Number of bytes the bits occupy."""
        return (self._num_bits + 7) >> 3

    def test(self, index: int) -> bool:
        """Return whether bit *index* is set."""
        return bool(self._data[index >> 3] & (1 << (index & 7)))

    def count(self) -> int:
        """Number of set bits in the occupied bytes."""
        return int.from_bytes(self._data[: self.byte_size()], "little").bit_count()

    def to_string(self, start: int, stop: int) -> str:
        """Render bits ``start`` up to ``stop`` (clamped to the size) as '0'/'1'."""
        if self.empty():
            return ""
        stop = min(stop, self._num_bits)
        return "".join("1" if self.test(i) else "0" for i in range(start, stop))