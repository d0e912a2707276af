"""Set of alternative frequency codes received from a station."""

from typing import Iterator

__all__ = ["AlternativeFrequencies", "AF_MIN", "AF_MAX", "BUFFER_SIZE"]

AF_MIN = 1
AF_MAX = 204
BUFFER_SIZE = AF_MAX // 8 + 1


class AlternativeFrequencies:
    """Bitmap of AF codes 1..204, most significant bit first in each byte."""

    def __init__(self) -> None:
        self._bits = bytearray(BUFFER_SIZE)

    @staticmethod
    def _valid(value: int) -> bool:
        return AF_MIN <= value <= AF_MAX

    def add(self, value: int) -> bool:
        """Mark a code as present; return False if it is out of range."""
        if not self._valid(value):
            return False
        self._bits[value // 8] |= 0x80 >> (value % 8)
        return True

    def contains(self, value: int) -> bool:
        """Return whether a valid code has been marked."""
        if not self._valid(value):
            return False
        return bool(self._bits[value // 8] & (0x80 >> (value % 8)))

    def clear(self) -> None:
        """Remove every code."""
        self._bits[:] = bytes(BUFFER_SIZE)

    def to_bytes(self) -> bytes:
        """Return a copy of the underlying bitmap."""
        return bytes(self._bits)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def __iter__(self) -> Iterator[int]:
        return (v for v in range(AF_MIN, AF_MAX + 1) if self.contains(v))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"AlternativeFrequencies({list(self)!r})"