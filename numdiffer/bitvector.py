"""A growable vector of bits stored in whole bytes."""

from __future__ import annotations

from collections.abc import Sequence

BITS_PER_BYTE = 8


def _check_position(pos: int) -> None:
    if pos < 0:
        raise ValueError(f"bit position must not be negative: {pos}")


class BitVector:
    """A vector of bits whose size is always a whole number of bytes.

    Bits are numbered from zero, the lowest bit of the first byte.
    Writing past the end enlarges the vector; the new bits start cleared.
    """

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        nbytes = (size - 1) // BITS_PER_BYTE + 1 if size > 0 else 0
        self._bytes = bytearray(nbytes)

    def __len__(self) -> int:
        return len(self._bytes) * BITS_PER_BYTE

    def __repr__(self) -> str:
        return f"BitVector({self.to_string()!r})"

    def _grow_to_hold(self, nbits: int) -> None:
        needed = (nbits - 1) // BITS_PER_BYTE + 1
        if needed > len(self._bytes):
            self._bytes.extend(bytes(needed - len(self._bytes)))

    def _read(self, pos: int) -> int:
        byte, bit = divmod(pos, BITS_PER_BYTE)
        return (self._bytes[byte] >> bit) & 1

    def _write(self, pos: int, value: object) -> None:
        byte, bit = divmod(pos, BITS_PER_BYTE)
        if value:
            self._bytes[byte] |= 1 << bit
        else:
            self._bytes[byte] &= ~(1 << bit) & 0xFF

    def get(self, pos: int) -> int:
        """Return the bit at ``pos`` as 0 or 1."""
        _check_position(pos)
        if pos >= len(self):
            raise IndexError(f"bit position {pos} out of range for size {len(self)}")
        return self._read(pos)

    def get_range(self, start: int, end: int) -> list[int | None]:
        """Return the bits in ``[start, end)``.

        Positions past the end of the vector come back as ``None``.
        An empty list is returned when the range is empty or starts
        past the end of the vector.
        """
        _check_position(start)
        size = len(self)
        if end <= start or start >= size:
            return []
        present = [self._read(pos) for pos in range(start, min(end, size))]
        return present + [None] * (end - start - len(present))

    def set(self, pos: int, value: object) -> None:
        """Set the bit at ``pos``; a false ``value`` clears it."""
        _check_position(pos)
        self._grow_to_hold(pos + 1)
        self._write(pos, value)

    def set_range(self, start: int, end: int, values: Sequence[object]) -> None:
        """Set the bits in ``[start, end)`` from ``values`` in order."""
        _check_position(start)
        if end <= start:
            return
        if len(values) < end - start:
            raise ValueError(
                f"need {end - start} values for range [{start}, {end}), got {len(values)}"
            )
        self._grow_to_hold(end)
        for pos, value in zip(range(start, end), values):
            self._write(pos, value)

    def set_range_to(self, start: int, end: int, value: object) -> None:
        """Set every bit in ``[start, end)`` to ``value``."""
        _check_position(start)
        if end <= start:
            return
        self._grow_to_hold(end)
        for pos in range(start, end):
            self._write(pos, value)

    def flip_range(self, start: int, end: int) -> int:
        """Invert the bits in ``[start, min(end, len(self)))``.

        Return how many bits were flipped.
        """
        _check_position(start)
        stop = min(end, len(self))
        if start >= stop:
            return 0
        for pos in range(start, stop):
            byte, bit = divmod(pos, BITS_PER_BYTE)
            self._bytes[byte] ^= 1 << bit
        return stop - start

    def to_string(self) -> str:
        """Render the bits as '0'/'1', highest bit leftmost."""
        return "".join(str(self._read(pos)) for pos in reversed(range(len(self))))

    def __str__(self) -> str:
        return self.to_string()

    def clear(self) -> None:
        """Drop every bit, leaving an empty vector."""
        self._bytes = bytearray()