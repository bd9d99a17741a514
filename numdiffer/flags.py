"""Record of which file each compared line is read from."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator

from numdiffer.analyze import Change


class LineSource(enum.IntEnum):
    """Which of the two files the next line comes from."""

    FIRST = 1
    SECOND = 2
    BOTH = 3


class FlagTable:
    """An ordered sequence of ``LineSource`` entries."""

    def __init__(self) -> None:
        self._entries = bytearray()

    def append(self, elem: int) -> None:
        """Add one entry; it must be 1, 2 or 3."""
        self._entries.append(LineSource(elem))

    def extend(self, elems: Iterable[int]) -> None:
        """Add several entries in order."""
        for elem in elems:
            self.append(elem)

    def __iter__(self) -> Iterator[LineSource]:
        return (LineSource(e) for e in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        if not self._entries:
            return "<The array is empty>"
        return "".join(str(e) for e in self._entries)

    def __repr__(self) -> str:
        return f"FlagTable({str(self)!r})"


class _Recorder:
    def __init__(self) -> None:
        self.table = FlagTable()
        self.next0 = 0
        self.next1 = 0

    def common(self, limit0: int, limit1: int) -> None:
        paired = min(limit0 - self.next0, limit1 - self.next1)
        self.table.extend([LineSource.BOTH] * max(paired, 0))
        self.table.extend([LineSource.SECOND] * max(limit1 - self.next1 - paired, 0))
        self.table.extend([LineSource.FIRST] * max(limit0 - self.next0 - paired, 0))
        self.next0 = limit0
        self.next1 = limit1

    def hunk(self, change: Change) -> None:
        if not change.deleted and not change.inserted:
            return
        self.common(change.line0, change.line1)
        paired = min(change.deleted, change.inserted)
        self.table.extend([LineSource.BOTH] * paired)
        self.table.extend([LineSource.SECOND] * (change.inserted - paired))
        self.table.extend([LineSource.FIRST] * (change.deleted - paired))
        self.next0 = change.line0 + change.deleted
        self.next1 = change.line1 + change.inserted


def notedown_script(changes: Iterable[Change], len0: int, len1: int) -> FlagTable:
    """Turn an edit script into the order in which lines are compared.

    Changed lines of both files are paired first, then lines only in the
    second file, then lines only in the first. ``len0`` and ``len1`` are
    the line counts of the two files.
    """
    recorder = _Recorder()
    for change in changes:
        recorder.hunk(change)
    recorder.common(len0, len1)
    return recorder.table