"""Pre-filtering of lines before the main comparison, and tidying of its result.

Lines are represented by equivalence classes: two lines are equal exactly
when their classes are equal. Class ``0`` is never treated as unmatched.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence, Sequence

_KEEP = 0
_DISCARD = 1
_PROVISIONAL = 2

FileSplit = tuple[list[int], list[int], list[bool]]


def _provisional_threshold(nlines: int) -> int:
    """Return about 5 times the square root of ``nlines / 64``, at least 5."""
    many = 5
    tem = nlines // 64
    while (tem := tem >> 2) > 0:
        many *= 2
    return many


def _mark(equivs: Sequence[int], other: Sequence[int]) -> list[int]:
    counts = Counter(other)
    many = _provisional_threshold(len(equivs))
    marks = [_KEEP] * len(equivs)
    for i, eq in enumerate(equivs):
        if eq == 0:
            continue
        nmatch = counts[eq]
        if nmatch == 0:
            marks[i] = _DISCARD
        elif nmatch > many:
            marks[i] = _PROVISIONAL
    return marks


def _cancel_from_edge(marks: list[int], positions: range) -> None:
    """Cancel provisionals near one edge of a run, up to a solid stretch."""
    consec = 0
    for step, pos in enumerate(positions):
        if step >= 8 and marks[pos] == _DISCARD:
            break
        if marks[pos] == _PROVISIONAL:
            consec = 0
            marks[pos] = _KEEP
        elif marks[pos] == _KEEP:
            consec = 0
        else:
            consec += 1
        if consec == 3:
            break


def _refine(marks: list[int]) -> None:
    """Keep provisional discards only inside runs of real discards."""
    end = len(marks)
    i = 0
    while i < end:
        if marks[i] == _PROVISIONAL:
            marks[i] = _KEEP
        elif marks[i] != _KEEP:
            j = i
            provisional = 0
            while j < end and marks[j] != _KEEP:
                if marks[j] == _PROVISIONAL:
                    provisional += 1
                j += 1
            while j > i and marks[j - 1] == _PROVISIONAL:
                j -= 1
                marks[j] = _KEEP
                provisional -= 1
            length = j - i

            if provisional * 4 > length:
                for k in range(i, j):
                    if marks[k] == _PROVISIONAL:
                        marks[k] = _KEEP
            else:
                minimum = 1
                tem = length >> 2
                while (tem := tem >> 2) > 0:
                    minimum <<= 1
                minimum += 1

                # Cancel every subrun of MINIMUM or more provisionals.
                k = 0
                consec = 0
                while k < length:
                    if marks[i + k] != _PROVISIONAL:
                        consec = 0
                    else:
                        consec += 1
                        if consec == minimum:
                            k -= consec
                        elif consec > minimum:
                            marks[i + k] = _KEEP
                    k += 1

                _cancel_from_edge(marks, range(i, i + length))
                i += length - 1
                _cancel_from_edge(marks, range(i, i - length, -1))
        i += 1


def _split(equivs: Sequence[int], marks: Sequence[int], minimal: bool) -> FileSplit:
    undiscarded: list[int] = []
    realindexes: list[int] = []
    changed = [False] * len(equivs)
    for i, (eq, mark) in enumerate(zip(equivs, marks)):
        if minimal or mark == _KEEP:
            undiscarded.append(eq)
            realindexes.append(i)
        else:
            changed[i] = True
    return undiscarded, realindexes, changed


def discard_confusing_lines(
    equivs0: Sequence[int], equivs1: Sequence[int], minimal: bool
) -> tuple[FileSplit, FileSplit]:
    """Set aside lines that cannot take part in a useful match.

    A line whose class never occurs in the other file is discarded; a line
    whose class occurs very often there is discarded only when it sits
    within a run of such unmatched lines. With ``minimal`` nothing is
    discarded.

    Return one ``(undiscarded, realindexes, changed)`` triple per file:
    the classes of the kept lines, the original index of each kept line,
    and a flag per original line that is true for discarded lines.
    """
    marks0 = _mark(equivs0, equivs1)
    marks1 = _mark(equivs1, equivs0)
    _refine(marks0)
    _refine(marks1)
    return _split(equivs0, marks0, minimal), _split(equivs1, marks1, minimal)


class _Flags:
    """Change flags read as false outside the file's lines."""

    def __init__(self, data: MutableSequence[bool]) -> None:
        self._data = data

    def __getitem__(self, k: int) -> bool:
        return 0 <= k < len(self._data) and bool(self._data[k])

    def __setitem__(self, k: int, value: bool) -> None:
        self._data[k] = value


def _shift_one(equivs: Sequence[int], changed: _Flags, other: _Flags) -> None:
    i = j = 0
    i_end = len(equivs)
    while True:
        # Find the next run of changes, tracking the matching point in the other file.
        while i < i_end and not changed[i]:
            while other[j]:
                j += 1
            j += 1
            i += 1
        if i == i_end:
            break

        start = i
        i += 1
        while changed[i]:
            i += 1
        while other[j]:
            j += 1

        while True:
            runlength = i - start

            # Slide the run back, merging with earlier runs.
            while start and equivs[start - 1] == equivs[i - 1]:
                start -= 1
                changed[start] = True
                i -= 1
                changed[i] = False
                while changed[start - 1]:
                    start -= 1
                j -= 1
                while other[j]:
                    j -= 1

            corresponding = i if other[j - 1] else i_end

            # Slide the run forward, merging with later runs.
            while i != i_end and equivs[start] == equivs[i]:
                changed[start] = False
                start += 1
                changed[i] = True
                i += 1
                while changed[i]:
                    i += 1
                j += 1
                while other[j]:
                    corresponding = i
                    j += 1

            if runlength == i - start:
                break

        # Move the merged run back to line up with a run in the other file.
        while corresponding < i:
            start -= 1
            changed[start] = True
            i -= 1
            changed[i] = False
            j -= 1
            while other[j]:
                j -= 1


def shift_boundaries(
    equivs0: Sequence[int],
    equivs1: Sequence[int],
    changed0: MutableSequence[bool],
    changed1: MutableSequence[bool],
) -> None:
    """Slide runs of changed lines over identical lines to join them up.

    ``changed0`` and ``changed1`` are updated in place. The number of
    changed lines in each file and the sequence of unchanged lines stay
    the same.
    """
    flags0, flags1 = _Flags(changed0), _Flags(changed1)
    _shift_one(equivs0, flags0, flags1)
    _shift_one(equivs1, flags1, flags0)