"""Line-by-line difference analysis of two files.

Edit scripts are found with the O(ND) algorithm of Myers, searching from
both ends at once. Unless a minimal script is asked for, heuristics cap
the cost on large inputs with many differences, at the price of a script
that may be longer than necessary but is always correct.
"""

from __future__ import annotations

import sys
from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from numdiffer.discard import discard_confusing_lines, shift_boundaries

SNAKE_LIMIT = 20
"""Snakes longer than this count as big."""

_LIN_MAX = sys.maxsize


@dataclass(frozen=True)
class Change:
    """One hunk of an edit script.

    ``line0`` and ``line1`` are the first affected lines (origin 0) in the
    two files. ``deleted`` lines are removed from the first file and
    ``inserted`` lines come from the second. When nothing is deleted,
    ``line0`` is the line before which the insertion happens; likewise for
    ``line1`` when nothing is inserted.
    """

    line0: int
    line1: int
    deleted: int
    inserted: int


@dataclass
class _Partition:
    xmid: int
    ymid: int
    lo_minimal: bool
    hi_minimal: bool


def _flag(changed: Sequence[bool], k: int) -> bool:
    return 0 <= k < len(changed) and bool(changed[k])


def build_script(changed0: Sequence[bool], changed1: Sequence[bool]) -> list[Change]:
    """Turn per-line change flags of the two files into an edit script."""
    script: list[Change] = []
    i0, i1 = len(changed0), len(changed1)
    while i0 >= 0 or i1 >= 0:
        if _flag(changed0, i0 - 1) or _flag(changed1, i1 - 1):
            line0, line1 = i0, i1
            while _flag(changed0, i0 - 1):
                i0 -= 1
            while _flag(changed1, i1 - 1):
                i1 -= 1
            script.append(Change(i0, i1, line0 - i0, line1 - i1))
        i0 -= 1
        i1 -= 1
    script.reverse()
    return script


class _Comparer:
    """State of one comparison of two sequences of equivalence classes."""

    def __init__(
        self,
        xv: Sequence[int],
        yv: Sequence[int],
        xreal: Sequence[int],
        yreal: Sequence[int],
        changed0: list[bool],
        changed1: list[bool],
        speed_large_files: bool,
    ) -> None:
        self.xv = xv
        self.yv = yv
        self.xreal = xreal
        self.yreal = yreal
        self.changed0 = changed0
        self.changed1 = changed1
        self.speed_large_files = speed_large_files
        diags = len(xv) + len(yv) + 3
        self.offset = len(yv) + 1
        self.fd = [0] * diags
        self.bd = [0] * diags
        too_expensive = 1
        while diags != 0:
            diags >>= 2
            too_expensive <<= 1
        self.too_expensive = max(256, too_expensive)

    def diag(
        self, xoff: int, xlim: int, yoff: int, ylim: int, find_minimal: bool
    ) -> tuple[int, _Partition]:
        """Find the midpoint of the shortest edit script of a subproblem."""
        fd, bd, off = self.fd, self.bd, self.offset
        xv, yv = self.xv, self.yv
        dmin = xoff - ylim
        dmax = xlim - yoff
        fmid = xoff - yoff
        bmid = xlim - ylim
        fmin = fmax = fmid
        bmin = bmax = bmid
        odd = bool((fmid - bmid) & 1)

        fd[fmid + off] = xoff
        bd[bmid + off] = xlim

        c = 0
        while True:
            c += 1
            big_snake = False

            if fmin > dmin:
                fmin -= 1
                fd[fmin - 1 + off] = -1
            else:
                fmin += 1
            if fmax < dmax:
                fmax += 1
                fd[fmax + 1 + off] = -1
            else:
                fmax -= 1
            for d in range(fmax, fmin - 1, -2):
                tlo, thi = fd[d - 1 + off], fd[d + 1 + off]
                x = tlo + 1 if tlo >= thi else thi
                oldx = x
                y = x - d
                while x < xlim and y < ylim and xv[x] == yv[y]:
                    x += 1
                    y += 1
                if x - oldx > SNAKE_LIMIT:
                    big_snake = True
                fd[d + off] = x
                if odd and bmin <= d <= bmax and bd[d + off] <= x:
                    return 2 * c - 1, _Partition(x, y, True, True)

            if bmin > dmin:
                bmin -= 1
                bd[bmin - 1 + off] = _LIN_MAX
            else:
                bmin += 1
            if bmax < dmax:
                bmax += 1
                bd[bmax + 1 + off] = _LIN_MAX
            else:
                bmax -= 1
            for d in range(bmax, bmin - 1, -2):
                tlo, thi = bd[d - 1 + off], bd[d + 1 + off]
                x = tlo if tlo < thi else thi - 1
                oldx = x
                y = x - d
                while x > xoff and y > yoff and xv[x - 1] == yv[y - 1]:
                    x -= 1
                    y -= 1
                if oldx - x > SNAKE_LIMIT:
                    big_snake = True
                bd[d + off] = x
                if not odd and fmin <= d <= fmax and x <= fd[d + off]:
                    return 2 * c, _Partition(x, y, True, True)

            if find_minimal:
                continue

            # Look for a diagonal that has made much progress compared with
            # the edit distance, and take it as if the search had succeeded.
            if c > 200 and big_snake and self.speed_large_files:
                best = 0
                part = None
                for d in range(fmax, fmin - 1, -2):
                    dd = d - fmid
                    x = fd[d + off]
                    y = x - d
                    v = (x - xoff) * 2 - dd
                    if (
                        v > 12 * (c + abs(dd))
                        and v > best
                        and xoff + SNAKE_LIMIT <= x < xlim
                        and yoff + SNAKE_LIMIT <= y < ylim
                    ):
                        k = 1
                        while xv[x - k] == yv[y - k]:
                            if k == SNAKE_LIMIT:
                                best = v
                                part = (x, y)
                                break
                            k += 1
                if best > 0 and part is not None:
                    return 2 * c - 1, _Partition(part[0], part[1], True, False)

                best = 0
                part = None
                for d in range(bmax, bmin - 1, -2):
                    dd = d - bmid
                    x = bd[d + off]
                    y = x - d
                    v = (xlim - x) * 2 + dd
                    if (
                        v > 12 * (c + abs(dd))
                        and v > best
                        and xoff < x <= xlim - SNAKE_LIMIT
                        and yoff < y <= ylim - SNAKE_LIMIT
                    ):
                        k = 0
                        while xv[x + k] == yv[y + k]:
                            if k == SNAKE_LIMIT - 1:
                                best = v
                                part = (x, y)
                                break
                            k += 1
                if best > 0 and part is not None:
                    return 2 * c - 1, _Partition(part[0], part[1], False, True)

            # Gone well beyond the call of duty: settle halfway between the
            # best results so far.
            if c >= self.too_expensive:
                fxybest, fxbest = -1, 0
                for d in range(fmax, fmin - 1, -2):
                    x = min(fd[d + off], xlim)
                    y = x - d
                    if ylim < y:
                        x, y = ylim + d, ylim
                    if fxybest < x + y:
                        fxybest, fxbest = x + y, x

                bxybest, bxbest = _LIN_MAX, 0
                for d in range(bmax, bmin - 1, -2):
                    x = max(xoff, bd[d + off])
                    y = x - d
                    if y < yoff:
                        x, y = yoff + d, yoff
                    if x + y < bxybest:
                        bxybest, bxbest = x + y, x

                if (xlim + ylim) - bxybest < fxybest - (xoff + yoff):
                    return 2 * c - 1, _Partition(fxbest, fxybest - fxbest, True, False)
                return 2 * c - 1, _Partition(bxbest, bxybest - bxbest, False, True)

    def compareseq(
        self, xoff: int, xlim: int, yoff: int, ylim: int, find_minimal: bool
    ) -> None:
        """Mark the changed lines of two subsequences known to correspond."""
        xv, yv = self.xv, self.yv
        pending = [(xoff, xlim, yoff, ylim, find_minimal)]
        while pending:
            xoff, xlim, yoff, ylim, minimal = pending.pop()
            while xoff < xlim and yoff < ylim and xv[xoff] == yv[yoff]:
                xoff += 1
                yoff += 1
            while xlim > xoff and ylim > yoff and xv[xlim - 1] == yv[ylim - 1]:
                xlim -= 1
                ylim -= 1

            if xoff == xlim:
                for k in range(yoff, ylim):
                    self.changed1[self.yreal[k]] = True
            elif yoff == ylim:
                for k in range(xoff, xlim):
                    self.changed0[self.xreal[k]] = True
            else:
                cost, part = self.diag(xoff, xlim, yoff, ylim, minimal)
                if cost == 1:
                    raise RuntimeError("edit script midpoint search found an empty side")
                pending.append((part.xmid, xlim, part.ymid, ylim, part.hi_minimal))
                pending.append((xoff, part.xmid, yoff, part.ymid, part.lo_minimal))


def diff_equivs(
    equivs0: Sequence[int],
    equivs1: Sequence[int],
    minimal: bool = False,
    speed_large_files: bool = False,
) -> list[Change]:
    """Compare two sequences of line equivalence classes.

    Return the edit script turning the first sequence into the second.
    With ``minimal`` the script is as short as possible; otherwise it may
    be longer on large inputs with many differences.
    """
    (xv, xreal, changed0), (yv, yreal, changed1) = discard_confusing_lines(
        equivs0, equivs1, minimal
    )
    comparer = _Comparer(xv, yv, xreal, yreal, changed0, changed1, speed_large_files)
    comparer.compareseq(0, len(xv), 0, len(yv), minimal)
    shift_boundaries(equivs0, equivs1, changed0, changed1)
    return build_script(changed0, changed1)


def diff_lines(
    lines0: Sequence[Hashable],
    lines1: Sequence[Hashable],
    minimal: bool = False,
    speed_large_files: bool = False,
) -> list[Change]:
    """Compare two sequences of lines; equal lines match each other."""
    classes: dict[Hashable, int] = {}

    def classify(lines: Sequence[Hashable]) -> list[int]:
        return [classes.setdefault(line, len(classes) + 1) for line in lines]

    equivs0 = classify(lines0)
    equivs1 = classify(lines1)
    return diff_equivs(equivs0, equivs1, minimal, speed_large_files)