"""Buffer helpers: reading whole blocks and choosing buffer sizes."""

from __future__ import annotations

import math
import os

DEFAULT_BUFFER_SIZE = 8 * 1024


def buffer_lcm(a: int, b: int, lcm_max: int) -> int:
    """Return the least common multiple of buffer sizes ``a`` and ``b``.

    A zero size is replaced by a reasonable default, and ``a`` is
    returned when the multiple would exceed ``lcm_max``.
    """
    if not a:
        return b if b else DEFAULT_BUFFER_SIZE
    if not b:
        return a
    lcm = a // math.gcd(a, b) * b
    return lcm if lcm <= lcm_max else a


def block_read(fd: int, nbytes: int) -> bytes:
    """Read up to ``nbytes`` bytes from descriptor ``fd``.

    Short reads are retried, so fewer bytes come back only at end of
    file. Read errors propagate as ``OSError``.
    """
    if nbytes < 0:
        raise ValueError(f"byte count must not be negative: {nbytes}")
    chunks: list[bytes] = []
    remaining = nbytes
    while remaining > 0:
        chunk = os.read(fd, remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)