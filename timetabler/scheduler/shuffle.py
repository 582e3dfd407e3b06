from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MASK = 0x7FFFFFFF


def slot_seed(day: int, period_index: int) -> int:
    return day * 1000 + period_index * 100


def shuffle_det(items: Sequence[T], seed: int) -> List[T]:
    """Fisher-Yates driven by a 31-bit linear congruential generator.

    Never uses ``random``: the same seed gives the same order on every
    platform and interpreter version.
    """
    out = list(items)
    s = seed
    for i in range(len(out) - 1, 0, -1):
        s = (s * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK
        j = s % (i + 1)
        out[i], out[j] = out[j], out[i]
    return out
