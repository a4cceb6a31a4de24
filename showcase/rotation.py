# showcase/rotation.py
import time
from typing import List, Sequence, TypeVar

T = TypeVar("T")

# Numerical Recipes LCG; kept verbatim so a given bucket always yields the same grid
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32


def current_time_ms() -> int:
    return int(time.time() * 1000)


def window_bucket(now_ms: int, window_ms: int) -> int:
    """Index of the rotation window containing now_ms."""
    if window_ms <= 0:
        raise ValueError(f"window_ms must be positive, got {window_ms}")
    return int(now_ms // window_ms)


def seeded_shuffle(items: Sequence[T], seed: int) -> List[T]:
    """
    Fisher-Yates shuffle driven by an LCG seeded with `seed`.
    Returns a new list; the input is left untouched.
    """
    shuffled = list(items)
    s = seed
    for i in range(len(shuffled) - 1, 0, -1):
        s = (s * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        j = s % (i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def select(
    items: Sequence[T],
    count: int,
    window_ms: int,
    now_ms: int | None = None,
) -> List[T]:
    """
    Pick `count` items that stay the same for the whole rotation window
    and change when the window rolls over.

    When there are no more items than `count`, they come back in their
    original order without shuffling.
    """
    if count <= 0 or not items:
        return []
    if len(items) <= count:
        return list(items)[:count]

    if now_ms is None:
        now_ms = current_time_ms()
    bucket = window_bucket(now_ms, window_ms)
    return seeded_shuffle(items, bucket)[:count]
