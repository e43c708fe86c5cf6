# wod_planner/routines/rng.py
from typing import Any, List, Optional, Sequence

MASK_32 = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a 32-bit integer product."""
    return (a * b) & MASK_32


class SeededRandom:
    """
    Reproducible pseudo-random source (mulberry32).

    All arithmetic is done on unsigned 32-bit integers so a given seed yields
    the same sequence everywhere.
    """
    def __init__(self, seed: int):
        self.state = int(seed) & MASK_32

    def next(self) -> float:
        """Return the next float in [0, 1) and advance the state."""
        self.state = (self.state + 0x6D2B79F5) & MASK_32
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
        return ((t ^ (t >> 14)) & MASK_32) / 4294967296

    def choice(self, values: Sequence[Any]) -> Optional[Any]:
        if not values:
            return None
        return values[int(self.next() * len(values))]

    def shuffle(self, values: List[Any]) -> None:
        """Fisher-Yates shuffle in place."""
        for idx in range(len(values) - 1, 0, -1):
            pick = int(self.next() * (idx + 1))
            values[idx], values[pick] = values[pick], values[idx]
