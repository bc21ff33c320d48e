"""
CycleProbe - deterministic cycle detection for one cuckoo insert
"""

from typing import List, Set


class CycleProbe:
    """
    Per-slot record of the keys that visited each slot during one insert.

    A displacement chain that brings the same key back to the same slot is
    looping, so the insert gives up and sends the displaced key to the stash.
    This replaces the random walk / rehash bailout of textbook cuckoo hashing
    and keeps placement reproducible.
    """

    def __init__(self, length: int):
        self._visits: List[Set[str]] = [set() for _ in range(length)]

    def seen(self, key: str, slot: int) -> bool:
        """Check whether key already probed slot during this insert."""
        return key in self._visits[slot]

    def record(self, key: str, slot: int):
        self._visits[slot].add(key)

    def __len__(self) -> int:
        """Total number of (key, slot) visits recorded."""
        return sum(len(keys) for keys in self._visits)
