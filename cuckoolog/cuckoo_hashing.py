"""
CuckooHashing - a cuckoo hash set of strings with a stash and undo

Each key has one candidate slot per function of the hash family. Inserting
into an occupied neighbourhood kicks the resident out to one of its own
candidate slots, and so on down the chain. Chains that loop, or that run
longer than the table is full, end with the homeless key in a small overflow
list, the stash.

Every insert is journaled so that the most recent insert can be undone
exactly, displacements included. A user remove drops the whole journal.
"""

import logging
from typing import List, Optional, Tuple

from .cycle_probe import CycleProbe
from .hash_family import HashFamily
from .journal import ChangeList, Journal
from .primes import next_prime

logger = logging.getLogger(__name__)

DEFAULT_TABLE_SIZE = 101

NOT_FOUND = -1


class CuckooHashing:
    """
    Cuckoo hash table of strings with a stash and a single-level undo journal.

    Args:
        hash_family: Object exposing number_of_functions() and hash(key, i)
        size: Approximate table size, rounded up to the next odd prime
              (default: 101)

    Example:
        >>> from cuckoolog import CharCodeHashFamily
        >>> table = CuckooHashing(CharCodeHashFamily(), size=11)
        >>> table.insert("Ab")
        True
        >>> table.insert("Ab")
        False
        >>> table.find("Ab")
        True
        >>> table.undo()
        >>> table.find("Ab")
        False
    """

    def __init__(self, hash_family: HashFamily, size: int = DEFAULT_TABLE_SIZE):
        if not (callable(getattr(hash_family, "number_of_functions", None))
                and callable(getattr(hash_family, "hash", None))):
            raise TypeError(
                "hash_family must provide number_of_functions() and hash(key, i)"
            )
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")

        self.hash_family = hash_family
        self.num_hash_functions = hash_family.number_of_functions()
        if self.num_hash_functions < 1:
            raise ValueError(
                "hash_family must offer at least one hash function, "
                f"got {self.num_hash_functions}"
            )

        self._array: List[Optional[str]] = [None] * next_prime(size)
        self._stash: List[str] = []
        self._journal = Journal()
        self._current_size = 0

        logger.info(
            f"Created cuckoo table with capacity {self.capacity()} "
            f"and {self.num_hash_functions} hash functions"
        )

    def _myhash(self, key: str, i: int) -> int:
        """
        Fold hash function i of key into a table index.

        Python's modulo takes the sign of the divisor, so negative raw
        hashes still land in [0, capacity).
        """
        return int(self.hash_family.hash(key, i)) % len(self._array)

    def insert(self, x: str) -> bool:
        """
        Insert a key.

        Args:
            x: Key to insert

        Returns:
            False if the table is full or x is already present, True once x
            has been placed in the table or in the stash
        """
        if self.capacity() == self.size():
            return False
        if self.find(x):
            return False

        return self._insert_helper(x)

    def _insert_helper(self, x: str) -> bool:
        changes = ChangeList()
        probe = CycleProbe(self.capacity())

        changes.record(x)
        pos = -1
        kick_pos = -1

        max_tries = self.size()
        for _ in range(max_tries + 1):
            for i in range(self.num_hash_functions):
                pos = self._myhash(x, i)
                if probe.seen(x, pos):
                    logger.debug(f"Cycle detected for {x!r} at slot {pos}")
                    return self._overflow(x, changes)
                probe.record(x, pos)

                if self._array[pos] is None:
                    self._array[pos] = x
                    self._current_size += 1
                    self._journal.push(changes)
                    return True

            # every candidate slot is taken, kick out a resident
            if pos == kick_pos or kick_pos == -1:
                kick_pos = self._myhash(x, 0)
            else:
                kick_pos = pos

            self._array[kick_pos], x = x, self._array[kick_pos]
            changes.record(x, kick_pos)

        logger.debug(f"Gave up placing {x!r} after {max_tries + 1} rounds")
        return self._overflow(x, changes)

    def _overflow(self, x: str, changes: ChangeList) -> bool:
        """Park a key that could not be placed in the stash."""
        self._journal.push(changes)
        self._stash.append(x)
        logger.debug(f"Stashed {x!r} ({len(self._stash)} keys in stash)")
        return True

    def find(self, x: str) -> bool:
        """
        Check if a key is present in the table or the stash.

        Example:
            >>> from cuckoolog import DigestHashFamily
            >>> table = CuckooHashing(DigestHashFamily())
            >>> table.insert("hello")
            True
            >>> table.find("hello")
            True
            >>> table.find("world")
            False
        """
        return self._find_pos(x) != NOT_FOUND

    def _find_pos(self, x: str) -> int:
        """
        Locate a key.

        Returns:
            The table index holding x, capacity() + 1 if x is in the stash,
            or -1 if x is absent
        """
        for i in range(self.num_hash_functions):
            pos = self._myhash(x, i)
            if self._array[pos] is not None and self._array[pos] == x:
                return pos

        for s in self._stash:
            if s == x:
                return self.capacity() + 1

        return NOT_FOUND

    def remove(self, x: str) -> bool:
        """
        Remove a key.

        Removing by hand invalidates every pending undo, so the journal is
        cleared whether or not x was present.

        Args:
            x: Key to remove

        Returns:
            True if x was found and removed, False otherwise
        """
        return self._remove(x, is_undo=False)

    def _remove(self, x: str, is_undo: bool) -> bool:
        if not is_undo and self._journal:
            logger.debug(f"Clearing {len(self._journal)} undo entries")
            self._journal.clear()

        pos = self._find_pos(x)
        if pos == NOT_FOUND:
            return False

        if pos < self.capacity():
            self._array[pos] = None
            self._current_size -= 1
        else:
            self._stash.remove(x)
        return True

    def undo(self):
        """
        Reverse the most recent insert, displacement chain included.

        Does nothing if there is nothing to undo, which is also the case
        right after a remove() or make_empty().
        """
        changes = self._journal.pop()
        if changes is None:
            return

        logger.debug(f"Undoing {changes!r}")

        # the newest entry is the key sitting in a fresh slot or the stash
        last_change = changes.pop_newest()
        self._remove(last_change.value, is_undo=True)
        if not last_change.is_new:
            self._array[last_change.pre_index] = last_change.value

        for change in changes:
            if not change.is_new:
                self._array[change.pre_index] = change.value

    def size(self) -> int:
        """Number of keys in the table, not counting the stash."""
        return self._current_size

    def capacity(self) -> int:
        """Length of the table (always prime)."""
        return len(self._array)

    def make_empty(self):
        """Empty the table and the stash and drop all undo history."""
        self._current_size = 0
        for i in range(len(self._array)):
            self._array[i] = None
        self._stash.clear()
        self._journal.clear()

    def undo_depth(self) -> int:
        """Number of inserts that can currently be undone."""
        return len(self._journal)

    def can_undo(self) -> bool:
        return bool(self._journal)

    @property
    def slots(self) -> Tuple[Optional[str], ...]:
        """Copy of the table, one entry per slot (None when empty)."""
        return tuple(self._array)

    @property
    def stash(self) -> Tuple[str, ...]:
        """Copy of the stash in insertion order."""
        return tuple(self._stash)

    def load_factor(self) -> float:
        """Calculate current table load factor (0.0 to 1.0)."""
        return self.size() / self.capacity()

    def stats(self) -> dict:
        """
        Get table statistics.

        Returns:
            Dictionary with size, capacity, stash size, number of hash
            functions, load factor and undo depth.
        """
        return {
            'size': self.size(),
            'capacity': self.capacity(),
            'stash_size': len(self._stash),
            'num_hash_functions': self.num_hash_functions,
            'load_factor': self.load_factor(),
            'undo_depth': self.undo_depth(),
        }

    def snapshot(self) -> str:
        """
        Debug dump of the occupied slots followed by the stash.

        Example:
            >>> from cuckoolog import CharCodeHashFamily
            >>> table = CuckooHashing(CharCodeHashFamily(), size=11)
            >>> table.insert("Ab"), table.insert("Ac")
            (True, True)
            >>> print(table.snapshot(), end="")
            Index: 0 ,String: Ac
            Index: 10 ,String: Ab
        """
        lines = [
            f"Index: {i} ,String: {key}\n"
            for i, key in enumerate(self._array)
            if key is not None
        ]
        lines.extend(
            f"Overflow[{i}] ,String: {key}\n"
            for i, key in enumerate(self._stash)
        )
        return "".join(lines)

    def __contains__(self, x: str) -> bool:
        """Support 'in' operator."""
        return self.find(x)

    def __len__(self) -> int:
        """Return current number of keys in the table."""
        return self.size()

    def __str__(self) -> str:
        return self.snapshot()

    def __repr__(self) -> str:
        """String representation of the table."""
        stats = self.stats()
        return (f"CuckooHashing(size={stats['size']}, "
                f"capacity={stats['capacity']}, "
                f"stash={stats['stash_size']}, "
                f"load_factor={stats['load_factor']:.3f})")
