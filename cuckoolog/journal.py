"""
Undo journal for CuckooHashing

Every successful insert leaves one ChangeList on the Journal. A ChangeList
records where each key touched by the displacement chain lived before it
was moved, newest move first, so undo can put them all back.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List, Optional


@dataclass(frozen=True)
class LogEntry:
    """
    One slot mutation made during an insert.

    Args:
        value: The key that was moved
        pre_index: Table slot the key occupied before it was displaced,
                   or None for the key the caller introduced
    """

    value: str
    pre_index: Optional[int] = None

    @property
    def is_new(self) -> bool:
        return self.pre_index is None


class ChangeList:
    """Ordered LogEntry records for one insert, newest first."""

    def __init__(self):
        self._entries: Deque[LogEntry] = deque()

    def record(self, value: str, pre_index: Optional[int] = None):
        """Prepend a mutation so that iteration replays newest first."""
        self._entries.appendleft(LogEntry(value, pre_index))

    def pop_newest(self) -> LogEntry:
        return self._entries.popleft()

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        entries = ", ".join(
            f"({e.value!r}, {'NONE' if e.is_new else e.pre_index})"
            for e in self._entries
        )
        return f"ChangeList([{entries}])"


class Journal:
    """
    Stack of ChangeList objects, one per successful insert.

    Example:
        >>> journal = Journal()
        >>> changes = ChangeList()
        >>> changes.record("apple")
        >>> journal.push(changes)
        >>> len(journal)
        1
        >>> journal.pop() is changes
        True
        >>> journal.pop() is None
        True
    """

    def __init__(self):
        self._stack: List[ChangeList] = []

    def push(self, changes: ChangeList):
        self._stack.append(changes)

    def pop(self) -> Optional[ChangeList]:
        """Pop the most recent ChangeList, or None if the journal is empty."""
        if not self._stack:
            return None
        return self._stack.pop()

    def clear(self):
        """Drop all pending undo history."""
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)
