"""Ordered set of ``(distance, node)`` entries for Dijkstra-style searches.

`Frontier` behaves like a sorted set keyed by the full ``(distance, node)``
tuple: two entries with equal distance but different nodes are distinct. It
is backed by a binary heap with lazy deletion, so `discard` only forgets the
entry and `pop_min` skips heap items that are no longer members.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Generic, List, Optional, Set, Tuple

from handlegraph.types import Handle, W

Entry = Tuple[W, Handle]


class Frontier(Generic[W]):
    """Min-ordered set of ``(distance, node)`` tuples.

    ``push`` and ``pop_min`` are O(log F) amortized, ``discard`` and
    membership are O(1), where F is the number of heap items.
    """

    def __init__(self) -> None:
        self._heap: List[Entry] = []
        self._members: Set[Entry] = set()

    def push(self, distance: W, node: Handle) -> bool:
        """Add ``(distance, node)``.

        Returns:
            True if the entry was added, False if it was already a member.
        """
        entry = (distance, node)
        if entry in self._members:
            return False
        self._members.add(entry)
        heappush(self._heap, entry)
        return True

    def discard(self, distance: W, node: Handle) -> bool:
        """Remove ``(distance, node)`` if present.

        Returns:
            True if the entry was a member.
        """
        entry = (distance, node)
        if entry not in self._members:
            return False
        self._members.remove(entry)
        return True

    def peek_min(self) -> Optional[Entry]:
        """Return the smallest entry without removing it, or None if empty."""
        self._drop_stale()
        return self._heap[0] if self._heap else None

    def pop_min(self) -> Entry:
        """Remove and return the smallest entry.

        Raises:
            IndexError: If the frontier is empty.
        """
        self._drop_stale()
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        entry = heappop(self._heap)
        self._members.remove(entry)
        return entry

    def _drop_stale(self) -> None:
        heap = self._heap
        members = self._members
        while heap and heap[0] not in members:
            heappop(heap)

    def __contains__(self, entry: object) -> bool:
        return entry in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __bool__(self) -> bool:
        return bool(self._members)
