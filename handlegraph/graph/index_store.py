"""Arena-style store mapping small integer handles to payloads.

`SparseIndexStore` keeps payloads in a dense list of slots and tracks freed
slots in a min-heap so that `insert()` always hands out the smallest free
handle. Handles are opaque keys: callers must not infer anything from a
handle beyond "currently valid in this store".
"""

from __future__ import annotations

from enum import Enum
from heapq import heappop, heappush
from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

from handlegraph.types import Handle, is_handle

T = TypeVar("T")


# Marker for empty slots; enum members keep their identity through pickling
class _Slot(Enum):
    VACANT = 0


_VACANT = _Slot.VACANT


class SparseIndexStore(Generic[T]):
    """Handle-addressed store with O(1) removal and handle recycling.

    Removing a payload marks its slot vacant and pushes the handle onto the
    free heap. Vacant slots at the end of the slot list are trimmed, which
    leaves stale entries in the heap; those are discarded lazily on insert.
    """

    def __init__(self) -> None:
        self._slots: List[Any] = []
        self._free: List[Handle] = []
        self._len: int = 0

    def insert(self, payload: T) -> Handle:
        """Store ``payload`` and return its handle.

        Args:
            payload: Arbitrary value, ``None`` included.

        Returns:
            The smallest free handle, or the next unused integer when no
            freed handle is available.
        """
        slots = self._slots
        while self._free:
            handle = heappop(self._free)
            if handle < len(slots) and slots[handle] is _VACANT:
                slots[handle] = payload
                break
        else:
            handle = len(slots)
            slots.append(payload)
        self._len += 1
        return handle

    def remove(self, handle: Handle) -> Optional[T]:
        """Detach and return the payload stored under ``handle``.

        Args:
            handle: Handle to free.

        Returns:
            The payload, or None if ``handle`` was not live.
        """
        if not self.contains(handle):
            return None
        slots = self._slots
        payload = slots[handle]
        slots[handle] = _VACANT
        heappush(self._free, handle)
        self._len -= 1
        while slots and slots[-1] is _VACANT:
            slots.pop()
        return payload

    def contains(self, handle: Handle) -> bool:
        """Return True if ``handle`` is live in this store.

        Anything other than a plain int (floats, strings, bools) is never live.
        """
        return (
            is_handle(handle)
            and 0 <= handle < len(self._slots)
            and self._slots[handle] is not _VACANT
        )

    def get(self, handle: Handle) -> Optional[T]:
        """Return the payload for ``handle``, or None if it is not live."""
        if not self.contains(handle):
            return None
        return self._slots[handle]

    def items(self) -> Iterator[Tuple[Handle, T]]:
        """Iterate ``(handle, payload)`` pairs in ascending handle order."""
        for handle, payload in enumerate(self._slots):
            if payload is not _VACANT:
                yield handle, payload

    def clear(self) -> None:
        """Drop every payload; the next insert returns handle 0."""
        self._slots.clear()
        self._free.clear()
        self._len = 0

    def is_dense(self) -> bool:
        """Return True if live handles are exactly ``0..len(self)``."""
        return self._len == len(self._slots)

    @property
    def capacity(self) -> int:
        """One past the largest handle currently backed by a slot."""
        return len(self._slots)

    def __contains__(self, handle: object) -> bool:
        return self.contains(handle)

    def __getitem__(self, handle: Handle) -> T:
        if not self.contains(handle):
            raise KeyError(f"Handle '{handle}' is not live.")
        return self._slots[handle]

    def __setitem__(self, handle: Handle, payload: T) -> None:
        if not self.contains(handle):
            raise KeyError(f"Handle '{handle}' is not live.")
        self._slots[handle] = payload

    def __iter__(self) -> Iterator[Handle]:
        for handle, _ in self.items():
            yield handle

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={self._len}, capacity={len(self._slots)})"
