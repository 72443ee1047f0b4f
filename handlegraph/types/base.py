"""Base aliases, enums and protocols shared across handlegraph."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Protocol, TypeVar

#: Integer key of a node or edge inside its store. Reused after removal.
Handle = int


def is_handle(value: object) -> bool:
    """Return True if ``value`` can name a slot: an int that is not a bool."""
    return isinstance(value, int) and not isinstance(value, bool)


class SupportsWeight(Protocol):
    """Numeric capability required of edge weights by the shortest-path engine.

    A weight must be totally ordered and closed under addition. The additive
    identity is not part of the protocol; it is handed to the engine as
    ``zero`` since Python numbers carry no generic "default" value.
    """

    def __add__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


W = TypeVar("W", bound=SupportsWeight)


class Directedness(IntEnum):
    """Whether an edge ``(head, tail)`` also answers queries for ``(tail, head)``."""

    #: Edges are one-way, from head to tail.
    DIRECTED = 1
    #: Edges connect both endpoints symmetrically.
    UNDIRECTED = 2

    @classmethod
    def from_string(cls, value: str) -> "Directedness":
        """Parse a string into a Directedness enum value.

        Args:
            value: Case-insensitive member name (e.g., "directed", "UNDIRECTED").

        Returns:
            The corresponding Directedness member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid directedness '{value}'. Valid values are: {valid}"
            ) from None
