"""Shared typing constructs for handlegraph.

Public aliases, enums and protocols used by the graph container and the
shortest-path engine. Contains no algorithmic logic.
"""

from handlegraph.types.base import (
    Directedness,
    Handle,
    SupportsWeight,
    W,
    is_handle,
)

__all__ = [
    "Directedness",
    "Handle",
    "SupportsWeight",
    "W",
    "is_handle",
]
