"""Library utilities for handlegraph.

This package contains integration modules for external libraries.
"""

from handlegraph.lib.nx import from_networkx, to_networkx

__all__ = [
    "from_networkx",
    "to_networkx",
]
