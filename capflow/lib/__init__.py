"""Library utilities for capflow.

This package contains integration modules for external libraries.
"""

from capflow.lib.nx import NodeMap, from_networkx, to_networkx

__all__ = [
    "NodeMap",
    "from_networkx",
    "to_networkx",
]
