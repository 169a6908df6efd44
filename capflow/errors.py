"""Exception types raised by capflow.

Input validation failures derive from :class:`CapflowError`, itself a
``ValueError``, so callers that already catch ``ValueError`` keep working
while still being able to tell the conditions apart.
"""

from __future__ import annotations


class CapflowError(ValueError):
    """Base class for invalid graph or solve input."""


class InvalidVertex(CapflowError):
    """An edge references a vertex outside ``[0, n)``, or ``n`` is not positive."""


class InvalidCapacity(CapflowError):
    """A capacity is negative or not an integer."""


class SelfLoop(CapflowError):
    """An edge has identical source and destination."""


class DuplicateEdge(CapflowError):
    """The same ordered vertex pair was supplied more than once."""


class InvalidEndpoints(CapflowError):
    """Source equals sink, or either lies outside the vertex range."""


class Aborted(RuntimeError):
    """A solve exceeded its configured augmentation budget.

    Attributes:
        augmentations: Number of augmentations performed before aborting.
        partial_flow: Flow value accumulated before aborting. This is a
            feasible flow but not necessarily a maximum one.
    """

    def __init__(self, augmentations: int, partial_flow: int) -> None:
        super().__init__(
            f"Augmentation budget exhausted after {augmentations} augmentations "
            f"(partial flow {partial_flow})"
        )
        self.augmentations = augmentations
        self.partial_flow = partial_flow
