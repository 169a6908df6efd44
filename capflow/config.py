"""Configuration classes for capflow solves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SolverConfig:
    """Tunables for :func:`capflow.algorithms.max_flow.max_flow`.

    Attributes:
        max_augmentations: Upper bound on augmentations for a single solve.
            ``None`` disables the budget. When the budget is exceeded the solve
            raises :class:`capflow.errors.Aborted`.
        log_paths: Log each augmenting path, bottleneck and running total at
            DEBUG level.
    """

    max_augmentations: Optional[int] = None
    log_paths: bool = True

    def __post_init__(self) -> None:
        if self.max_augmentations is not None and self.max_augmentations < 0:
            raise ValueError(
                f"max_augmentations must be non-negative, got {self.max_augmentations}"
            )

    @staticmethod
    def augmentation_bound(vertex_count: int, edge_count: int) -> int:
        """Return the ``V * E`` bound on BFS augmentations (at least 1)."""
        return max(1, vertex_count * edge_count)


# Global configuration instance
DEFAULT_CONFIG = SolverConfig()
