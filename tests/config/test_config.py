"""Tests for `capflow.config`."""

import dataclasses

import pytest

from capflow.config import DEFAULT_CONFIG, SolverConfig


def test_default_config() -> None:
    assert DEFAULT_CONFIG.max_augmentations is None
    assert DEFAULT_CONFIG.log_paths is True


def test_negative_budget_rejected() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        SolverConfig(max_augmentations=-1)


def test_zero_budget_allowed() -> None:
    assert SolverConfig(max_augmentations=0).max_augmentations == 0


def test_config_is_frozen() -> None:
    config = SolverConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_augmentations = 5  # type: ignore[misc]


@pytest.mark.parametrize(
    "vertices, edges, expected", [(6, 10, 60), (2, 0, 1), (0, 0, 1), (3, 2, 6)]
)
def test_augmentation_bound(vertices: int, edges: int, expected: int) -> None:
    assert SolverConfig.augmentation_bound(vertices, edges) == expected
