"""Tests for running capflow as a module (`python -m capflow`)."""

from __future__ import annotations

import runpy
from unittest.mock import patch

import pytest


def test_module_help_exits_zero() -> None:
    """Running with --help should exit cleanly with code 0."""
    with patch("sys.argv", ["capflow", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("capflow", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_cli_subcommand_help_exits_zero() -> None:
    """Invoking a subcommand's help via module entrypoint should exit 0."""
    with patch("sys.argv", ["capflow", "solve", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("capflow", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_demo_runs(capsys) -> None:
    with patch("sys.argv", ["capflow", "demo"]):
        runpy.run_module("capflow", run_name="__main__")
    assert "vertex 5: 23" in capsys.readouterr().out
