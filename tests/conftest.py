"""Shared fixtures for taskboard tests."""

import pytest

from taskboard.model.board import Board, Column
from taskboard.storage import StateFile


def _make_board(*columns):
    """Build a board from (name, tasks) pairs."""
    return Board(columns=[Column(name, list(tasks)) for name, tasks in columns])


@pytest.fixture
def board():
    """Three columns with two tasks in the first."""
    return _make_board(("Backlog", ["a", "b"]), ("In Progress", []), ("Done", []))


@pytest.fixture
def state_file(tmp_path):
    return StateFile(tmp_path / "taskboard" / "board.json")
