"""Tests for board mutation operations."""

import pytest

from taskboard.model.board import (
    create_board,
    insert_task,
    move_task,
    remove_task,
    swap_tasks,
    task_count,
)

from tests.conftest import _make_board


def test_create_board_defaults():
    board = create_board()
    assert [c.name for c in board.columns] == ["Backlog", "In Progress", "Done"]
    assert all(c.tasks == [] for c in board.columns)


def test_create_board_custom_names():
    board = create_board(["Todo", "Done"])
    assert [c.name for c in board.columns] == ["Todo", "Done"]


def test_create_board_requires_a_column():
    with pytest.raises(ValueError):
        create_board([])


def test_insert_task_shifts_right(board):
    insert_task(board, 0, 1, "new")
    assert board.columns[0].tasks == ["a", "new", "b"]


def test_insert_task_at_end(board):
    insert_task(board, 0, 2, "c")
    assert board.columns[0].tasks == ["a", "b", "c"]


def test_insert_task_into_empty_column(board):
    insert_task(board, 1, 0, "")
    assert board.columns[1].tasks == [""]


def test_insert_task_out_of_range(board):
    with pytest.raises(IndexError):
        insert_task(board, 0, 3, "x")
    with pytest.raises(IndexError):
        insert_task(board, 0, -1, "x")


def test_remove_task_returns_text(board):
    assert remove_task(board, 0, 0) == "a"
    assert board.columns[0].tasks == ["b"]


def test_remove_task_out_of_range(board):
    with pytest.raises(IndexError):
        remove_task(board, 1, 0)
    with pytest.raises(IndexError):
        remove_task(board, 0, -1)


def test_bad_column_index(board):
    with pytest.raises(IndexError):
        remove_task(board, 3, 0)
    with pytest.raises(IndexError):
        insert_task(board, -1, 0, "x")


def test_swap_tasks(board):
    swap_tasks(board, 0, 0, 1)
    assert board.columns[0].tasks == ["b", "a"]


def test_swap_same_index_is_noop(board):
    swap_tasks(board, 0, 1, 1)
    assert board.columns[0].tasks == ["a", "b"]


def test_swap_out_of_range(board):
    with pytest.raises(IndexError):
        swap_tasks(board, 0, 0, 2)


def test_move_task_appends_to_destination():
    board = _make_board(("Backlog", ["a", "b"]), ("Done", ["x"]))
    move_task(board, 0, 0, 1)
    assert board.columns[0].tasks == ["b"]
    assert board.columns[1].tasks == ["x", "a"]


def test_move_task_preserves_total(board):
    before = task_count(board)
    move_task(board, 0, 1, 2)
    assert task_count(board) == before
    assert len(board.columns[0].tasks) == 1
    assert board.columns[2].tasks == ["b"]


def test_move_task_bad_destination_leaves_board_intact(board):
    with pytest.raises(IndexError):
        move_task(board, 0, 0, 5)
    assert board.columns[0].tasks == ["a", "b"]
