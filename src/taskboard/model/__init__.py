"""Board model, cursor and edit session."""

from taskboard.model.board import (
    Board,
    Column,
    create_board,
    insert_task,
    move_task,
    remove_task,
    swap_tasks,
    task_count,
)
from taskboard.model.cursor import Cursor
from taskboard.model.session import EditSession, Mode

__all__ = [
    "Board",
    "Column",
    "Cursor",
    "EditSession",
    "Mode",
    "create_board",
    "insert_task",
    "move_task",
    "remove_task",
    "swap_tasks",
    "task_count",
]
