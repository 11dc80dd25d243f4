"""Cursor navigation over a board."""

from dataclasses import dataclass

from taskboard.constants import DEFAULT_COLUMN
from taskboard.model.board import Board


@dataclass
class Cursor:
    """The focused (column, task) pair.

    Navigation methods return True when the position changed. Moves past an
    edge are no-ops, never wraparounds.
    """

    column_index: int = DEFAULT_COLUMN
    task_index: int = 0

    def clamp(self, board: Board) -> None:
        """Pull the cursor back inside the board after any mutation."""
        last_column = len(board.columns) - 1
        self.column_index = max(0, min(self.column_index, last_column))
        size = len(board.columns[self.column_index].tasks)
        if self.task_index >= size:
            self.task_index = max(size - 1, 0)
        if self.task_index < 0:
            self.task_index = 0

    def has_task(self, board: Board) -> bool:
        """True when the cursor indexes a real task."""
        return self.task_index < len(board.columns[self.column_index].tasks)

    def focus(self, board: Board, column_index: int, task_index: int) -> None:
        self.column_index = column_index
        self.task_index = task_index
        self.clamp(board)

    def _step_task(self, board: Board, delta: int) -> bool:
        size = len(board.columns[self.column_index].tasks)
        target = self.task_index + delta
        if not 0 <= target < size:
            return False
        self.task_index = target
        return True

    def _step_column(self, board: Board, delta: int) -> bool:
        target = self.column_index + delta
        if not 0 <= target < len(board.columns):
            return False
        self.column_index = target
        self.clamp(board)
        return True

    def move_up(self, board: Board) -> bool:
        return self._step_task(board, -1)

    def move_down(self, board: Board) -> bool:
        return self._step_task(board, 1)

    def move_left(self, board: Board) -> bool:
        return self._step_column(board, -1)

    def move_right(self, board: Board) -> bool:
        return self._step_column(board, 1)
