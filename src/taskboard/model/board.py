"""Board and column mutation operations.

Every operation takes explicit indices and trusts them. A bad index is a
programming error and raises IndexError rather than being clamped.
"""

from dataclasses import dataclass, field

from taskboard.constants import DEFAULT_COLUMNS


@dataclass
class Column:
    """A named, ordered bucket of task texts."""

    name: str
    tasks: list[str] = field(default_factory=list)


@dataclass
class Board:
    """The full ordered set of columns."""

    columns: list[Column] = field(default_factory=list)

    def column(self, index: int) -> Column:
        """Return the column at index, rejecting negative indices."""
        if index < 0:
            raise IndexError(f"column index {index} out of range")
        return self.columns[index]


def create_board(names=DEFAULT_COLUMNS) -> Board:
    """Build a fresh board with one empty column per name."""
    names = list(names)
    if not names:
        raise ValueError("a board needs at least one column")
    return Board(columns=[Column(name=name) for name in names])


def task_count(board: Board) -> int:
    """Total number of tasks across all columns."""
    return sum(len(col.tasks) for col in board.columns)


def _check_index(tasks: list[str], index: int) -> None:
    if not 0 <= index < len(tasks):
        raise IndexError(f"task index {index} out of range (0..{len(tasks) - 1})")


def insert_task(board: Board, column_index: int, at_index: int, text: str) -> None:
    """Insert text at at_index, shifting later tasks right."""
    tasks = board.column(column_index).tasks
    if not 0 <= at_index <= len(tasks):
        raise IndexError(f"insert position {at_index} out of range (0..{len(tasks)})")
    tasks.insert(at_index, text)


def remove_task(board: Board, column_index: int, index: int) -> str:
    """Remove and return the task at index."""
    tasks = board.column(column_index).tasks
    _check_index(tasks, index)
    return tasks.pop(index)


def swap_tasks(board: Board, column_index: int, i: int, j: int) -> None:
    """Exchange two tasks within a column."""
    tasks = board.column(column_index).tasks
    _check_index(tasks, i)
    _check_index(tasks, j)
    if i == j:
        return
    tasks[i], tasks[j] = tasks[j], tasks[i]


def move_task(board: Board, from_column: int, from_index: int, to_column: int) -> None:
    """Move a task to the end of another column.

    Adjacency is the caller's concern; any valid destination is accepted.
    """
    destination = board.column(to_column)
    text = remove_task(board, from_column, from_index)
    destination.tasks.append(text)
