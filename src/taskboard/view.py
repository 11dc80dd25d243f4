"""Renderer-agnostic projection of board, cursor and edit state."""

from dataclasses import dataclass
from enum import Enum

from taskboard.model.board import Board
from taskboard.model.cursor import Cursor
from taskboard.model.session import EditSession, Mode

NAVIGATE_HINT = "-- NAVIGATE --  i insert  enter edit  ctrl+arrows move  ctrl+d delete  q quit"
EDIT_HINT = "-- EDIT --  type to append  backspace erase  enter commit"


class Highlight(Enum):
    NORMAL = "normal"
    FOCUSED = "focused"
    EDITING = "editing"


@dataclass(frozen=True)
class TaskView:
    text: str
    highlight: Highlight = Highlight.NORMAL


@dataclass(frozen=True)
class ColumnView:
    name: str
    tasks: tuple[TaskView, ...] = ()
    focused: bool = False


@dataclass(frozen=True)
class BoardView:
    columns: tuple[ColumnView, ...]
    mode: Mode = Mode.NAVIGATING

    @property
    def status(self) -> str:
        """One-line hint for the current mode."""
        return EDIT_HINT if self.mode is Mode.EDITING else NAVIGATE_HINT


def build_view(board: Board, cursor: Cursor, session: EditSession) -> BoardView:
    """Project the session state into what should be drawn."""
    cursor_highlight = Highlight.EDITING if session.active else Highlight.FOCUSED
    columns = []
    for col_index, column in enumerate(board.columns):
        focused = col_index == cursor.column_index
        tasks = tuple(
            TaskView(
                text,
                cursor_highlight if focused and i == cursor.task_index else Highlight.NORMAL,
            )
            for i, text in enumerate(column.tasks)
        )
        columns.append(ColumnView(column.name, tasks, focused))
    return BoardView(tuple(columns), session.mode)
