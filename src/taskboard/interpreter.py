"""Keyboard state machine driving board, cursor and edit session.

The interpreter knows nothing about the terminal. It receives Textual key
names plus the printable character (if any) and reports back what the caller
should do through an Effect.
"""

import logging
from dataclasses import dataclass

from taskboard import constants as keys
from taskboard.model.board import Board, insert_task, move_task, remove_task, swap_tasks
from taskboard.model.cursor import Cursor
from taskboard.model.session import EditSession, Mode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Effect:
    """Outcome of one key press."""

    changed: bool = False
    save: bool = False
    quit: bool = False


NOOP = Effect()
CHANGED = Effect(changed=True)


class Interpreter:
    """Maps key presses to board operations according to the current mode."""

    def __init__(self, board: Board, cursor: Cursor | None = None, session: EditSession | None = None):
        self.board = board
        self.cursor = cursor or Cursor()
        self.session = session or EditSession()
        self.cursor.clamp(board)
        # task index focused before an insert-after, restored if the insert is cancelled
        self._insert_origin: int | None = None
        self._navigation = {
            keys.KEY_UP: self._up,
            keys.KEY_DOWN: self._down,
            keys.KEY_LEFT: self._left,
            keys.KEY_RIGHT: self._right,
            keys.KEY_REORDER_UP: self._reorder_up,
            keys.KEY_REORDER_DOWN: self._reorder_down,
            keys.KEY_MOVE_LEFT: self._move_left,
            keys.KEY_MOVE_RIGHT: self._move_right,
            keys.KEY_DELETE: self._delete,
            keys.KEY_INSERT: self._insert,
            keys.KEY_ENTER: self._start_edit,
            keys.KEY_QUIT: self._quit,
        }

    @property
    def mode(self) -> Mode:
        return self.session.mode

    @property
    def focused_tasks(self) -> list[str]:
        return self.board.columns[self.cursor.column_index].tasks

    @property
    def focused_text(self) -> str | None:
        """Text of the focused task, or None in an empty column."""
        if not self.cursor.has_task(self.board):
            return None
        return self.focused_tasks[self.cursor.task_index]

    def handle(self, key: str, character: str | None = None) -> Effect:
        """Apply a single key press."""
        if self.session.active:
            effect = self._handle_editing(key, character)
        else:
            handler = self._navigation.get(key)
            effect = handler() if handler else NOOP
        if effect is not NOOP:
            logger.debug(
                "%s -> %s at (%d, %d)", key, effect, self.cursor.column_index, self.cursor.task_index
            )
        return effect

    # -- Navigating --

    def _up(self) -> Effect:
        return CHANGED if self.cursor.move_up(self.board) else NOOP

    def _down(self) -> Effect:
        return CHANGED if self.cursor.move_down(self.board) else NOOP

    def _left(self) -> Effect:
        return CHANGED if self.cursor.move_left(self.board) else NOOP

    def _right(self) -> Effect:
        return CHANGED if self.cursor.move_right(self.board) else NOOP

    def _reorder(self, delta: int) -> Effect:
        if not self.cursor.has_task(self.board):
            return NOOP
        current = self.cursor.task_index
        target = current + delta
        if not 0 <= target < len(self.focused_tasks):
            return NOOP
        swap_tasks(self.board, self.cursor.column_index, current, target)
        self.cursor.task_index = target
        return CHANGED

    def _reorder_up(self) -> Effect:
        return self._reorder(-1)

    def _reorder_down(self) -> Effect:
        return self._reorder(1)

    def _move(self, delta: int) -> Effect:
        if not self.cursor.has_task(self.board):
            return NOOP
        source = self.cursor.column_index
        target = source + delta
        if not 0 <= target < len(self.board.columns):
            return NOOP
        move_task(self.board, source, self.cursor.task_index, target)
        self.cursor.clamp(self.board)
        return CHANGED

    def _move_left(self) -> Effect:
        return self._move(-1)

    def _move_right(self) -> Effect:
        return self._move(1)

    def _delete(self) -> Effect:
        if not self.cursor.has_task(self.board):
            return NOOP
        remove_task(self.board, self.cursor.column_index, self.cursor.task_index)
        self.cursor.clamp(self.board)
        return Effect(changed=True, save=True)

    def _insert(self) -> Effect:
        if self.cursor.has_task(self.board):
            self._insert_origin = self.cursor.task_index
            at_index = self._insert_origin + 1
        else:
            self._insert_origin = None
            at_index = 0
        insert_task(self.board, self.cursor.column_index, at_index, "")
        self.cursor.task_index = at_index
        self.session.begin()
        return CHANGED

    def _start_edit(self) -> Effect:
        if not self.cursor.has_task(self.board):
            return NOOP
        self._insert_origin = None
        self.session.begin()
        return CHANGED

    def _quit(self) -> Effect:
        return Effect(save=True, quit=True)

    # -- Editing --

    def _handle_editing(self, key: str, character: str | None) -> Effect:
        if key == keys.KEY_ENTER:
            return self._commit()
        if key == keys.KEY_BACKSPACE:
            text = self.focused_text
            if not text:
                return NOOP
            self._set_focused(text[:-1])
            return CHANGED
        if character is not None and character.isprintable():
            self._set_focused(self.focused_text + character)
            return CHANGED
        return NOOP

    def _set_focused(self, text: str) -> None:
        self.focused_tasks[self.cursor.task_index] = text

    def _commit(self) -> Effect:
        if self.focused_text == "":
            remove_task(self.board, self.cursor.column_index, self.cursor.task_index)
            if self._insert_origin is not None:
                self.cursor.task_index = self._insert_origin
            self.cursor.clamp(self.board)
        self._insert_origin = None
        self.session.end()
        return Effect(changed=True, save=True)
