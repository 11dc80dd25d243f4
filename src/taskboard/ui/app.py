"""Main Textual application for taskboard."""

import logging

from textual.app import App
from textual.binding import Binding

from taskboard.errors import StorageError
from taskboard.interpreter import Interpreter
from taskboard.model.board import Board
from taskboard.storage import StateFile
from taskboard.ui.board import BoardScreen

logger = logging.getLogger(__name__)


class TaskboardApp(App):
    """Keyboard-driven task board TUI."""

    TITLE = "taskboard"
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [Binding("ctrl+q", "quit", "Quit", priority=True)]

    def __init__(self, board: Board, state: StateFile):
        super().__init__()
        self.board = board
        self.state = state

    def on_mount(self) -> None:
        self.push_screen(BoardScreen(Interpreter(self.board)))

    def save_board(self) -> bool:
        """Persist the board. A failure ends the app with return code 1."""
        try:
            self.state.save(self.board)
        except StorageError as e:
            logger.error("fatal: %s", e)
            self.exit(return_code=1, message=f"error: {e}")
            return False
        return True

    def action_quit(self) -> None:
        """Save and quit. Ignored while a task is being edited."""
        screen = self.screen
        if isinstance(screen, BoardScreen) and screen.interpreter.session.active:
            return
        if self.save_board():
            self.exit()
