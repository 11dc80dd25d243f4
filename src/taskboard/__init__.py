"""taskboard - keyboard-driven terminal task board."""

__version__ = "0.1.0"

from taskboard.errors import BoardNotFound, StorageError, TaskboardError
from taskboard.interpreter import Effect, Interpreter
from taskboard.model import Board, Column, Cursor, EditSession, Mode, create_board
from taskboard.storage import StateFile, load_or_create
from taskboard.view import build_view

__all__ = [
    "Board",
    "BoardNotFound",
    "Column",
    "Cursor",
    "EditSession",
    "Effect",
    "Interpreter",
    "Mode",
    "StateFile",
    "StorageError",
    "TaskboardError",
    "build_view",
    "create_board",
    "load_or_create",
]
