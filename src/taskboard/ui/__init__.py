"""Textual UI for taskboard."""

from taskboard.ui.app import TaskboardApp
from taskboard.ui.board import BoardScreen
from taskboard.ui.column import ColumnWidget
from taskboard.ui.task import TaskWidget

__all__ = [
    "BoardScreen",
    "ColumnWidget",
    "TaskWidget",
    "TaskboardApp",
]
