"""Shared constants for taskboard."""

APP_NAME = "taskboard"
STATE_FILENAME = "board.json"

DEFAULT_COLUMNS = ("Backlog", "In Progress", "Done")
DEFAULT_COLUMN = 0

USAGE = (
    "taskboard: arrows navigate, ctrl+arrows reorder/move, ctrl+d delete, "
    "i insert, enter edit/commit, backspace erase, q save and quit"
)

# Key names as reported by Textual
KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_REORDER_UP = "ctrl+up"
KEY_REORDER_DOWN = "ctrl+down"
KEY_MOVE_LEFT = "ctrl+left"
KEY_MOVE_RIGHT = "ctrl+right"
KEY_DELETE = "ctrl+d"
KEY_INSERT = "i"
KEY_ENTER = "enter"
KEY_BACKSPACE = "backspace"
KEY_QUIT = "q"

ICON_CARET = "▏"
EMPTY_TASK = "(empty)"
