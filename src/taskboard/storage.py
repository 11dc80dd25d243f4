"""JSON state file holding the board between runs."""

import json
import logging
import os
import tempfile
from pathlib import Path

from taskboard.constants import DEFAULT_COLUMNS
from taskboard.errors import BoardNotFound, StorageError
from taskboard.model.board import Board, Column, create_board

logger = logging.getLogger(__name__)


def board_to_dict(board: Board) -> dict:
    """Convert a board to its JSON layout."""
    return {"columns": [{"name": col.name, "tasks": list(col.tasks)} for col in board.columns]}


def board_from_dict(data) -> Board:
    """Build a board from its JSON layout, rejecting anything malformed."""
    if not isinstance(data, dict) or not isinstance(data.get("columns"), list):
        raise StorageError("expected an object with a 'columns' list")
    columns = data["columns"]
    if not columns:
        raise StorageError("a board needs at least one column")

    board = Board()
    for i, raw in enumerate(columns):
        if not isinstance(raw, dict):
            raise StorageError(f"column {i} is not an object")
        name = raw.get("name")
        tasks = raw.get("tasks", [])
        if not isinstance(name, str):
            raise StorageError(f"column {i} has no name")
        if not isinstance(tasks, list) or not all(isinstance(t, str) for t in tasks):
            raise StorageError(f"column {name!r} tasks must be a list of strings")
        board.columns.append(Column(name=name, tasks=list(tasks)))
    return board


class StateFile:
    """Load and save a board as a single JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Board:
        """Read the board. Raises BoardNotFound if the file is absent."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise BoardNotFound(f"{self.path} does not exist") from e
        except OSError as e:
            raise StorageError(f"cannot read {self.path}: {e.strerror or e}") from e
        except UnicodeDecodeError as e:
            raise StorageError(f"{self.path} is not valid UTF-8: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StorageError(f"{self.path} is not valid JSON: {e}") from e

        try:
            board = board_from_dict(data)
        except StorageError as e:
            raise StorageError(f"{self.path}: {e}") from e
        logger.info("loaded %d columns from %s", len(board.columns), self.path)
        return board

    def save(self, board: Board) -> None:
        """Write the board atomically via a temp file in the same directory."""
        content = json.dumps(board_to_dict(board), indent=2, ensure_ascii=False) + "\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("saving %s failed: %s", self.path, e)
            raise StorageError(f"cannot write {self.path}: {e.strerror or e}") from e
        logger.info("saved board to %s", self.path)


def load_or_create(state: StateFile, names=DEFAULT_COLUMNS) -> Board:
    """Load the board, materializing and saving a fresh one if absent."""
    try:
        return state.load()
    except BoardNotFound:
        logger.info("no board at %s, creating one", state.path)
        board = create_board(names)
        state.save(board)
        return board
