"""Edit session state."""

from dataclasses import dataclass
from enum import Enum


class Mode(Enum):
    NAVIGATING = "navigating"
    EDITING = "editing"


@dataclass
class EditSession:
    """Whether the focused task is being edited.

    There is no separate buffer: while active, the board cell under the
    cursor is edited in place.
    """

    active: bool = False

    @property
    def mode(self) -> Mode:
        return Mode.EDITING if self.active else Mode.NAVIGATING

    def begin(self) -> None:
        self.active = True

    def end(self) -> None:
        self.active = False
