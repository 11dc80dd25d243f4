"""Task widget for the taskboard UI."""

from rich.text import Text

from taskboard.constants import EMPTY_TASK, ICON_CARET
from taskboard.ui.static import PlainStatic
from taskboard.view import Highlight, TaskView


def task_text(view: TaskView) -> Text:
    """Rich text for a task, never interpreting markup in the task itself."""
    if view.highlight is Highlight.EDITING:
        return Text(view.text) + Text(ICON_CARET, style="blink")
    if not view.text:
        return Text(EMPTY_TASK, style="dim italic")
    return Text(view.text)


class TaskWidget(PlainStatic):
    """A single task in a column."""

    DEFAULT_CSS = """
    TaskWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
    }
    TaskWidget.focused {
        background: $primary;
    }
    TaskWidget.editing {
        background: $accent;
        text-style: bold;
    }
    """

    def __init__(self, view: TaskView):
        super().__init__(task_text(view))
        self.task_view = view
        self._apply_classes()

    def show_view(self, view: TaskView) -> None:
        """Redraw from a new TaskView, skipping unchanged ones."""
        if view == self.task_view:
            return
        self.task_view = view
        self.update(task_text(view))
        self._apply_classes()

    def _apply_classes(self) -> None:
        self.set_class(self.task_view.highlight is Highlight.FOCUSED, "focused")
        self.set_class(self.task_view.highlight is Highlight.EDITING, "editing")
