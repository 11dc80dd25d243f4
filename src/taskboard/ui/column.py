"""Column widget for the taskboard UI."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Rule

from taskboard.constants import EMPTY_TASK
from taskboard.ui.static import PlainStatic
from taskboard.ui.task import TaskWidget
from taskboard.view import ColumnView, Highlight


class TaskList(VerticalScroll, can_focus=False):
    """Scrollable task stack that never takes focus from the board."""


class ColumnWidget(Vertical):
    """A single column on the board, drawn from a ColumnView."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: 100%;
        min-width: 20;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ColumnWidget > #column-title {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    ColumnWidget.focused > #column-title {
        color: $accent;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    ColumnWidget #column-empty {
        width: 100%;
        text-align: center;
        color: $text-muted;
    }
    """

    def __init__(self, view: ColumnView):
        super().__init__()
        self.column_view = view
        self.set_class(view.focused, "focused")

    def compose(self) -> ComposeResult:
        yield PlainStatic(Text(self.column_view.name), id="column-title")
        yield Rule()
        with TaskList(id="column-tasks"):
            empty = PlainStatic(EMPTY_TASK, id="column-empty")
            empty.display = not self.column_view.tasks
            yield empty
            for task in self.column_view.tasks:
                yield TaskWidget(task)

    @property
    def task_widgets(self) -> list[TaskWidget]:
        return list(self.query_one("#column-tasks", TaskList).query(TaskWidget))

    async def show_view(self, view: ColumnView) -> None:
        """Reconcile task widgets with a new ColumnView."""
        self.column_view = view
        self.set_class(view.focused, "focused")
        self.query_one("#column-empty", PlainStatic).display = not view.tasks

        widgets = self.task_widgets
        for widget, task in zip(widgets, view.tasks):
            widget.show_view(task)
        for widget in widgets[len(view.tasks) :]:
            await widget.remove()
        if len(view.tasks) > len(widgets):
            container = self.query_one("#column-tasks", TaskList)
            await container.mount_all([TaskWidget(task) for task in view.tasks[len(widgets) :]])

        for widget in self.task_widgets:
            if widget.task_view.highlight is not Highlight.NORMAL:
                widget.scroll_visible(animate=False)
