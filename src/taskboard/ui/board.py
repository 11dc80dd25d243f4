"""Board screen showing the columns and forwarding keys to the interpreter."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen

from taskboard.interpreter import Interpreter
from taskboard.ui.column import ColumnWidget
from taskboard.ui.static import PlainStatic
from taskboard.view import BoardView, build_view


class BoardScreen(Screen):
    """Main board screen. Every key press goes through the interpreter."""

    AUTO_FOCUS = None

    DEFAULT_CSS = """
    BoardScreen > #columns {
        height: 1fr;
    }
    BoardScreen > #status {
        dock: bottom;
        height: 1;
        padding: 0 1;
        background: $panel;
        color: $text-muted;
    }
    """

    def __init__(self, interpreter: Interpreter):
        super().__init__()
        self.interpreter = interpreter

    @property
    def board_view(self) -> BoardView:
        it = self.interpreter
        return build_view(it.board, it.cursor, it.session)

    def compose(self) -> ComposeResult:
        view = self.board_view
        with Horizontal(id="columns"):
            for column in view.columns:
                yield ColumnWidget(column)
        yield PlainStatic(view.status, id="status")

    async def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        effect = self.interpreter.handle(event.key, event.character)
        if effect.save and not self.app.save_board():
            return
        if effect.quit:
            self.app.exit()
            return
        if effect.changed:
            await self.redraw()

    async def redraw(self) -> None:
        """Re-project the interpreter state onto the widgets."""
        view = self.board_view
        for widget, column in zip(self.query(ColumnWidget), view.columns):
            await widget.show_view(column)
        self.query_one("#status", PlainStatic).update(view.status)
