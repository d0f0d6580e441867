"""Main TUI application for tTime."""
import logging
from datetime import datetime, timezone
from textual.app import App, ComposeResult
from textual.widgets import Header, Static, Input
from textual.containers import Container
from textual.binding import Binding
from models import Instant
from business_logic.date_parser import parse_instant
from config import config
from ui.help_screen import HelpScreen
from ui.results_widget import ResultsWidget
from ui.widgets import CenteredFooter
from utils.logger import setup_logger

logger = logging.getLogger(__name__)


class TimeCalculatorApp(App):
    """A terminal calculator for dates, durations and clock angles."""

    TITLE = "tTime"

    CSS = """
    Screen {
        background: #1a1a2e;
    }

    Header {
        background: #2d2d44;
        color: #0abdc6;
    }

    #title_header {
        height: 3;
        content-align: center middle;
        background: #0abdc6;
        color: #ffffff;
        text-style: bold;
    }

    #input_container {
        height: auto;
        padding: 1;
        background: #1a1a2e;
    }

    Input {
        margin: 0 1;
        background: #2d2d44;
        color: #ffffff;
        border: tall #8b5cf6;
    }

    Input:focus {
        border: tall #0abdc6;
    }

    #results {
        height: 1fr;
        padding: 1 2;
        overflow-y: auto;
        background: #1a1a2e;
    }

    ResultsWidget {
        height: auto;
        color: #e2e8f0;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=False, priority=True),
        Binding("f1", "show_help", "Help", show=False, priority=True),
        Binding("ctrl+n", "fill_now", "Now", show=False, priority=True),
        Binding("ctrl+l", "clear", "Clear", show=False, priority=True),
    ]

    def compose(self) -> ComposeResult:
        """Compose the UI."""
        yield Header()
        yield Static("Dates, durations and clock hands", id="title_header")
        yield Container(
            Input(placeholder="Start (2000-01-01T10:00:00Z, Tue, 26 Jan 2016 13:48:02 GMT, now)...", id="start_input"),
            Input(placeholder="End (leave empty to inspect a single date)...", id="end_input"),
            id="input_container",
        )
        yield Container(ResultsWidget(), id="results")
        yield CenteredFooter()

    def on_mount(self) -> None:
        """Set up the app after mounting."""
        self.query_one("#start_input", Input).focus()
        self.refresh_results()

    def refresh_results(self) -> None:
        """Parse both inputs and redraw the results panel."""
        start_raw = self.query_one("#start_input", Input).value.strip()
        end_raw = self.query_one("#end_input", Input).value.strip()
        start = parse_instant(start_raw) if start_raw else None
        end = parse_instant(end_raw) if end_raw else None
        logger.debug("Recalculating for start=%r end=%r", start_raw, end_raw)
        self.query_one(ResultsWidget).set_instants(start, end, start_raw, end_raw)

    def on_input_changed(self, event: Input.Changed) -> None:
        """Recalculate as the user types."""
        self.refresh_results()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Recalculate and move focus from start to end on Enter."""
        self.refresh_results()
        if event.input.id == "start_input":
            self.query_one("#end_input", Input).focus()

    def action_fill_now(self) -> None:
        """Fill the focused input (or start) with the current UTC time."""
        target = self.focused if isinstance(self.focused, Input) else self.query_one("#start_input", Input)
        now = Instant.from_datetime(datetime.now(timezone.utc))
        target.value = now.isoformat()

    def action_clear(self) -> None:
        """Clear both inputs."""
        for input_widget in self.query(Input):
            input_widget.value = ""
        self.query_one("#start_input", Input).focus()

    def action_show_help(self) -> None:
        """Show the help screen."""
        self.push_screen(HelpScreen())


def main():
    """Run the application."""
    setup_logger(log_file=config.log_file)
    app = TimeCalculatorApp()
    app.run()


if __name__ == "__main__":
    main()
