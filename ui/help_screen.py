"""Help screen widget showing keyboard shortcuts and input formats."""
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Static
from textual.containers import VerticalScroll
from textual.binding import Binding
from textual import events


class HelpScreen(Screen):
    """Modal screen showing keyboard shortcuts."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close", show=False),
    ]

    CSS = """
    HelpScreen {
        align: center middle;
        background: rgba(26, 26, 46, 0.9);
    }

    #help_container {
        width: 80;
        height: auto;
        max-height: 90%;
        background: #2d2d44;
        border: thick #0abdc6;
        padding: 1 2;
    }

    #help_title {
        text-align: center;
        text-style: bold;
        color: #0abdc6;
        margin-bottom: 1;
    }

    #help_content {
        height: auto;
        overflow-y: auto;
        color: #e2e8f0;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the help screen."""
        with VerticalScroll(id="help_container"):
            yield Static("tTime Help", id="help_title")
            yield Static(self.get_help_text(), id="help_content")

    def get_help_text(self) -> str:
        """Get formatted help text."""
        return """[bold]Keys[/bold]
Tab / Shift+Tab   Switch between start and end fields
Enter             Recalculate
Ctrl+N            Fill the focused field with the current time
Ctrl+L            Clear both fields
F1                Show this help
Ctrl+Q            Quit

[bold]Date Formats[/bold]
ISO 8601          2016-01-19T16:07:37+00:00
                  2016-01-19T08:07:37Z
                  2016-01-19
RFC 2822          Tue, 26 Jan 2016 13:48:02 GMT
                  Sun, 17 May 1998 03:00:00 GMT+01
Long form         December 17, 1995 03:24:00
Keyword           now
Dates without a zone are read as UTC.

[bold]Results[/bold]
Leap year         Gregorian rule (1900 no, 2000 yes)
Clock angle       Smaller angle between hour and minute hands, in radians
Elapsed           HH:MM:SS.mmm from start to end, negative if end is earlier

[dim]Press Esc to close this help[/dim]"""

    def on_key(self, event: events.Key) -> None:
        """Handle key events - block all except Esc and arrow keys."""
        # Allow Esc (handled by binding) and arrow keys (for scrolling)
        if event.key not in ("escape", "up", "down"):
            event.prevent_default()
            event.stop()

    def action_dismiss(self) -> None:
        """Close the help screen."""
        self.dismiss()
