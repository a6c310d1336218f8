"""
Results Screen for the Follower Results Viewer.

Shows the summary counts and one table per account category. Typing in the
search box filters all three tables at once.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Input, Static, TabbedContent, TabPane

from follow_tracker.display import CATEGORIES, filter_accounts
from follow_tracker.export_formats import ComparisonResult
from follow_tracker.tui.mixins import DataTableMixin, VimNavigationMixin
from follow_tracker.tui.mixins.data_table import ACCOUNT_COLUMNS

# Tab id -> short tab label
TAB_LABELS: dict[str, str] = {
    "not-following-back": "You Don't Follow Back",
    "not-followers-back": "Not Following You Back",
    "mutual": "Mutual",
}


class ResultsScreen(DataTableMixin, VimNavigationMixin, Screen):
    """Screen that displays a ComparisonResult."""

    CSS = """
    ResultsScreen {
        layout: vertical;
    }

    #summary {
        height: auto;
        padding: 1 2;
        background: $primary-background;
        border-bottom: solid $primary;
    }

    #search {
        margin: 0 1;
    }

    TabbedContent {
        height: 1fr;
    }

    DataTable {
        height: 1fr;
        border: solid $primary;
    }

    Header {
        dock: top;
    }

    Footer {
        dock: bottom;
    }
    """

    BINDINGS = VimNavigationMixin.VIM_BINDINGS + [
        Binding("q", "quit", "Quit", show=True),
        Binding("1", "show_tab('not-following-back')", "Don't Follow Back", show=False),
        Binding("2", "show_tab('not-followers-back')", "Not Following You", show=False),
        Binding("3", "show_tab('mutual')", "Mutual", show=False),
        Binding("slash", "focus_search", "Search", show=True),
        Binding("escape", "clear_search", "Clear Search", show=True),
    ]

    def __init__(
        self,
        result: ComparisonResult,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the ResultsScreen.

        Args:
            result: The comparison result to display.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._result = result
        self._query = ""

    @property
    def result(self) -> ComparisonResult:
        return self._result

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Header()
        yield Static(self._summary_text(), id="summary")
        yield Input(placeholder="Search usernames...", id="search")
        with TabbedContent(initial="not-following-back"):
            for tab_id, label in TAB_LABELS.items():
                attr, _ = CATEGORIES[tab_id]
                count = len(getattr(self._result, attr))
                with TabPane(f"{label} ({count:,})", id=tab_id):
                    yield DataTable(id=f"{tab_id}-table")
        yield Footer()

    def on_mount(self) -> None:
        """Populate the tables when the screen is mounted."""
        self.title = "Follow Tracker - Analysis Results"
        for tab_id in TAB_LABELS:
            self._setup_table(f"{tab_id}-table", ACCOUNT_COLUMNS)
        self._refresh_tables()
        self.query_one("#not-following-back-table", DataTable).focus()

    def _summary_text(self) -> Text:
        stats = self._result.stats
        text = Text()
        text.append("Your Instagram Analysis\n", style="bold")
        text.append("You have ")
        text.append(f"{stats.total_followers:,}", style="bold magenta")
        text.append(" followers, you follow ")
        text.append(f"{stats.total_following:,}", style="bold magenta")
        text.append(" people.\n")
        text.append(f"{stats.mutual_count:,}", style="bold yellow")
        text.append(" mutual connections, ")
        text.append(f"{stats.not_followers_back_count:,}", style="bold red")
        text.append(" don't follow you back, ")
        text.append(f"{stats.not_following_back_count:,}", style="bold green")
        text.append(" you could follow back.")
        return text

    def _refresh_tables(self) -> None:
        """Refill every table from the result, applying the search query."""
        for tab_id in TAB_LABELS:
            attr, _ = CATEGORIES[tab_id]
            accounts = filter_accounts(getattr(self._result, attr), self._query)
            table = self.query_one(f"#{tab_id}-table", DataTable)
            self._fill_account_table(table, accounts)

    def on_input_changed(self, event: Input.Changed) -> None:
        """Filter tables as the search query changes."""
        if event.input.id != "search":
            return
        self._query = event.value
        self._refresh_tables()

    def action_show_tab(self, tab_id: str) -> None:
        """Switch to a category tab and focus its table."""
        self.query_one(TabbedContent).active = tab_id
        self.query_one(f"#{tab_id}-table", DataTable).focus()

    def action_focus_search(self) -> None:
        self.query_one("#search", Input).focus()

    def action_clear_search(self) -> None:
        """Clear the search box and return focus to the active table."""
        search = self.query_one("#search", Input)
        search.value = ""
        self._query = ""
        self._refresh_tables()
        active = self.query_one(TabbedContent).active
        if active:
            self.query_one(f"#{active}-table", DataTable).focus()

    def action_quit(self) -> None:
        """Quit the application."""
        self.app.exit()
