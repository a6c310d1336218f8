"""
Main Textual application for the Follower Results Viewer.

This is the entry point for the TUI that analyzes an Instagram followers
export against a following export and shows who does not follow back.
"""

import argparse
import os
import sys

from textual.app import App
from textual.binding import Binding

from follow_tracker.errors import AnalysisError
from follow_tracker.pipeline import AnalysisOutcome, analyze_files
from follow_tracker.tui.views.results_screen import ResultsScreen


class FollowTrackerApp(App):
    """A Textual app for browsing follower comparison results."""

    TITLE = "Follow Tracker"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        height: 3;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }

    DataTable > .datatable--header {
        background: $primary-darken-1;
        color: $text;
        text-style: bold;
    }

    DataTable > .datatable--cursor {
        background: $secondary;
        color: $text;
    }

    DataTable > .datatable--hover {
        background: $primary-lighten-1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, first_path: str, second_path: str):
        """Initialize the app with the two export files.

        Args:
            first_path: Path to the followers export.
            second_path: Path to the following export. The two are swapped
                automatically if given in reverse order.
        """
        super().__init__()
        self._first_path = first_path
        self._second_path = second_path
        self.outcome: AnalysisOutcome | None = None

    def on_mount(self) -> None:
        """Run the analysis and push the results screen."""
        try:
            self.outcome = analyze_files(self._first_path, self._second_path)
        except FileNotFoundError as e:
            self.exit(return_code=1, message=f"File not found: {e.filename}")
            return
        except (OSError, UnicodeDecodeError) as e:
            self.exit(return_code=1, message=f"Could not read file: {e}")
            return
        except AnalysisError as e:
            self.exit(return_code=1, message=str(e))
            return

        if self.outcome.swapped:
            self.notify(
                "Files were in reverse order. They have been automatically corrected.",
                title="Files Auto-Swapped",
            )

        self.title = (
            f"Follow Tracker - {os.path.basename(self._first_path)} "
            f"vs {os.path.basename(self._second_path)}"
        )
        self.push_screen(ResultsScreen(self.outcome.result))


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Browse who does and does not follow you back in a terminal UI. "
        "Takes Instagram's followers_1.json and following.json exports."
    )
    parser.add_argument("first", help="Followers export (followers_1.json)")
    parser.add_argument("second", help="Following export (following.json)")
    args = parser.parse_args()

    for path in (args.first, args.second):
        if not os.path.exists(path):
            print(f"Error: Path not found: {path}", file=sys.stderr)
            sys.exit(1)

        if not os.access(path, os.R_OK):
            print(f"Error: Permission denied: {path}", file=sys.stderr)
            sys.exit(1)

    app = FollowTrackerApp(first_path=args.first, second_path=args.second)
    app.run()
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
