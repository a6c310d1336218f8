"""TUI views for the Follower Results Viewer."""

from follow_tracker.tui.views.results_screen import ResultsScreen

__all__ = ["ResultsScreen"]
