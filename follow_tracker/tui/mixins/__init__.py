"""Mixins for the TUI application."""

from follow_tracker.tui.mixins.data_table import DataTableMixin
from follow_tracker.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "DataTableMixin",
    "VimNavigationMixin",
]
