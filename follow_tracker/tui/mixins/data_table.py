"""
DataTable Mixin for account tables.

Provides reusable methods for:
- _setup_table(): Configure a DataTable with columns and common settings
- _fill_account_table(): Replace a table's rows with a list of accounts

Usage:
    class MyScreen(DataTableMixin, Screen):
        def compose(self):
            yield DataTable(id="my-table")

        def on_mount(self):
            self._setup_table("my-table", ACCOUNT_COLUMNS)
"""

from __future__ import annotations

from typing import Sequence

from textual.widgets import DataTable

from follow_tracker.display import format_timestamp
from follow_tracker.export_formats import AccountRecord

ACCOUNT_COLUMNS: list[tuple[str, str, int | None]] = [
    ("IDX", "idx", 6),
    ("USERNAME", "username", 32),
    ("FULL NAME", "full_name", 28),
    ("SINCE", "since", 12),
]


class DataTableMixin:
    """Mixin providing consistent DataTable setup for account lists."""

    def _setup_table(
        self,
        table_id: str,
        columns: list[tuple[str, str, int | None]],
        *,
        cursor_type: str = "row",
        zebra_stripes: bool = True,
    ) -> DataTable:
        """Set up a DataTable with consistent configuration.

        Args:
            table_id: The ID of the DataTable widget to configure.
            columns: List of (label, key, width) tuples. Width can be None.
            cursor_type: Cursor type ('row', 'cell', or 'none').
            zebra_stripes: Whether to enable zebra striping.

        Returns:
            The configured DataTable instance.
        """
        table = self.query_one(f"#{table_id}", DataTable)
        table.cursor_type = cursor_type
        table.zebra_stripes = zebra_stripes
        for label, key, width in columns:
            table.add_column(label, key=key, width=width)
        return table

    def _fill_account_table(
        self, table: DataTable, accounts: Sequence[AccountRecord]
    ) -> None:
        """Replace all rows of table with accounts, keeping the columns."""
        table.clear()
        if not accounts:
            table.add_row("--", "No accounts", "", "")
            return

        for idx, account in enumerate(accounts):
            table.add_row(
                str(idx),
                f"@{account.username}",
                account.full_name or "",
                format_timestamp(account.timestamp),
                key=str(idx),
            )
