"""
Table Presenter - Prints clock rows as a borderless two-column table
"""
from typing import List, Optional, Sequence, Tuple

from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from worldclock.core.clock_service import ResolvedRow
from worldclock.ui.theme import Theme


class TablePresenter:
    """
    Renders resolved rows to the console with rich.
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize presenter.

        Args:
            console: Target console (default: stdout, no highlighting)
        """
        self._console = console or Console(highlight=False)

    def _cells(self, rows: Sequence[ResolvedRow]) -> List[Tuple[Text, Text]]:
        """
        Convert rows to styled Text cells.

        Tabs are expanded up front so measured and rendered widths agree.
        Text objects keep labels from being parsed as markup.
        """
        tab_size = self._console.tab_size
        return [
            (
                Text(row.label.expandtabs(tab_size), style=Theme.get_label_style()),
                Text(row.time_text.expandtabs(tab_size), style=Theme.get_time_style()),
            )
            for row in rows
        ]

    def build_table(self, rows: Sequence[ResolvedRow]) -> Table:
        """Build a header-less, gridless table with one line per row"""
        table = Table(
            box=None,
            show_header=False,
            show_edge=False,
            pad_edge=True,
            padding=Theme.CELL_PADDING,
        )
        table.add_column(justify='left', no_wrap=True)
        table.add_column(justify='left', no_wrap=True)

        for label, time_text in self._cells(rows):
            table.add_row(label, time_text)

        return table

    def required_width(self, rows: Sequence[ResolvedRow]) -> int:
        """Width the table needs to print without wrapping"""
        _, right = Theme.CELL_PADDING
        pad = 2 * right
        cells = self._cells(rows)
        label_width = max((cell_len(label.plain) for label, _ in cells), default=0)
        time_width = max((cell_len(time_text.plain) for _, time_text in cells), default=0)
        return label_width + time_width + 2 * pad

    def present(self, rows: Sequence[ResolvedRow]) -> None:
        """
        Print rows to the console.

        Write errors on the output stream propagate to the caller.
        """
        needed = self.required_width(rows)
        if needed > self._console.width:
            self._console.width = needed

        self._console.print(self.build_table(rows))
