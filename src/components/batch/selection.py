"""
Selection model for the batch table.

Keeps an ordered list of rows, the set of selected ids and the index of the
last clicked row. Every selected id belongs to a current row; refresh()
drops ids whose rows disappeared.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import SelectionRow

PUBLISHABLE_STATUSES = frozenset({"draft", "in_review"})
ARCHIVABLE_STATUSES = frozenset({"published"})


class SelectionSet:
    def __init__(self, rows: Sequence[SelectionRow] = ()) -> None:
        self._rows: list[SelectionRow] = list(rows)
        self._selected: set[str] = set()
        self.last_selected_index: int | None = None

    @property
    def rows(self) -> tuple[SelectionRow, ...]:
        return tuple(self._rows)

    @property
    def selected(self) -> frozenset[str]:
        return frozenset(self._selected)

    def is_selected(self, content_id: str) -> bool:
        return content_id in self._selected

    def all_selected(self) -> bool:
        return bool(self._rows) and all(row.id in self._selected for row in self._rows)

    def select_all(self) -> None:
        """Toggle between everything selected and nothing selected."""
        if self.all_selected():
            self._selected.clear()
        else:
            self._selected = {row.id for row in self._rows}

    def select_row(self, content_id: str, index: int, extend_range: bool = False) -> None:
        """
        Toggle a single row, or with extend_range add every row between the
        last clicked index and this one (inclusive, either direction).
        Range mode only ever adds to the selection.
        """
        if extend_range and self.last_selected_index is not None:
            lo, hi = sorted((self.last_selected_index, index))
            lo = max(lo, 0)
            hi = min(hi, len(self._rows) - 1)
            for row in self._rows[lo : hi + 1]:
                self._selected.add(row.id)
        else:
            if not any(row.id == content_id for row in self._rows):
                raise ValueError(f"Unknown row id: {content_id}")
            if content_id in self._selected:
                self._selected.discard(content_id)
            else:
                self._selected.add(content_id)

        self.last_selected_index = index

    def clear(self) -> None:
        """Empty the selection; last_selected_index is kept."""
        self._selected.clear()

    def refresh(self, rows: Sequence[SelectionRow]) -> None:
        """Replace the rows and drop selected ids that no longer exist."""
        self._rows = list(rows)
        live = {row.id for row in self._rows}
        self._selected &= live
        if self.last_selected_index is not None and self.last_selected_index >= len(self._rows):
            self.last_selected_index = None

    # --- Derived views, recomputed on every access ---

    @property
    def selected_ids(self) -> list[str]:
        return [row.id for row in self._rows if row.id in self._selected]

    @property
    def selected_for_publish(self) -> list[str]:
        return [
            row.id
            for row in self._rows
            if row.id in self._selected and row.status in PUBLISHABLE_STATUSES
        ]

    @property
    def selected_for_archive(self) -> list[str]:
        return [
            row.id
            for row in self._rows
            if row.id in self._selected and row.status in ARCHIVABLE_STATUSES
        ]
