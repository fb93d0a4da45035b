"""
core/state/browser.py - Table list and item page bookkeeping

TableCatalog:
    Table names of the current region and one detail slot per name, filled
    lazily by the runner. A slot is described at most once per load; a failed
    describe marks the slot attempted so it is not retried until the next
    load().

ItemBrowser:
    The current scan page of the table open in the records view, with its
    PaginationState.

Both lists wrap around on up/down navigation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from ddbconsole.core.config import settings
from ddbconsole.core.models import Record, TableDetail

# Opaque LastEvaluatedKey mapping
ContinuationToken = dict[str, Any]


def _wrap_up(index: int | None, length: int) -> int | None:
    if length == 0:
        return None
    current = index or 0
    return current - 1 if current > 0 else length - 1


def _wrap_down(index: int | None, length: int) -> int | None:
    if length == 0:
        return None
    current = index or 0
    return current + 1 if current < length - 1 else 0


# =============================================================================
# Pagination
# =============================================================================


@dataclass
class PaginationState:
    page_size: int = field(default_factory=lambda: settings.PAGE_SIZE)
    page: int = 1
    token: ContinuationToken | None = None
    has_more: bool = False

    def reset(self) -> None:
        self.page = 1
        self.token = None
        self.has_more = False

    def record_fetch(self, next_token: ContinuationToken | None) -> None:
        """Store the continuation token returned by the last scan"""
        self.token = next_token
        self.has_more = next_token is not None

    def advance(self) -> ContinuationToken | None:
        """Move to the next page and return the token to scan from

        Returns None (and changes nothing) when there are no more pages.
        """
        if not self.has_more or self.token is None:
            return None
        self.page += 1
        return self.token


# =============================================================================
# Table catalog
# =============================================================================


class TableCatalog:
    def __init__(self) -> None:
        self.names: list[str] = []
        self.details: list[TableDetail | None] = []
        self.attempted: list[bool] = []
        self.selected: int | None = None

    def __len__(self) -> int:
        return len(self.names)

    def load(self, names: Sequence[str]) -> None:
        """Replace the catalog; every detail slot starts empty"""
        self.names = list(names)
        self.details = [None] * len(self.names)
        self.attempted = [False] * len(self.names)
        self.selected = 0 if self.names else None

    def clear(self) -> None:
        self.load([])

    @property
    def selected_name(self) -> str | None:
        if self.selected is None or self.selected >= len(self.names):
            return None
        return self.names[self.selected]

    @property
    def selected_detail(self) -> TableDetail | None:
        if self.selected is None or self.selected >= len(self.details):
            return None
        return self.details[self.selected]

    def pending_describe(self) -> int | None:
        """Index of the selected table when its detail still has to be fetched"""
        index = self.selected
        if index is None or index >= len(self.names):
            return None
        if self.details[index] is not None or self.attempted[index]:
            return None
        return index

    def store_detail(self, index: int, detail: TableDetail | None) -> None:
        """Fill a slot (None records a failed attempt)"""
        if index >= len(self.names):
            return
        self.attempted[index] = True
        if detail is not None:
            self.details[index] = detail

    def move_up(self) -> None:
        self.selected = _wrap_up(self.selected, len(self.names))

    def move_down(self) -> None:
        self.selected = _wrap_down(self.selected, len(self.names))


# =============================================================================
# Item browser
# =============================================================================


class ItemBrowser:
    def __init__(self, page_size: int | None = None) -> None:
        self.records: list[Record] = []
        self.selected: int | None = None
        self.pagination = PaginationState(page_size=page_size or settings.PAGE_SIZE)

    def __len__(self) -> int:
        return len(self.records)

    def reset(self) -> None:
        """Forget the page and start again from page 1"""
        self.records = []
        self.selected = None
        self.pagination.reset()

    def set_page(self, records: Sequence[Record], next_token: ContinuationToken | None) -> None:
        self.records = list(records)
        self.selected = 0 if self.records else None
        self.pagination.record_fetch(next_token)

    @property
    def selected_record(self) -> Record | None:
        if self.selected is None or self.selected >= len(self.records):
            return None
        return self.records[self.selected]

    def replace_selected(self, record: Record | None) -> None:
        """Swap in a reloaded record, or drop it when it no longer exists"""
        if self.selected is None or self.selected >= len(self.records):
            return
        if record is not None:
            self.records[self.selected] = record
            return
        del self.records[self.selected]
        if not self.records:
            self.selected = None
        elif self.selected >= len(self.records):
            self.selected = len(self.records) - 1

    def move_up(self) -> None:
        self.selected = _wrap_up(self.selected, len(self.records))

    def move_down(self) -> None:
        self.selected = _wrap_down(self.selected, len(self.records))
