"""
core/state/selector.py - Filterable single-selection list

One generic component behind the region selector and the instance type
selector: a fixed catalog, a filter string, the filtered view and a
selection index into that view.

Filtering:
    The filter text is tried as a regular expression (re.search). If it does
    not compile, it is matched as a case-insensitive substring instead. An
    empty filter shows the whole catalog.

Usage:
    selector = make_region_selector("us-east-1")
    selector.open()
    selector.push_char("a")
    selector.push_char("p")
    selector.move_down()
    region = selector.confirm()     # None if nothing is selected
"""

from __future__ import annotations

import re
from typing import Callable, Generic, Sequence, TypeVar

from ddbconsole.core.instance_types import INSTANCE_TYPES
from ddbconsole.core.region.data import ALL_REGIONS

T = TypeVar("T")


class FilterSelector(Generic[T]):
    """Filterable selector over a fixed catalog

    Args:
        catalog: Entries in display order
        label: Text the filter is matched against (default: str)
        current: Entry currently in use (highlighted when the selector opens)
    """

    def __init__(
        self,
        catalog: Sequence[T],
        label: Callable[[T], str] = str,
        current: T | None = None,
    ):
        self.catalog: tuple[T, ...] = tuple(catalog)
        self.label = label
        self.current = current
        self.filter_text = ""
        self.filtered: list[T] = list(self.catalog)
        self.selected: int | None = 0 if self.filtered else None

    # -------------------------------------------------------------------------
    # Filter
    # -------------------------------------------------------------------------

    def open(self) -> None:
        """Clear the filter and highlight the current entry"""
        self.set_filter("")
        if self.current is not None and self.current in self.filtered:
            self.selected = self.filtered.index(self.current)

    def set_filter(self, text: str) -> None:
        self.filter_text = text
        self._refilter()

    def push_char(self, char: str) -> None:
        self.set_filter(self.filter_text + char)

    def pop_char(self) -> None:
        self.set_filter(self.filter_text[:-1])

    def _matcher(self) -> Callable[[str], bool]:
        if not self.filter_text:
            return lambda text: True
        try:
            pattern = re.compile(self.filter_text)
        except re.error:
            needle = self.filter_text.lower()
            return lambda text: needle in text.lower()
        return lambda text: pattern.search(text) is not None

    def _refilter(self) -> None:
        matches = self._matcher()
        self.filtered = [item for item in self.catalog if matches(self.label(item))]

        if not self.filtered:
            self.selected = None
        elif self.selected is None or self.selected >= len(self.filtered):
            self.selected = 0

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def move_up(self) -> None:
        if not self.filtered:
            return
        current = self.selected or 0
        self.selected = current - 1 if current > 0 else len(self.filtered) - 1

    def move_down(self) -> None:
        if not self.filtered:
            return
        current = self.selected or 0
        self.selected = current + 1 if current < len(self.filtered) - 1 else 0

    @property
    def selected_item(self) -> T | None:
        if self.selected is None or self.selected >= len(self.filtered):
            return None
        return self.filtered[self.selected]

    def confirm(self) -> T | None:
        """Adopt the selected entry as current

        Returns:
            The adopted entry, or None when nothing is selected (no-op)
        """
        item = self.selected_item
        if item is not None:
            self.current = item
        return item


def make_region_selector(current: str | None = None) -> FilterSelector[str]:
    return FilterSelector(ALL_REGIONS, current=current)


def make_type_selector(current: str | None = None) -> FilterSelector[str]:
    return FilterSelector(INSTANCE_TYPES, current=current)
