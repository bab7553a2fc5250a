"""Page window and page-label computation for the result grid."""

import math
from typing import Sequence, TypeVar

T = TypeVar("T")

ELLIPSIS = "..."
FULL_LIST_MAX_PAGES = 7


class InvalidConfig(ValueError):
    pass


class OutOfRange(Exception):
    def __init__(self, page: int, total_pages: int):
        super().__init__(f"Page {page} outside 1..{total_pages}")
        self.page = page
        self.total_pages = total_pages


class Paginator:
    def __init__(self, page_size: int = 16):
        self.page_size = 1
        self.current_page = 1
        self.total_pages = 1
        self.item_count = 0
        self.configure(page_size)

    def configure(self, page_size: int) -> None:
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
            raise InvalidConfig(f"page_size must be a positive integer, got {page_size!r}")
        self.page_size = page_size
        self.reset(self.item_count)

    def _pages_for(self, item_count: int) -> int:
        return max(1, math.ceil(item_count / self.page_size))

    def reset(self, item_count: int) -> None:
        self.item_count = max(0, item_count)
        self.total_pages = self._pages_for(self.item_count)
        self.current_page = 1

    def go_to(self, page: int, item_count: int) -> None:
        """Move to ``page``; raises OutOfRange and leaves state untouched otherwise."""
        total_pages = self._pages_for(max(0, item_count))
        if page < 1 or page > total_pages:
            raise OutOfRange(page, total_pages)
        self.item_count = max(0, item_count)
        self.total_pages = total_pages
        self.current_page = page

    def previous(self) -> None:
        self.go_to(self.current_page - 1, self.item_count)

    def next(self) -> None:
        self.go_to(self.current_page + 1, self.item_count)

    @property
    def has_previous(self) -> bool:
        return self.item_count > 0 and self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.item_count > 0 and self.current_page < self.total_pages

    def page_slice(self, items: Sequence[T]) -> list[T]:
        start = (self.current_page - 1) * self.page_size
        return list(items[start:start + self.page_size])

    def page_labels(self) -> list[int | str]:
        """Page numbers to show, with ELLIPSIS standing in for hidden runs.

        First and last pages are always shown around a window of the current
        page and its neighbours. A single hidden page is shown rather than
        replaced by an ellipsis.
        """
        if self.item_count == 0:
            return []
        total, current = self.total_pages, self.current_page
        if total <= FULL_LIST_MAX_PAGES:
            return list(range(1, total + 1))

        start = max(2, current - 1)
        end = min(total - 1, current + 1)

        labels: list[int | str] = [1]
        if start > 3:
            labels.append(ELLIPSIS)
        elif start == 3:
            labels.append(2)
        labels.extend(range(start, end + 1))
        if end < total - 2:
            labels.append(ELLIPSIS)
        elif end == total - 2:
            labels.append(total - 1)
        labels.append(total)
        return labels

    def range_info(self) -> str:
        if self.item_count == 0:
            return "No results found"
        start = (self.current_page - 1) * self.page_size
        end = min(start + self.page_size, self.item_count)
        return f"Showing {start + 1}-{end} of {self.item_count}"
