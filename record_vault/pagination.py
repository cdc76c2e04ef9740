"""
Pagination Window
Slices a QueryView into 1-based pages
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from record_vault.config import DEFAULT_PAGE_SIZE


def total_pages_for(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size) if total_count else 0


@dataclass(frozen=True)
class Page:
    items: Tuple
    page_number: int
    total_pages: int
    total_count: int
    page_size: int

    def range_label(self) -> str:
        """Caption under the table, e.g. '6-10 of 23'"""
        if not self.items:
            return f"0 of {self.total_count}"
        first = (self.page_number - 1) * self.page_size + 1
        last = first + len(self.items) - 1
        return f"{first}-{last} of {self.total_count}"

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages


def page(view: Sequence, page_number: int, page_size: int) -> Page:
    """
    Return one page of a view.

    Pages past the end come back empty; total_pages is still
    ceil(total_count / page_size), or 0 for an empty view.

    Raises:
        ValueError: page_number or page_size below 1
    """
    if page_size < 1:
        raise ValueError(f"Page size must be at least 1 (got {page_size})")
    if page_number < 1:
        raise ValueError(f"Page number must be at least 1 (got {page_number})")

    total_count = len(view)
    start = (page_number - 1) * page_size
    return Page(
        items=tuple(view[start:start + page_size]),
        page_number=page_number,
        total_pages=total_pages_for(total_count, page_size),
        total_count=total_count,
        page_size=page_size,
    )


class Pager:
    """Current page number and size of one table"""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        if page_size < 1:
            raise ValueError(f"Page size must be at least 1 (got {page_size})")
        self.page_number = 1
        self.page_size = page_size

    def reset(self) -> None:
        """Back to page 1 (after a search, filter or sort change)"""
        self.page_number = 1

    def go_to(self, page_number: int) -> None:
        if page_number < 1:
            raise ValueError(f"Page number must be at least 1 (got {page_number})")
        self.page_number = page_number

    def set_page_size(self, page_size: int, total_count: int) -> None:
        """Change the size, keeping the page number but clamping it into range"""
        if page_size < 1:
            raise ValueError(f"Page size must be at least 1 (got {page_size})")
        self.page_size = page_size
        last_page = max(total_pages_for(total_count, page_size), 1)
        self.page_number = min(max(self.page_number, 1), last_page)

    def window(self, view: Sequence) -> Page:
        return page(view, self.page_number, self.page_size)
