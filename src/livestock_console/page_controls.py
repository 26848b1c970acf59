from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WINDOW = 5
PER_PAGE_OPTIONS = (6, 12, 18, 24)


def page_window(current_page: int, total_pages: int, window: int = DEFAULT_WINDOW) -> list[int]:
    """Page numbers shown around the current page in the card-view footer."""
    half = window // 2
    start = max(1, current_page - half)
    end = min(total_pages, current_page + half)
    if end - start + 1 < window:
        if start == 1:
            end = min(total_pages, start + window - 1)
        else:
            start = max(1, end - window + 1)
    return list(range(start, end + 1))


def can_change_page(page: int, *, current_page: int, total_pages: int, loading: bool) -> bool:
    if loading:
        return False
    if page < 1 or page > total_pages:
        return False
    return page != current_page


def item_range(current_page: int, per_page: int, total_items: int) -> tuple[int, int]:
    if total_items <= 0:
        return (0, 0)
    first = (current_page - 1) * per_page + 1
    last = min(current_page * per_page, total_items)
    return (first, last)


@dataclass
class PageControls:
    current_page: int = 1
    total_pages: int = 0
    per_page: int = 10
    total_items: int = 0
    window: int = DEFAULT_WINDOW

    @property
    def pages(self) -> list[int]:
        return page_window(self.current_page, self.total_pages, self.window)

    @property
    def is_first_page(self) -> bool:
        return self.current_page <= 1

    @property
    def is_last_page(self) -> bool:
        return self.current_page >= self.total_pages

    @property
    def visible_range(self) -> tuple[int, int]:
        return item_range(self.current_page, self.per_page, self.total_items)
