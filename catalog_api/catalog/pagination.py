"""Offset pagination helpers."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def total_pages(total_count: int, page_size: int) -> int:
    """Number of pages needed for ``total_count`` items.

    Args:
        total_count: Number of matching items.
        page_size: Items per page (must be positive).

    Returns:
        Page count, 0 when there are no items.
    """
    if total_count <= 0:
        return 0
    return math.ceil(total_count / page_size)


@dataclass(frozen=True)
class PaginationParams:
    """Pagination parameters.

    Callers must pass ``page_number >= 1`` and ``page_size >= 1``; the
    HTTP layer validates both before they get here.

    Attributes:
        page_number: Page number (1-indexed).
        page_size: Items per page.
    """

    page_number: int = 1
    page_size: int = 10

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Get limit (alias for page_size)."""
        return self.page_size


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: Items on the requested page.
        total_count: Matches across all pages.
        page_number: Current page.
        page_size: Items per page.
    """

    items: list[T]
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return total_pages(self.total_count, self.page_size)

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page_number < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Check if there's a previous page."""
        return self.page_number > 1
