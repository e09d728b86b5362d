"""Tests for pagination helpers."""

import pytest

from catalog_api.catalog.pagination import PaginatedResult, PaginationParams, total_pages


class TestPaginationParams:
    """Tests for PaginationParams."""

    def test_first_page_offset(self) -> None:
        """Page 1 starts at offset 0."""
        params = PaginationParams(page_number=1, page_size=10)
        assert params.offset == 0
        assert params.limit == 10

    def test_later_page_offset(self) -> None:
        """Offset skips the previous pages."""
        params = PaginationParams(page_number=3, page_size=25)
        assert params.offset == 50
        assert params.limit == 25


class TestTotalPages:
    """Tests for total page calculation."""

    @pytest.mark.parametrize(
        ("total_count", "page_size", "expected"),
        [
            (0, 10, 0),
            (1, 10, 1),
            (10, 10, 1),
            (11, 10, 2),
            (3, 2, 2),
            (3, 1, 3),
        ],
    )
    def test_ceiling_division(self, total_count: int, page_size: int, expected: int) -> None:
        """Pages are the ceiling of count / size."""
        assert total_pages(total_count, page_size) == expected


class TestPaginatedResult:
    """Tests for PaginatedResult."""

    def test_navigation_flags(self) -> None:
        """Middle pages have both neighbours."""
        result = PaginatedResult(items=[1, 2], total_count=6, page_number=2, page_size=2)
        assert result.total_pages == 3
        assert result.has_next
        assert result.has_previous

    def test_empty_result(self) -> None:
        """No matches means no pages."""
        result: PaginatedResult[int] = PaginatedResult(
            items=[], total_count=0, page_number=1, page_size=10
        )
        assert result.total_pages == 0
        assert not result.has_next
        assert not result.has_previous
