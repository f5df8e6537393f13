# =============================================================================
# tests/test_pagination.py - Pagination Tests
# =============================================================================
# Unit tests for page/offset arithmetic and the list-page service:
# - Offsets are (page - 1) * limit
# - totalPages is ceil(count / limit), 0 for empty tables
# - Pages past the end are empty but keep the pagination block
#
# Run with: pytest tests/test_pagination.py -v
# =============================================================================

import pytest

from core.services.content_service import NEWS, ContentService
from core.services.pagination import build_pagination, page_offset, total_pages
from tests.conftest import fake_select


class TestPageOffset:
    """Tests for page_offset."""

    def test_first_page(self):
        assert page_offset(1, 10) == 0

    def test_second_page(self):
        assert page_offset(2, 5) == 5

    @pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (-1, 5)])
    def test_rejects_non_positive(self, page, limit):
        with pytest.raises(ValueError):
            page_offset(page, limit)


class TestTotalPages:
    """Tests for total_pages."""

    @pytest.mark.parametrize(
        "count,limit,expected",
        [
            (0, 10, 0),
            (None, 10, 0),
            (1, 10, 1),
            (10, 10, 1),
            (11, 10, 2),
            (12, 5, 3),
        ],
    )
    def test_ceiling(self, count, limit, expected):
        assert total_pages(count, limit) == expected

    def test_build_pagination(self):
        assert build_pagination(2, 5, 12).to_dict() == {"page": 2, "limit": 5, "totalPages": 3}


class TestListPage:
    """Tests for ContentService.list_page against an in-memory table."""

    def test_second_page_of_published_news(self, db, news_rows):
        """12 published rows, 5 per page: page 2 holds rows 6-10 by date desc."""
        db.select_rows.side_effect = fake_select(news_rows)

        result = ContentService.list_page(db, NEWS, page=2, limit=5, published_only=True)

        assert result["count"] == 12
        assert result["pagination"] == {"page": 2, "limit": 5, "totalPages": 3}
        assert [row["date"] for row in result["data"]] == [
            "2024-05-07",
            "2024-05-06",
            "2024-05-05",
            "2024-05-04",
            "2024-05-03",
        ]

    def test_query_arguments(self, db):
        db.select_rows.return_value = ([], 0)

        ContentService.list_page(db, NEWS, page=3, limit=4, published_only=True, category="sport")

        db.select_rows.assert_called_once_with(
            "news",
            filters={"published": True, "category": "sport"},
            order_by="date",
            ascending=False,
            offset=8,
            limit=4,
            count=True,
        )

    def test_page_past_end(self, db, news_rows):
        db.select_rows.side_effect = fake_select(news_rows)

        result = ContentService.list_page(db, NEWS, page=9, limit=5)

        assert result["data"] == []
        assert result["count"] == 15
        assert result["pagination"]["totalPages"] == 3

    def test_empty_table(self, db):
        db.select_rows.return_value = ([], 0)

        result = ContentService.list_page(db, NEWS)

        assert result == {
            "data": [],
            "count": 0,
            "pagination": {"page": 1, "limit": 10, "totalPages": 0},
        }

    def test_draft_rows_included_without_filter(self, db, news_rows):
        db.select_rows.side_effect = fake_select(news_rows)

        result = ContentService.list_page(db, NEWS, limit=100)

        assert len(result["data"]) == 15
