# =============================================================================
# core/services/content_service.py - Content CRUD Logic
# =============================================================================
# Handles list/get/create/update/delete for the four content tables
# (news, achievements, teachers, courses).
# Separates HTTP concerns from database logic: routers parse the request,
# this module decides ordering, filters and pagination.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from app.exceptions import ContentNotFoundError
from core.services.pagination import build_pagination, page_offset
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentResource:
    """
    How one content table is stored and listed.

    Attributes:
        table: Supabase table name
        bucket: Storage bucket holding the table's images
        label: Human-readable name used in error messages
        order_by: Column list endpoints sort by
        ascending: Sort direction for order_by
        ensure_bucket: Create the bucket on first upload if it's missing
    """

    table: str
    bucket: str
    label: str
    order_by: str
    ascending: bool
    ensure_bucket: bool = False


NEWS = ContentResource(
    table="news",
    bucket="news",
    label="News item",
    order_by="date",
    ascending=False,
)

ACHIEVEMENTS = ContentResource(
    table="achievements",
    bucket="achievements",
    label="Achievement",
    order_by="date",
    ascending=False,
)

TEACHERS = ContentResource(
    table="teachers",
    bucket="teachers",
    label="Teacher",
    order_by="sort_order",
    ascending=True,
)

COURSES = ContentResource(
    table="courses",
    bucket="courses",
    label="Course",
    order_by="sort_order",
    ascending=True,
    ensure_bucket=True,
)

RESOURCES: dict[str, ContentResource] = {
    r.table: r for r in (NEWS, ACHIEVEMENTS, TEACHERS, COURSES)
}


def _list_filters(published_only: bool, category: str | None) -> dict[str, Any]:
    """Equality filters for list queries. False/empty values mean 'no filter'."""
    filters: dict[str, Any] = {}
    if published_only:
        filters["published"] = True
    if category:
        filters["category"] = category
    return filters


class ContentService:
    """
    Service for content table operations.

    Every method takes the request-scoped SupabaseClient explicitly;
    nothing is cached between requests.
    """

    @staticmethod
    def list_page(
        db: SupabaseClient,
        resource: ContentResource,
        page: int = 1,
        limit: int = 10,
        published_only: bool = False,
        category: str | None = None,
    ) -> dict[str, Any]:
        """
        List one page of rows.

        Returns:
            {"data": rows, "count": total, "pagination": {page, limit, totalPages}}
        """
        offset = page_offset(page, limit)

        rows, count = db.select_rows(
            resource.table,
            filters=_list_filters(published_only, category),
            order_by=resource.order_by,
            ascending=resource.ascending,
            offset=offset,
            limit=limit,
            count=True,
        )

        return {
            "data": rows,
            "count": count,
            "pagination": build_pagination(page, limit, count).to_dict(),
        }

    @staticmethod
    def list_all(
        db: SupabaseClient,
        resource: ContentResource,
        published_only: bool = False,
        category: str | None = None,
    ) -> list[dict[str, Any]]:
        """List every matching row, unpaginated."""
        rows, _ = db.select_rows(
            resource.table,
            filters=_list_filters(published_only, category),
            order_by=resource.order_by,
            ascending=resource.ascending,
        )
        return rows

    @staticmethod
    def get(
        db: SupabaseClient,
        resource: ContentResource,
        row_id: str | UUID,
    ) -> dict[str, Any]:
        """
        Get a row by ID.

        Raises:
            ContentNotFoundError: If no row has that ID
        """
        row_id_str = str(row_id)
        row = db.fetch_row(resource.table, row_id_str)

        if not row:
            raise ContentNotFoundError(resource.label, row_id_str)
        return row

    @staticmethod
    def create(
        db: SupabaseClient,
        resource: ContentResource,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        """Insert a row and return it as stored."""
        row = db.insert_row(resource.table, data)
        logger.info(f"Created {resource.table} row: {row.get('id')}")
        return row

    @staticmethod
    def update(
        db: SupabaseClient,
        resource: ContentResource,
        row_id: str | UUID,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Update a row by ID.

        An empty update returns the current row unchanged.

        Raises:
            ContentNotFoundError: If no row has that ID
        """
        row_id_str = str(row_id)

        if not data:
            return ContentService.get(db, resource, row_id_str)

        row = db.update_row(resource.table, row_id_str, data)
        if not row:
            raise ContentNotFoundError(resource.label, row_id_str)
        return row

    @staticmethod
    def delete(
        db: SupabaseClient,
        resource: ContentResource,
        row_id: str | UUID,
    ) -> None:
        """Delete a row by ID."""
        db.delete_row(resource.table, str(row_id))

    @staticmethod
    def counts(db: SupabaseClient) -> dict[str, int]:
        """Row counts for every content table, keyed by table name."""
        return {name: db.count_rows(r.table) for name, r in RESOURCES.items()}
