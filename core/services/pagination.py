# =============================================================================
# core/services/pagination.py - Pagination Math
# =============================================================================
# Page/limit to row-range conversion shared by the paginated list routes.
# =============================================================================

from core.models.pagination import Pagination


def page_offset(page: int, limit: int) -> int:
    """
    First row index (0-based) of a 1-indexed page.

    Example:
        page_offset(2, 5)  # 5
    """
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be >= 1")
    return (page - 1) * limit


def total_pages(count: int | None, limit: int) -> int:
    """ceil(count / limit), with 0 when there are no rows."""
    if not count:
        return 0
    return -(-count // limit)


def build_pagination(page: int, limit: int, count: int | None) -> Pagination:
    """Build the pagination block for a list response."""
    return Pagination(page=page, limit=limit, total_pages=total_pages(count, limit))
