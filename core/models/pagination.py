# =============================================================================
# core/models/pagination.py - Pagination Schema
# =============================================================================
# The `pagination` block of paginated list responses. Serialized with the
# camelCase key the frontend reads (`totalPages`).
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class Pagination(BaseModel):
    """
    Pagination metadata for a list response.

    Example:
        {"page": 2, "limit": 5, "totalPages": 3}
    """

    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(..., ge=1, description="Current page (1-indexed)")
    limit: int = Field(..., ge=1, description="Rows per page")
    total_pages: int = Field(..., ge=0, alias="totalPages", description="ceil(count / limit)")

    def to_dict(self) -> dict:
        """Serialize with camelCase keys."""
        return self.model_dump(by_alias=True)
