"""
Request and response schemas for the HTTP API.

Response bodies for fusions reuse the application DTOs; this module adds the
request bodies and the pagination wrappers.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class MergeRequest(BaseModel):
    """Body of ``POST /partners/{kind}/merge``."""

    origin_id: int = Field(..., gt=0, description="Partner that disappears")
    destination_id: int = Field(..., gt=0, description="Partner that absorbs the origin")
    performed_by: Optional[str] = Field(
        None, max_length=100, description="Operator requesting the merge"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "origin_id": 1,
                "destination_id": 2,
                "performed_by": "operator-7",
            }
        }
    )


class PaginationParams(BaseModel):
    """
    Query parameters for paginated list endpoints.

    Attributes:
        page: Page number (1-indexed)
        page_size: Number of items per page (max 100)
    """

    page: int = Field(default=1, ge=1, description="Page number (1-indexed)")
    page_size: int = Field(default=20, ge=1, le=100, description="Items per page (max 100)")

    @property
    def offset(self) -> int:
        """SQL OFFSET for the requested page."""
        return (self.page - 1) * self.page_size

    @staticmethod
    def calculate_total_pages(total: int, page_size: int) -> int:
        """
        Calculate total pages from total count.

        Example:
            >>> PaginationParams.calculate_total_pages(95, 20)
            5
            >>> PaginationParams.calculate_total_pages(0, 20)
            0
        """
        return (total + page_size - 1) // page_size if total > 0 else 0


class PaginationMeta(BaseModel):
    """Metadata for paginated responses."""

    total: int = Field(description="Total number of items")
    page: int = Field(description="Current page number")
    page_size: int = Field(description="Number of items per page")
    total_pages: int = Field(description="Total number of pages")


class PaginatedResponse(BaseModel, Generic[DataT]):
    """Generic paginated response wrapper."""

    data: list[DataT]
    meta: PaginationMeta


class HealthResponse(BaseModel):
    """Body of ``GET /health``."""

    status: str
    app: str
    version: str
    environment: str
    database: str
