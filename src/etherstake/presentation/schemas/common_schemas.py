"""
Shared API schemas and query parameters.
"""

from fastapi import Query
from pydantic import BaseModel

from etherstake.domain.value_objects.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    Page,
    PageRequest,
)


class PaginationMeta(BaseModel):
    """Pagination block of list responses."""

    total: int
    page: int
    pages: int
    limit: int

    @classmethod
    def from_page(cls, page: Page) -> "PaginationMeta":
        return cls(**page.pagination())


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


def page_request_params(
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(
        DEFAULT_PAGE_SIZE,
        ge=1,
        le=MAX_PAGE_SIZE,
        description="Items per page",
    ),
) -> PageRequest:
    """Build a PageRequest from ?page=&limit= query parameters."""
    return PageRequest(page=page, limit=limit)
