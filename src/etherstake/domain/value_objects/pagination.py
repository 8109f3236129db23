"""
Pagination value objects shared by all list queries.
"""

import math
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

from etherstake.domain.exceptions.base import ValidationError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    """1-based page number and page size."""

    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if self.page < 1:
            raise ValidationError("page", "must be at least 1")

        if self.limit < 1 or self.limit > MAX_PAGE_SIZE:
            raise ValidationError(
                "limit", f"must be between 1 and {MAX_PAGE_SIZE}"
            )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page(Generic[T]):
    """
    One page of results plus the metadata needed to walk the rest.

    Items are ordered newest first by the repositories.
    """

    items: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    @property
    def results(self) -> int:
        return len(self.items)

    def pagination(self) -> dict:
        """Pagination metadata block returned alongside items."""
        return {
            "total": self.total,
            "page": self.page,
            "pages": self.pages,
            "limit": self.limit,
        }
