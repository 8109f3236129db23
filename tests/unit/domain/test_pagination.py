"""
Unit tests for pagination value objects.
"""

import pytest

from etherstake.domain.exceptions import ValidationError
from etherstake.domain.value_objects.pagination import (
    MAX_PAGE_SIZE,
    Page,
    PageRequest,
)


class TestPageRequest:
    """Unit tests for PageRequest."""

    def test_defaults(self):
        request = PageRequest()

        assert request.page == 1
        assert request.limit == 10
        assert request.offset == 0

    def test_offset(self):
        assert PageRequest(page=3, limit=10).offset == 20

    def test_rejects_page_zero(self):
        with pytest.raises(ValidationError) as exc_info:
            PageRequest(page=0)

        assert exc_info.value.field == "page"

    def test_rejects_limit_out_of_range(self):
        with pytest.raises(ValidationError):
            PageRequest(limit=0)

        with pytest.raises(ValidationError):
            PageRequest(limit=MAX_PAGE_SIZE + 1)


class TestPage:
    """Unit tests for Page."""

    def test_pages_rounds_up(self):
        page = Page(items=list(range(10)), total=25, page=2, limit=10)

        assert page.pages == 3
        assert page.results == 10

    def test_empty_page(self):
        page = Page(items=[], total=0, page=1, limit=10)

        assert page.pages == 0
        assert page.results == 0

    def test_pagination_block(self):
        page = Page(items=[1, 2], total=12, page=2, limit=10)

        assert page.pagination() == {
            "total": 12,
            "page": 2,
            "pages": 2,
            "limit": 10,
        }
