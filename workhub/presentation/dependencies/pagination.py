"""Pagination query parameters shared by every list endpoint."""

from typing import Optional

from fastapi import Query

from workhub.config.settings import Config
from workhub.domain.value_objects.page import PageRequest


def get_page_request(
    page: int = Query(0, ge=0),
    size: int = Query(Config.DEFAULT_PAGE_SIZE, ge=1, le=Config.MAX_PAGE_SIZE),
    sort: Optional[str] = Query(None, description="field,asc|desc"),
) -> PageRequest:
    return PageRequest.parse_sort(page, size, sort)
