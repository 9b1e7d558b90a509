"""
Pagination Value Objects.

PageRequest carries page/size/sort coming from the HTTP layer down to repositories.
Page is what every paginated repository query returns.
"""

import math
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from workhub.config.settings import Config
from workhub.domain.exceptions import DomainValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = 20
    sort_by: Optional[str] = None
    descending: bool = False

    def __post_init__(self):
        if self.page < 0:
            raise ValueError("Page index must not be negative")
        if self.size < 1 or self.size > Config.MAX_PAGE_SIZE:
            raise ValueError(f"Page size must be between 1 and {Config.MAX_PAGE_SIZE}")

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def parse_sort(cls, page: int, size: int, sort: Optional[str]) -> "PageRequest":
        """Build from Spring-style ``sort=field,asc|desc`` query parameters."""
        if not sort:
            return cls(page=page, size=size)
        field_name, _, direction = sort.partition(",")
        return cls(
            page=page,
            size=size,
            sort_by=field_name.strip() or None,
            descending=direction.strip().lower() == "desc",
        )


def requested_sort_field(page: Optional[PageRequest], sortable: frozenset[str]) -> Optional[str]:
    """
    The field a listing was asked to sort by, or None for the default order.

    Raises:
        DomainValidationError if the field is not one the repository allows
    """
    if page is None or not page.sort_by:
        return None
    if page.sort_by not in sortable:
        raise DomainValidationError(
            f"Cannot sort by '{page.sort_by}'. Sortable fields: {', '.join(sorted(sortable))}"
        )
    return page.sort_by


@dataclass
class Page(Generic[T]):
    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int = field(init=False)

    def __post_init__(self):
        self.total_pages = math.ceil(self.total_elements / self.size) if self.size else 0

    @classmethod
    def of(cls, items: list[T], total: int, request: PageRequest) -> "Page[T]":
        return cls(content=items, page=request.page, size=request.size, total_elements=total)

    def map(self, fn) -> "Page":
        return Page(
            content=[fn(item) for item in self.content],
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
        )
