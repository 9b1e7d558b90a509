"""Response envelope, page wrapper and shared value DTOs."""

from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel

from workhub.domain.value_objects.address import Address
from workhub.domain.value_objects.page import Page

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope for single-entity and command responses."""

    success: bool = True
    message: str = "OK"
    data: Optional[T] = None

    @classmethod
    def ok(cls, data: Any = None, message: str = "OK") -> "ApiResponse":
        return cls(success=True, message=message, data=data)


class PageResponse(BaseModel, Generic[T]):
    """Raw page returned by every list endpoint."""

    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Page, mapper: Callable[[Any], T]) -> "PageResponse[T]":
        return cls(
            content=[mapper(item) for item in page.content],
            page=page.page,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
        )


class AddressDTO(BaseModel):
    street: str
    city: str
    country: str
    state: Optional[str] = None
    zip_code: Optional[str] = None
    recipient_name: Optional[str] = None
    phone_number: Optional[str] = None

    @classmethod
    def from_value(cls, address: Optional[Address]) -> Optional["AddressDTO"]:
        if address is None:
            return None
        return cls(**address.to_dict())

    def to_value(self) -> Address:
        return Address(**self.model_dump())
