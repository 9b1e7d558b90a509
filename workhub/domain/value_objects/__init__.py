"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from workhub.domain.value_objects.email_address import EmailAddress
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.domain.value_objects.address import Address

__all__ = [
    "EmailAddress",
    "Page",
    "PageRequest",
    "Address",
]
