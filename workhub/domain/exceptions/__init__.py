"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from workhub.domain.exceptions.entity_not_found import EntityNotFoundError
from workhub.domain.exceptions.entity_already_exists import EntityAlreadyExistsError
from workhub.domain.exceptions.access_denied import AccessDeniedError
from workhub.domain.exceptions.validation_error import DomainValidationError
from workhub.domain.exceptions.invalid_state import (
    InvalidStateError,
    ProductOutOfStockError,
)
from workhub.domain.exceptions.invalid_credentials import InvalidCredentialsError

__all__ = [
    "EntityNotFoundError",
    "EntityAlreadyExistsError",
    "AccessDeniedError",
    "DomainValidationError",
    "InvalidStateError",
    "ProductOutOfStockError",
    "InvalidCredentialsError",
]
