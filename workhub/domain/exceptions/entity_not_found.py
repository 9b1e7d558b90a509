"""
EntityNotFoundError - Raised when a requested or referenced entity does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)

    @classmethod
    def for_id(cls, entity: str, entity_id: str) -> "EntityNotFoundError":
        return cls(f"{entity} not found with id: {entity_id}")
