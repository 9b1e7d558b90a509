"""
EntityAlreadyExistsError - Raised when a uniqueness constraint would be violated.
Maps to: HTTP 409 Conflict
"""


class EntityAlreadyExistsError(Exception):
    """Exception raised when username, email, SKU or a unique name is taken."""

    def __init__(self, message: str = "The entity already exists."):
        super().__init__(message)
