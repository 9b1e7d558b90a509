"""
AccessDeniedError - Raised when the caller lacks the role or ownership an operation needs.
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    """Raised when a role check or an ownership check fails"""

    def __init__(self, message: str = "Access denied", required_roles: tuple = ()):
        super().__init__(message)
        self.required_roles = tuple(required_roles)
