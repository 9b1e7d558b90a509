"""
InvalidCredentialsError - Raised when a login or a session token is rejected.
Maps to: HTTP 401 Unauthorized
"""


class InvalidCredentialsError(Exception):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
