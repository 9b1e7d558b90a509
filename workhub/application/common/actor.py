"""
Actor - Who is performing a command, as far as the application layer cares.

Built by the presentation layer from the authenticated session and the request.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Actor:
    user_id: Optional[str] = None
    roles: tuple[str, ...] = ()
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None

    def has_any_role(self, *roles: str) -> bool:
        return any(role in self.roles for role in roles)


SYSTEM = Actor()
