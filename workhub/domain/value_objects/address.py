"""
Address Value Object - Postal address used by profiles and order shipping.
"""

from dataclasses import dataclass, asdict
from typing import Optional


@dataclass(frozen=True)
class Address:
    street: str
    city: str
    country: str
    state: Optional[str] = None
    zip_code: Optional[str] = None
    recipient_name: Optional[str] = None
    phone_number: Optional[str] = None

    def is_blank(self) -> bool:
        return not (self.street.strip() and self.city.strip() and self.country.strip())

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["Address"]:
        if not data:
            return None
        return cls(
            street=data.get("street", ""),
            city=data.get("city", ""),
            country=data.get("country", ""),
            state=data.get("state"),
            zip_code=data.get("zip_code"),
            recipient_name=data.get("recipient_name"),
            phone_number=data.get("phone_number"),
        )
