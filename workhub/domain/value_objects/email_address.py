"""
EmailAddress Value Object - Wraps an email with validation and normalisation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmailAddress:
    value: str  # stored lower-cased

    def __post_init__(self):
        if not self.value or "@" not in self.value or self.value.startswith("@"):
            raise ValueError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "value", self.value.strip().lower())

    def __str__(self) -> str:
        return self.value
