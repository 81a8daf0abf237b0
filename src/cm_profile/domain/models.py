"""Domain models for cm_profile — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Profile:
    id: int
    first_name: str
    last_name: str
    profession: str
    balance: int   # cents, never negative
    type: str      # ProfileType value
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
