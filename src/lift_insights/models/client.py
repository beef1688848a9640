"""Client model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Client:
    """A coached client who owns training logs."""

    name: str
    created_at: datetime | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
