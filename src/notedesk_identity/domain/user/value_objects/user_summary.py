from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserSummary:
    """Read model for user listings. Never carries the password hash."""

    id: UUID
    username: str
    roles: list[str] = field(default_factory=list)
    active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
