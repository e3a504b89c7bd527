from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserOperationResult:
    """Outcome of a successful create, update or delete."""

    message: str
    user_id: UUID
    username: str
