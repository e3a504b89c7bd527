"""Application services for identity management."""

from notedesk_identity.application.services.user_lifecycle_service import (
    UserLifecycleService,
)

__all__ = ["UserLifecycleService"]
