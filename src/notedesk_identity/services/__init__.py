"""Identity infrastructure services."""

from notedesk_identity.services.password_service import PasswordHashingService

__all__ = ["PasswordHashingService"]
