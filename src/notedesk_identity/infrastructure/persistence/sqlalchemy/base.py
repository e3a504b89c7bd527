"""SQLAlchemy declarative base for notedesk_identity models.

Uses the same metadata as notedesk's Base so notes can reference users.
"""

from notedesk.infrastructure.persistence.sqlalchemy.models.base import Base

IdentityBase = Base
