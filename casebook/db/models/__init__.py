"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and every ORM class so callers can write
`models.Case`, `models.Evidence`, and so on.
"""

from .base import Base, now_utc, today_utc  # re-export

# Domain models
from .users import User
from .victims import Victim
from .suspects import Suspect, CaseSuspect
from .cases import Case
from .evidence import Evidence
from .forensic_actions import ForensicAction
from .activity import ActivityLog

__all__ = [
    # base
    "Base",
    "now_utc",
    "today_utc",
    # people
    "User",
    "Victim",
    "Suspect",
    "CaseSuspect",
    # investigation
    "Case",
    "Evidence",
    "ForensicAction",
    # activity
    "ActivityLog",
]
