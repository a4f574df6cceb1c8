"""
Activity logging helpers and enums.

Every change made through the API leaves one activity row. Writing the row
is best-effort: a failure is logged and never fails the request that
triggered it.
"""
from __future__ import annotations
import logging
import uuid
from enum import Enum
from typing import Any, Optional, Dict
from sqlalchemy.orm import Session

from casebook.db import schemas
from casebook.db.repositories import activity as activity_repo

logger = logging.getLogger("casebook.activity")


class ActivityAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    STATUS_CHANGE = "status_change"
    ACTION_COMPLETE = "action_complete"
    ACTION_REOPEN = "action_reopen"
    ROLE_CHANGE = "role_change"


def log(
    db: Session,
    *,
    action: ActivityAction | str,
    entity_type: str,
    entity_id: Optional[uuid.UUID] = None,
    user_id: Optional[uuid.UUID] = None,
    details: Optional[Dict[str, Any]] = None,
) -> Optional[schemas.ActivityLog]:
    """Persist one activity row; returns None if the write failed."""
    # Persist the plain string value, not the Enum repr
    action_value = action.value if isinstance(action, ActivityAction) else str(action)
    entry = schemas.ActivityLogCreate(
        action=action_value,
        entity_type=entity_type,
        entity_id=entity_id,
        details=details or {},
    )
    try:
        return activity_repo.create_activity_log(db, entry, user_id=user_id)
    except Exception as e:
        db.rollback()
        logger.warning(
            "Failed to record %s on %s %s: %s", action_value, entity_type, entity_id, e
        )
        return None


__all__ = ["ActivityAction", "log"]
