"""
Activity log API endpoints.

Admin-only view of who changed what.
"""
from typing import Optional, List
import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from casebook.db.database import get_db
from casebook.db import schemas
from casebook.db.repositories import activity as activity_repo
from casebook.api.deps import require_admin

router = APIRouter(prefix="/activity-logs", tags=["activity-logs"])


@router.get("/", response_model=List[schemas.ActivityLog])
def list_activity_logs(
    entity_type: Optional[str] = None,
    entity_id: Optional[uuid.UUID] = None,
    user_id: Optional[uuid.UUID] = None,
    action: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    user_context = Depends(require_admin),
):
    return activity_repo.get_activity_logs(
        db,
        entity_type=entity_type,
        entity_id=entity_id,
        user_id=user_id,
        action=action,
        skip=skip,
        limit=limit,
    )
