"""
Activity log repository functions.

Implements create and query functions for the activity log.
"""
from __future__ import annotations

import uuid
from typing import Optional
from sqlalchemy.orm import Session

from casebook.db import schemas, models


def create_activity_log(db: Session, entry: schemas.ActivityLogCreate, user_id: Optional[uuid.UUID] = None):
    data = entry.model_dump()
    details_payload = data.pop('details', None)
    db_entry = models.ActivityLog(
        **data,
        user_id=user_id,
        details_json=details_payload,
    )
    db.add(db_entry)
    db.commit()
    db.refresh(db_entry)
    return db_entry


def get_activity_logs(
    db: Session,
    *,
    entity_type: Optional[str] = None,
    entity_id: Optional[uuid.UUID] = None,
    user_id: Optional[uuid.UUID] = None,
    action: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
):
    query = db.query(models.ActivityLog)
    if entity_type:
        query = query.filter(models.ActivityLog.entity_type == entity_type)
    if entity_id:
        query = query.filter(models.ActivityLog.entity_id == entity_id)
    if user_id:
        query = query.filter(models.ActivityLog.user_id == user_id)
    if action:
        query = query.filter(models.ActivityLog.action == action)
    return query.order_by(models.ActivityLog.created_at.desc()).offset(skip).limit(limit).all()
