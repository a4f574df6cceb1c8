"""
Forensic action repository functions.

Checklist items per case, with completion toggling.
"""
from __future__ import annotations

import uuid
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from casebook.db import models
from casebook.utils.choices import ACTION_STATUS_COMPLETED, ACTION_STATUS_PENDING


def create_action(
    db: Session,
    *,
    case_id: uuid.UUID,
    action_type: str,
    description: str,
    template_id: Optional[str] = None,
    is_completed: bool = False,
    completed_at=None,
    performed_by: Optional[uuid.UUID] = None,
    commit: bool = True,
):
    db_action = models.ForensicAction(
        case_id=case_id,
        template_id=template_id,
        action_type=action_type,
        description=description,
        is_completed=is_completed,
        status=ACTION_STATUS_COMPLETED if is_completed else ACTION_STATUS_PENDING,
        completed_at=completed_at if is_completed else None,
        performed_by=performed_by,
    )
    db.add(db_action)
    if commit:
        db.commit()
        db.refresh(db_action)
    else:
        db.flush()
    return db_action


def get_action(db: Session, action_id: uuid.UUID):
    return db.query(models.ForensicAction).filter(models.ForensicAction.id == action_id).first()


def get_case_actions(db: Session, case_id: uuid.UUID):
    return (
        db.query(models.ForensicAction)
        .filter(models.ForensicAction.case_id == case_id)
        .order_by(models.ForensicAction.created_at.asc())
        .all()
    )


def get_actions(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    *,
    case_id: Optional[uuid.UUID] = None,
    is_completed: Optional[bool] = None,
):
    """List actions newest first as (ForensicAction, case_number) rows."""
    q = (
        db.query(models.ForensicAction, models.Case.case_number)
        .join(models.Case, models.Case.id == models.ForensicAction.case_id)
    )
    if case_id:
        q = q.filter(models.ForensicAction.case_id == case_id)
    if is_completed is not None:
        q = q.filter(models.ForensicAction.is_completed == is_completed)
    return q.order_by(models.ForensicAction.created_at.desc()).offset(skip).limit(limit).all()


def count_actions(db: Session) -> tuple[int, int]:
    """Return (total, completed) action counts."""
    total = db.query(func.count(models.ForensicAction.id)).scalar() or 0
    completed = db.query(func.count(models.ForensicAction.id)).filter(
        models.ForensicAction.is_completed.is_(True)
    ).scalar() or 0
    return total, completed


def set_action_completion(db: Session, db_action: models.ForensicAction, is_completed: bool, performed_by: Optional[uuid.UUID] = None):
    db_action.is_completed = is_completed
    if is_completed:
        db_action.status = ACTION_STATUS_COMPLETED
        db_action.completed_at = models.now_utc()
        db_action.performed_by = performed_by
    else:
        db_action.status = ACTION_STATUS_PENDING
        db_action.completed_at = None
    db.commit()
    db.refresh(db_action)
    return db_action


def delete_action(db: Session, action_id: uuid.UUID, *, commit: bool = True) -> bool:
    if action_id is None:
        return False
    try:
        db_action = get_action(db, action_id)
        if not db_action:
            return False
        db.delete(db_action)
        if commit:
            db.commit()
        else:
            db.flush()
        return True
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to delete forensic action {action_id}: {str(e)}")
