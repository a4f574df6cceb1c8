"""
Case repository functions.

Read/update/delete for cases. Composite creation (case + victim + suspects
+ evidence + actions) lives in `casebook.services.case_workflow`.
"""
from __future__ import annotations

import uuid
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from casebook.db import models


def create_case(
    db: Session,
    *,
    case_number: str,
    case_type: str,
    incident_date,
    summary: str,
    status: str = "open",
    victim_id: Optional[uuid.UUID] = None,
    assigned_to: Optional[uuid.UUID] = None,
    created_by: Optional[uuid.UUID] = None,
    commit: bool = True,
):
    db_case = models.Case(
        case_number=case_number,
        case_type=case_type,
        incident_date=incident_date,
        summary=summary,
        status=status,
        victim_id=victim_id,
        assigned_to=assigned_to,
        created_by=created_by,
    )
    db.add(db_case)
    if commit:
        db.commit()
        db.refresh(db_case)
    else:
        db.flush()
    return db_case


def get_case(db: Session, case_id: uuid.UUID):
    return db.query(models.Case).filter(models.Case.id == case_id).first()


def case_number_exists(db: Session, case_number: str) -> bool:
    return db.query(models.Case.id).filter(models.Case.case_number == case_number).first() is not None


def get_cases(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    *,
    status: Optional[str] = None,
    case_type: Optional[str] = None,
):
    """List cases newest first as (Case, victim_name) rows."""
    q = (
        db.query(models.Case, models.Victim.name)
        .outerjoin(models.Victim, models.Victim.id == models.Case.victim_id)
    )
    if status:
        q = q.filter(models.Case.status == status)
    if case_type:
        q = q.filter(models.Case.case_type == case_type)
    return q.order_by(models.Case.created_at.desc()).offset(skip).limit(limit).all()


def set_case_status(db: Session, db_case: models.Case, status: str):
    db_case.status = status
    db.commit()
    db.refresh(db_case)
    return db_case


def count_cases_by_status(db: Session) -> dict:
    rows = db.query(models.Case.status, func.count(models.Case.id)).group_by(models.Case.status).all()
    return {status: count for status, count in rows}


def delete_case(db: Session, case_id: uuid.UUID) -> bool:
    """Delete a case with its actions, evidence and suspect links.

    Victims and suspects are independent records and are kept.
    """
    if case_id is None:
        return False
    try:
        db_case = get_case(db, case_id)
        if not db_case:
            return False
        db.query(models.ForensicAction).filter(
            models.ForensicAction.case_id == case_id
        ).delete(synchronize_session=False)
        db.query(models.Evidence).filter(
            models.Evidence.case_id == case_id
        ).delete(synchronize_session=False)
        db.query(models.CaseSuspect).filter(
            models.CaseSuspect.case_id == case_id
        ).delete(synchronize_session=False)
        db.expire(db_case, ["forensic_actions", "evidence", "suspect_links"])
        db.delete(db_case)
        db.commit()
        return True
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to delete case {case_id}: {str(e)}")
