"""
Victim repository functions.

Create/read/update/delete for victims. Deleting a victim detaches it from
any case instead of deleting the case.
"""
from __future__ import annotations

import uuid
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from casebook.db import models, schemas


def create_victim(db: Session, victim: schemas.VictimBase, created_by: Optional[uuid.UUID] = None, *, commit: bool = True):
    data = victim.model_dump(exclude_unset=False)
    if data.get("report_date") is None:
        data.pop("report_date", None)  # column default: today
    db_victim = models.Victim(**data, created_by=created_by)
    db.add(db_victim)
    if commit:
        db.commit()
        db.refresh(db_victim)
    else:
        db.flush()
    return db_victim


def get_victim(db: Session, victim_id: uuid.UUID):
    return db.query(models.Victim).filter(models.Victim.id == victim_id).first()


def get_victims(db: Session, skip: int = 0, limit: int = 100, *, q: Optional[str] = None):
    query = db.query(models.Victim)
    if q:
        query = query.filter(func.lower(models.Victim.name).contains(q.strip().lower(), autoescape=True))
    return query.order_by(models.Victim.created_at.desc()).offset(skip).limit(limit).all()


def count_victims(db: Session) -> int:
    return db.query(func.count(models.Victim.id)).scalar() or 0


def update_victim(db: Session, victim_id: uuid.UUID, victim: schemas.VictimUpdate):
    db_victim = get_victim(db, victim_id)
    if db_victim:
        for key, value in victim.model_dump(exclude_unset=True).items():
            if key == "name" and value is None:
                continue
            if key == "report_date" and value is None:
                continue
            setattr(db_victim, key, value)
        db.commit()
        db.refresh(db_victim)
    return db_victim


def delete_victim(db: Session, victim_id: uuid.UUID) -> bool:
    """Delete a victim and detach it from its cases."""
    if victim_id is None:
        return False
    try:
        db_victim = get_victim(db, victim_id)
        if not db_victim:
            return False
        db.query(models.Case).filter(models.Case.victim_id == victim_id).update(
            {models.Case.victim_id: None}, synchronize_session=False
        )
        db.delete(db_victim)
        db.commit()
        return True
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to delete victim {victim_id}: {str(e)}")
