"""
Suspect repository functions.

CRUD for suspects plus the case_suspects join table.
"""
from __future__ import annotations

import uuid
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from casebook.db import models, schemas


def create_suspect(db: Session, suspect: schemas.SuspectBase, created_by: Optional[uuid.UUID] = None, *, commit: bool = True):
    data = suspect.model_dump()
    data["status"] = getattr(suspect.status, "value", suspect.status)
    db_suspect = models.Suspect(**data, created_by=created_by)
    db.add(db_suspect)
    if commit:
        db.commit()
        db.refresh(db_suspect)
    else:
        db.flush()
    return db_suspect


def get_suspect(db: Session, suspect_id: uuid.UUID):
    return db.query(models.Suspect).filter(models.Suspect.id == suspect_id).first()


def get_suspects(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    *,
    q: Optional[str] = None,
    status: Optional[str] = None,
):
    query = db.query(models.Suspect)
    if q:
        query = query.filter(func.lower(models.Suspect.name).contains(q.strip().lower(), autoescape=True))
    if status:
        query = query.filter(models.Suspect.status == status)
    return query.order_by(models.Suspect.created_at.desc()).offset(skip).limit(limit).all()


def count_suspects(db: Session) -> int:
    return db.query(func.count(models.Suspect.id)).scalar() or 0


def update_suspect(db: Session, suspect_id: uuid.UUID, suspect: schemas.SuspectUpdate):
    db_suspect = get_suspect(db, suspect_id)
    if db_suspect:
        for key, value in suspect.model_dump(exclude_unset=True).items():
            if key in ("name", "status") and value is None:
                continue
            setattr(db_suspect, key, getattr(value, "value", value))
        db.commit()
        db.refresh(db_suspect)
    return db_suspect


def delete_suspect(db: Session, suspect_id: uuid.UUID) -> bool:
    """Delete a suspect and every case link pointing at it."""
    if suspect_id is None:
        return False
    try:
        db_suspect = get_suspect(db, suspect_id)
        if not db_suspect:
            return False
        db.query(models.CaseSuspect).filter(
            models.CaseSuspect.suspect_id == suspect_id
        ).delete(synchronize_session=False)
        db.expire(db_suspect, ["case_links"])
        db.delete(db_suspect)
        db.commit()
        return True
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to delete suspect {suspect_id}: {str(e)}")


# Case links
def get_case_suspect_rows(db: Session, case_id: uuid.UUID):
    """Return (CaseSuspect, Suspect) rows for a case, in link order."""
    return (
        db.query(models.CaseSuspect, models.Suspect)
        .join(models.Suspect, models.Suspect.id == models.CaseSuspect.suspect_id)
        .filter(models.CaseSuspect.case_id == case_id)
        .order_by(models.CaseSuspect.created_at.asc(), models.Suspect.name.asc())
        .all()
    )


def link_suspect(
    db: Session,
    *,
    case_id: uuid.UUID,
    suspect_id: uuid.UUID,
    involvement_level: str = "unknown",
    relationship_to_case: Optional[str] = None,
):
    """Add a case link without committing; the caller owns the transaction."""
    link = models.CaseSuspect(
        case_id=case_id,
        suspect_id=suspect_id,
        involvement_level=involvement_level,
        relationship_to_case=relationship_to_case,
    )
    db.add(link)
    db.flush()
    return link


def unlink_all_suspects(db: Session, case_id: uuid.UUID) -> int:
    """Remove every suspect link of a case without committing."""
    links = db.query(models.CaseSuspect).filter(models.CaseSuspect.case_id == case_id).all()
    for link in links:
        db.delete(link)
    db.flush()
    return len(links)
