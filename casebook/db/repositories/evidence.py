"""
Evidence repository functions.

Evidence rows always belong to one case; list queries carry the owning
case number for the evidence screen.
"""
from __future__ import annotations

import uuid
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from casebook.db import models, schemas


def create_evidence(
    db: Session,
    *,
    case_id: uuid.UUID,
    evidence_number: str,
    evidence_type: str,
    fields: schemas.EvidenceFields,
    collected_by: Optional[uuid.UUID] = None,
    commit: bool = True,
):
    data = {k: getattr(fields, k) for k in schemas.EvidenceFields.model_fields}
    if data.get("collection_date") is None:
        data.pop("collection_date")  # column default: now
    db_evidence = models.Evidence(
        **data,
        case_id=case_id,
        evidence_number=evidence_number,
        evidence_type=evidence_type,
        collected_by=collected_by,
    )
    db.add(db_evidence)
    if commit:
        db.commit()
        db.refresh(db_evidence)
    else:
        db.flush()
    return db_evidence


def get_evidence(db: Session, evidence_id: uuid.UUID):
    return db.query(models.Evidence).filter(models.Evidence.id == evidence_id).first()


def evidence_number_exists(db: Session, evidence_number: str) -> bool:
    return db.query(models.Evidence.id).filter(
        models.Evidence.evidence_number == evidence_number
    ).first() is not None


def count_case_evidence(db: Session, case_id: uuid.UUID) -> int:
    return db.query(func.count(models.Evidence.id)).filter(models.Evidence.case_id == case_id).scalar() or 0


def count_evidence(db: Session) -> int:
    return db.query(func.count(models.Evidence.id)).scalar() or 0


def get_case_evidence(db: Session, case_id: uuid.UUID):
    return (
        db.query(models.Evidence)
        .filter(models.Evidence.case_id == case_id)
        .order_by(models.Evidence.collection_date.asc(), models.Evidence.evidence_number.asc())
        .all()
    )


def get_evidence_list(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    *,
    case_id: Optional[uuid.UUID] = None,
    evidence_type: Optional[str] = None,
):
    """List evidence newest first as (Evidence, case_number) rows."""
    q = (
        db.query(models.Evidence, models.Case.case_number)
        .join(models.Case, models.Case.id == models.Evidence.case_id)
    )
    if case_id:
        q = q.filter(models.Evidence.case_id == case_id)
    if evidence_type:
        q = q.filter(models.Evidence.evidence_type == evidence_type)
    return q.order_by(models.Evidence.created_at.desc()).offset(skip).limit(limit).all()


def update_evidence(db: Session, evidence_id: uuid.UUID, evidence: schemas.EvidenceUpdate, *, commit: bool = True):
    db_evidence = get_evidence(db, evidence_id)
    if db_evidence:
        for key, value in evidence.model_dump(exclude_unset=True).items():
            if key in ("evidence_type", "collection_date") and value is None:
                continue
            setattr(db_evidence, key, getattr(value, "value", value))
        if commit:
            db.commit()
            db.refresh(db_evidence)
        else:
            db.flush()
    return db_evidence


def delete_evidence(db: Session, evidence_id: uuid.UUID, *, commit: bool = True) -> bool:
    if evidence_id is None:
        return False
    try:
        db_evidence = get_evidence(db, evidence_id)
        if not db_evidence:
            return False
        db.delete(db_evidence)
        if commit:
            db.commit()
        else:
            db.flush()
        return True
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to delete evidence {evidence_id}: {str(e)}")
