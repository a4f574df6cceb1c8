"""
Evidence API endpoints.

Evidence is registered against a case (``/cases/{case_id}/evidence``) and
browsed, edited or removed through ``/evidence``.
"""
from typing import List, Optional
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from casebook.db.database import get_db
from casebook.db import schemas
from casebook.db.repositories import cases as case_repo, evidence as evidence_repo
from casebook.api.deps import get_current_user_context, require_write, require_delete
from casebook.audit import ActivityAction, log
from casebook.services import add_evidence
from casebook.utils.choices import EvidenceTypeEnum

router = APIRouter(prefix="/evidence", tags=["evidence"])
case_evidence_router = APIRouter(prefix="/cases/{case_id}/evidence", tags=["evidence"])


@router.get("/", response_model=List[schemas.EvidenceListItem])
def list_evidence(
    case_id: Optional[uuid.UUID] = None,
    evidence_type: Optional[EvidenceTypeEnum] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    rows = evidence_repo.get_evidence_list(
        db,
        skip=skip,
        limit=limit,
        case_id=case_id,
        evidence_type=evidence_type.value if evidence_type else None,
    )
    return [
        schemas.EvidenceListItem(**schemas.Evidence.model_validate(e).model_dump(), case_number=case_number)
        for e, case_number in rows
    ]


@router.get("/{evidence_id}", response_model=schemas.Evidence)
def get_evidence(
    evidence_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    db_evidence = evidence_repo.get_evidence(db, evidence_id)
    if not db_evidence:
        raise HTTPException(status_code=404, detail="Evidence not found")
    return db_evidence


@router.put("/{evidence_id}", response_model=schemas.Evidence)
def update_evidence(
    evidence_id: uuid.UUID,
    payload: schemas.EvidenceUpdate,
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    user, _ctx = user_context
    db_evidence = evidence_repo.update_evidence(db, evidence_id, payload)
    if not db_evidence:
        raise HTTPException(status_code=404, detail="Evidence not found")
    log(db, action=ActivityAction.UPDATE, entity_type="evidence", entity_id=db_evidence.id, user_id=user.id,
        details={"evidence_number": db_evidence.evidence_number, "fields": sorted(payload.model_fields_set)})
    return db_evidence


@router.delete("/{evidence_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_evidence(
    evidence_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(require_delete),
):
    user, _ctx = user_context
    try:
        deleted = evidence_repo.delete_evidence(db, evidence_id)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Evidence not found")
    log(db, action=ActivityAction.DELETE, entity_type="evidence", entity_id=evidence_id, user_id=user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@case_evidence_router.get("", response_model=List[schemas.Evidence])
def list_case_evidence(
    case_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    if not case_repo.get_case(db, case_id):
        raise HTTPException(status_code=404, detail="Case not found")
    return evidence_repo.get_case_evidence(db, case_id)


@case_evidence_router.post("", response_model=schemas.Evidence, status_code=status.HTTP_201_CREATED)
def create_case_evidence(
    case_id: uuid.UUID,
    payload: schemas.EvidenceCreate,
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    user, _ctx = user_context
    db_case = case_repo.get_case(db, case_id)
    if not db_case:
        raise HTTPException(status_code=404, detail="Case not found")
    db_evidence = add_evidence(db, db_case, payload, collected_by=user.id)
    log(db, action=ActivityAction.CREATE, entity_type="evidence", entity_id=db_evidence.id, user_id=user.id,
        details={"evidence_number": db_evidence.evidence_number, "case_id": str(case_id)})
    return db_evidence
