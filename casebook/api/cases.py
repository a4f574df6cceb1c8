"""
Case API endpoints.

Creation and editing take the whole case form (victim, suspects, evidence
and checklist) and hand it to the case workflow service; the detail view
is the assembled case.
"""
from typing import List, Optional
import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from casebook.db.database import get_db
from casebook.db import schemas
from casebook.db.repositories import cases as case_repo
from casebook.api.deps import get_current_user_context, require_write, require_delete
from casebook.audit import ActivityAction, log
from casebook.services import (
    CaseNumberConflictError,
    CaseNumberExhaustedError,
    RelatedRecordNotFoundError,
    UnknownTemplateError,
    assemble_case,
    create_case as create_case_workflow,
    generate_unique_case_number,
    list_templates,
    update_case as update_case_workflow,
)
from casebook.utils.choices import CaseStatusEnum, CaseTypeEnum

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cases", tags=["cases"])


def _get_case_or_404(db: Session, case_id: uuid.UUID):
    db_case = case_repo.get_case(db, case_id)
    if not db_case:
        raise HTTPException(status_code=404, detail="Case not found")
    return db_case


def _workflow_error(e: Exception) -> HTTPException:
    if isinstance(e, (CaseNumberConflictError, CaseNumberExhaustedError)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if isinstance(e, RelatedRecordNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, UnknownTemplateError):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    logger.warning("Case submission rejected by the database: %s", e)
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Case conflicts with existing records")


@router.get("/", response_model=List[schemas.CaseListItem])
def list_cases(
    status_filter: Optional[CaseStatusEnum] = Query(default=None, alias="status"),
    case_type: Optional[CaseTypeEnum] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    rows = case_repo.get_cases(
        db,
        skip=skip,
        limit=limit,
        status=status_filter.value if status_filter else None,
        case_type=case_type.value if case_type else None,
    )
    return [
        schemas.CaseListItem(**schemas.Case.model_validate(c).model_dump(), victim_name=victim_name)
        for c, victim_name in rows
    ]


@router.get("/new", response_model=schemas.CaseFormDefaults)
def case_form_defaults(
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    try:
        case_number = generate_unique_case_number(db)
    except CaseNumberExhaustedError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return schemas.CaseFormDefaults(case_number=case_number, action_templates=list_templates())


@router.post("/", response_model=schemas.CaseDetail, status_code=status.HTTP_201_CREATED)
def create_case(
    payload: schemas.CaseCreate,
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    user, _ctx = user_context
    try:
        db_case = create_case_workflow(db, payload, created_by=user.id)
    except (
        CaseNumberConflictError,
        CaseNumberExhaustedError,
        RelatedRecordNotFoundError,
        UnknownTemplateError,
        IntegrityError,
    ) as e:
        raise _workflow_error(e)
    detail = assemble_case(db, db_case)
    log(db, action=ActivityAction.CREATE, entity_type="case", entity_id=db_case.id, user_id=user.id,
        details={
            "case_number": db_case.case_number,
            "suspects": len(detail.suspects),
            "evidence": len(detail.evidence),
            "actions": detail.total_actions,
        })
    return detail


@router.get("/{case_id}", response_model=schemas.CaseDetail)
def get_case(
    case_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    return assemble_case(db, _get_case_or_404(db, case_id))


@router.put("/{case_id}", response_model=schemas.CaseDetail)
def update_case(
    case_id: uuid.UUID,
    payload: schemas.CaseUpdate,
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    user, _ctx = user_context
    db_case = _get_case_or_404(db, case_id)
    try:
        db_case = update_case_workflow(db, db_case, payload, user_id=user.id)
    except (RelatedRecordNotFoundError, UnknownTemplateError, IntegrityError) as e:
        raise _workflow_error(e)
    log(db, action=ActivityAction.UPDATE, entity_type="case", entity_id=db_case.id, user_id=user.id,
        details={"case_number": db_case.case_number, "fields": sorted(payload.model_fields_set)})
    return assemble_case(db, db_case)


@router.patch("/{case_id}/status", response_model=schemas.Case)
def change_case_status(
    case_id: uuid.UUID,
    payload: schemas.CaseStatusUpdate,
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    user, _ctx = user_context
    db_case = _get_case_or_404(db, case_id)
    previous = db_case.status
    db_case = case_repo.set_case_status(db, db_case, payload.status.value)
    log(db, action=ActivityAction.STATUS_CHANGE, entity_type="case", entity_id=db_case.id, user_id=user.id,
        details={"from": previous, "to": db_case.status})
    return db_case


@router.delete("/{case_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_case(
    case_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(require_delete),
):
    user, _ctx = user_context
    db_case = _get_case_or_404(db, case_id)
    case_number = db_case.case_number
    try:
        case_repo.delete_case(db, case_id)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    log(db, action=ActivityAction.DELETE, entity_type="case", entity_id=case_id, user_id=user.id,
        details={"case_number": case_number})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
