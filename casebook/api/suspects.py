"""
Suspect API endpoints.
"""
from typing import List, Optional
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from casebook.db.database import get_db
from casebook.db import schemas
from casebook.db.repositories import suspects as suspect_repo
from casebook.api.deps import get_current_user_context, require_write, require_delete
from casebook.audit import ActivityAction, log
from casebook.utils.choices import SuspectStatusEnum

router = APIRouter(prefix="/suspects", tags=["suspects"])


@router.get("/", response_model=List[schemas.Suspect])
def list_suspects(
    q: Optional[str] = None,
    status_filter: Optional[SuspectStatusEnum] = Query(default=None, alias="status"),
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    return suspect_repo.get_suspects(
        db,
        skip=skip,
        limit=limit,
        q=q,
        status=status_filter.value if status_filter else None,
    )


@router.post("/", response_model=schemas.Suspect, status_code=status.HTTP_201_CREATED)
def create_suspect(
    payload: schemas.SuspectCreate,
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    user, _ctx = user_context
    suspect = suspect_repo.create_suspect(db, payload, created_by=user.id)
    log(db, action=ActivityAction.CREATE, entity_type="suspect", entity_id=suspect.id,
        user_id=user.id, details={"name": suspect.name})
    return suspect


@router.get("/{suspect_id}", response_model=schemas.Suspect)
def get_suspect(
    suspect_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    suspect = suspect_repo.get_suspect(db, suspect_id)
    if not suspect:
        raise HTTPException(status_code=404, detail="Suspect not found")
    return suspect


@router.put("/{suspect_id}", response_model=schemas.Suspect)
def update_suspect(
    suspect_id: uuid.UUID,
    payload: schemas.SuspectUpdate,
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    user, _ctx = user_context
    suspect = suspect_repo.update_suspect(db, suspect_id, payload)
    if not suspect:
        raise HTTPException(status_code=404, detail="Suspect not found")
    log(db, action=ActivityAction.UPDATE, entity_type="suspect", entity_id=suspect.id,
        user_id=user.id, details={"fields": sorted(payload.model_fields_set)})
    return suspect


@router.delete("/{suspect_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_suspect(
    suspect_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(require_delete),
):
    user, _ctx = user_context
    try:
        deleted = suspect_repo.delete_suspect(db, suspect_id)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Suspect not found")
    log(db, action=ActivityAction.DELETE, entity_type="suspect", entity_id=suspect_id, user_id=user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
