"""
Victim API endpoints.

List/detail are open to every signed-in role; changes need investigator or
admin, deletion needs admin.
"""
from typing import List, Optional
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from casebook.db.database import get_db
from casebook.db import schemas
from casebook.db.repositories import victims as victim_repo
from casebook.api.deps import get_current_user_context, require_write, require_delete
from casebook.audit import ActivityAction, log

router = APIRouter(prefix="/victims", tags=["victims"])


@router.get("/", response_model=List[schemas.Victim])
def list_victims(
    q: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    return victim_repo.get_victims(db, skip=skip, limit=limit, q=q)


@router.post("/", response_model=schemas.Victim, status_code=status.HTTP_201_CREATED)
def create_victim(
    payload: schemas.VictimCreate,
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    user, _ctx = user_context
    victim = victim_repo.create_victim(db, payload, created_by=user.id)
    log(db, action=ActivityAction.CREATE, entity_type="victim", entity_id=victim.id,
        user_id=user.id, details={"name": victim.name})
    return victim


@router.get("/{victim_id}", response_model=schemas.Victim)
def get_victim(
    victim_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    victim = victim_repo.get_victim(db, victim_id)
    if not victim:
        raise HTTPException(status_code=404, detail="Victim not found")
    return victim


@router.put("/{victim_id}", response_model=schemas.Victim)
def update_victim(
    victim_id: uuid.UUID,
    payload: schemas.VictimUpdate,
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    user, _ctx = user_context
    victim = victim_repo.update_victim(db, victim_id, payload)
    if not victim:
        raise HTTPException(status_code=404, detail="Victim not found")
    log(db, action=ActivityAction.UPDATE, entity_type="victim", entity_id=victim.id,
        user_id=user.id, details={"fields": sorted(payload.model_fields_set)})
    return victim


@router.delete("/{victim_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_victim(
    victim_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(require_delete),
):
    user, _ctx = user_context
    try:
        deleted = victim_repo.delete_victim(db, victim_id)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Victim not found")
    log(db, action=ActivityAction.DELETE, entity_type="victim", entity_id=victim_id, user_id=user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
