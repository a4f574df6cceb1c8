"""
Forensic action API endpoints.

Checklist items are added per case from the fixed template set or as
custom items, then toggled to completion.
"""
from typing import List, Optional
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from casebook.db.database import get_db
from casebook.db import schemas
from casebook.db.repositories import cases as case_repo, forensic_actions as action_repo
from casebook.api.deps import get_current_user_context, require_write
from casebook.audit import ActivityAction, log
from casebook.services import UnknownTemplateError, list_templates, resolve_action
from casebook.services.action_templates import action_key

router = APIRouter(prefix="/forensic-actions", tags=["forensic-actions"])
case_actions_router = APIRouter(prefix="/cases/{case_id}/actions", tags=["forensic-actions"])


@router.get("/templates", response_model=List[schemas.ActionTemplate])
def get_action_templates(user_context = Depends(get_current_user_context)):
    return list_templates()


@router.get("/", response_model=List[schemas.ForensicActionListItem])
def list_actions(
    case_id: Optional[uuid.UUID] = None,
    is_completed: Optional[bool] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    rows = action_repo.get_actions(db, skip=skip, limit=limit, case_id=case_id, is_completed=is_completed)
    return [
        schemas.ForensicActionListItem(**schemas.ForensicAction.model_validate(a).model_dump(), case_number=case_number)
        for a, case_number in rows
    ]


@router.get("/{action_id}", response_model=schemas.ForensicAction)
def get_action(
    action_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    db_action = action_repo.get_action(db, action_id)
    if not db_action:
        raise HTTPException(status_code=404, detail="Forensic action not found")
    return db_action


@router.patch("/{action_id}", response_model=schemas.ForensicAction)
def toggle_action(
    action_id: uuid.UUID,
    payload: schemas.ForensicActionToggle,
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    user, _ctx = user_context
    db_action = action_repo.get_action(db, action_id)
    if not db_action:
        raise HTTPException(status_code=404, detail="Forensic action not found")
    db_action = action_repo.set_action_completion(db, db_action, payload.is_completed, performed_by=user.id)
    log(
        db,
        action=ActivityAction.ACTION_COMPLETE if payload.is_completed else ActivityAction.ACTION_REOPEN,
        entity_type="forensic_action",
        entity_id=db_action.id,
        user_id=user.id,
        details={"case_id": str(db_action.case_id), "action_type": db_action.action_type},
    )
    return db_action


@router.delete("/{action_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_action(
    action_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    user, _ctx = user_context
    try:
        deleted = action_repo.delete_action(db, action_id)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Forensic action not found")
    log(db, action=ActivityAction.DELETE, entity_type="forensic_action", entity_id=action_id, user_id=user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@case_actions_router.get("", response_model=List[schemas.ForensicAction])
def list_case_actions(
    case_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    if not case_repo.get_case(db, case_id):
        raise HTTPException(status_code=404, detail="Case not found")
    return action_repo.get_case_actions(db, case_id)


@case_actions_router.post("", response_model=schemas.ForensicAction, status_code=status.HTTP_201_CREATED)
def add_case_action(
    case_id: uuid.UUID,
    payload: schemas.ForensicActionCreate,
    db: Session = Depends(get_db),
    user_context = Depends(require_write),
):
    user, _ctx = user_context
    if not case_repo.get_case(db, case_id):
        raise HTTPException(status_code=404, detail="Case not found")
    try:
        template_id, action_type, description = resolve_action(payload)
    except UnknownTemplateError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    key = action_key(template_id, action_type)
    if any(action_key(a.template_id, a.action_type) == key for a in action_repo.get_case_actions(db, case_id)):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Action already on this case")
    db_action = action_repo.create_action(
        db,
        case_id=case_id,
        template_id=template_id,
        action_type=action_type,
        description=description,
    )
    log(db, action=ActivityAction.CREATE, entity_type="forensic_action", entity_id=db_action.id, user_id=user.id,
        details={"case_id": str(case_id), "action_type": action_type, "template_id": template_id})
    return db_action
