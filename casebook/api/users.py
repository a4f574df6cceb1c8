"""
Users API endpoints.

Self-profile for every signed-in user; role management for admins.
"""
from typing import List
import uuid
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from casebook.db.database import get_db
from casebook.api.deps import get_current_user_context, require_admin
from casebook.db import schemas
from casebook.db.repositories import users as user_repo
from casebook.audit import ActivityAction, log
from casebook.utils.role_permissions import ROLE_ADMIN

router = APIRouter(prefix="/users", tags=["users"])  # normalized prefix


@router.get("/me", response_model=schemas.User)
def read_me(user_context = Depends(get_current_user_context)):
    user, _ctx = user_context
    return user


@router.patch("/me", response_model=schemas.User)
def update_me(
    payload: schemas.UserProfileUpdate,
    db: Session = Depends(get_db),
    user_context = Depends(get_current_user_context),
):
    user, _ctx = user_context
    if payload.display_name is not None:
        user = user_repo.update_display_name(db, user, payload.display_name)
        log(db, action=ActivityAction.UPDATE, entity_type="user", entity_id=user.id, user_id=user.id,
            details={"display_name": user.display_name})
    return user


@router.get("/", response_model=List[schemas.User])
def list_users(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    user_context = Depends(require_admin),
):
    return user_repo.get_users(db, skip=skip, limit=limit)


@router.patch("/{user_id}/role", response_model=schemas.User)
def change_user_role(
    user_id: uuid.UUID,
    payload: schemas.UserRoleUpdate,
    db: Session = Depends(get_db),
    user_context = Depends(require_admin),
):
    admin, _ctx = user_context
    target = user_repo.get_user(db, user_id)
    if not target:
        raise HTTPException(status_code=404, detail="User not found")
    new_role = payload.role.value
    if target.id == admin.id and new_role != ROLE_ADMIN:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Admins cannot demote themselves")
    previous = target.role
    target = user_repo.set_user_role(db, target, new_role)
    log(db, action=ActivityAction.ROLE_CHANGE, entity_type="user", entity_id=target.id, user_id=admin.id,
        details={"email": target.email, "from": previous, "to": new_role})
    return target
