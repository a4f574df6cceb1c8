"""
User repository functions.

Lookup and role management for dashboard staff. Upsert-on-login lives in
`casebook.api.auth`.
"""
from __future__ import annotations

import uuid
from sqlalchemy.orm import Session

from casebook.db import models


def get_user(db: Session, user_id: uuid.UUID):
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_users(db: Session, skip: int = 0, limit: int = 100):
    return db.query(models.User).order_by(models.User.email.asc()).offset(skip).limit(limit).all()


def set_user_role(db: Session, user: models.User, role: str):
    user.role = role
    db.commit()
    db.refresh(user)
    return user


def update_display_name(db: Session, user: models.User, display_name: str):
    user.display_name = display_name
    db.commit()
    db.refresh(user)
    return user
