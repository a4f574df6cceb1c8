"""
Authentication helpers and identity resolution.

Parses proxy headers, normalizes emails, and upserts users with an initial
role taken from environment configuration.
"""
import logging
import os
from typing import Optional, Tuple
from sqlalchemy.orm import Session

from casebook.db import models
from casebook.utils.role_permissions import ROLE_ADMIN, ROLE_INVESTIGATOR, ROLE_VIEWER, ALLOWED_ROLES
from casebook.utils.runtime import env_list

logger = logging.getLogger("casebook.auth")


def _normalize_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    return email.strip().lower() or None


def _admin_emails() -> set:
    return env_list("ADMIN_EMAILS")


def _investigator_emails() -> set:
    return env_list("INVESTIGATOR_EMAILS")


def _default_role() -> str:
    role = os.getenv("DEFAULT_USER_ROLE", ROLE_VIEWER).strip().lower()
    if role not in ALLOWED_ROLES:
        logger.warning("Ignoring invalid DEFAULT_USER_ROLE=%r", role)
        return ROLE_VIEWER
    return role


def initial_role_for(email: str) -> str:
    if email in _admin_emails():
        return ROLE_ADMIN
    if email in _investigator_emails():
        return ROLE_INVESTIGATOR
    return _default_role()


def resolve_identity_from_headers(
    x_auth_request_user: Optional[str],
    x_auth_request_email: Optional[str],
    x_forwarded_user: Optional[str],
    x_forwarded_email: Optional[str],
) -> Tuple[Optional[str], Optional[str]]:
    user = x_auth_request_user or x_forwarded_user
    email = _normalize_email(x_auth_request_email or x_forwarded_email)
    return user, email


def get_or_create_user(db: Session, email: str, display_name: Optional[str] = None, *, role: Optional[str] = None) -> models.User:
    user = db.query(models.User).filter(models.User.email == email).first()
    if not user:
        user = models.User(
            email=email,
            display_name=display_name or email.split("@")[0],
            role=role or initial_role_for(email),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Registered user %s with role %s", email, user.role)
        return user

    # Existing users might predate a new ADMIN_EMAILS value; promote them when necessary.
    if email in _admin_emails() and user.role != ROLE_ADMIN:
        user.role = ROLE_ADMIN
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(user)
        logger.info("Promoted %s to admin from ADMIN_EMAILS", email)
    return user
