"""
API dependency helpers.

Provides the dependency-resolved user context and role guards for routes.
"""
from typing import Optional, Tuple, Dict, Any

from fastapi import Header, HTTPException, status, Depends
from sqlalchemy.orm import Session

from casebook.db.database import get_db
from casebook.api.auth import resolve_identity_from_headers, get_or_create_user
from casebook.api.permissions import can_write, can_delete, can_manage_users
from casebook.utils.role_permissions import ROLE_ADMIN, get_role_permissions
from casebook.utils.runtime import dev_mode_active, DEV_USER_EMAIL, DEV_USER_NAME

# Contract:
# Returns (sqlalchemy User model, current_user_context_dict)
# Raises 401 if identity cannot be resolved.

def get_current_user_context(
    db: Session = Depends(get_db),
    x_auth_request_user: Optional[str] = Header(default=None),
    x_auth_request_email: Optional[str] = Header(default=None),
    x_forwarded_user: Optional[str] = Header(default=None),
    x_forwarded_email: Optional[str] = Header(default=None),
) -> Tuple[Any, Dict[str, Any]]:
    if dev_mode_active():
        # Local development impersonates a fixed admin user
        user = get_or_create_user(db, email=DEV_USER_EMAIL, display_name=DEV_USER_NAME, role=ROLE_ADMIN)
    else:
        name, email = resolve_identity_from_headers(
            x_auth_request_user=x_auth_request_user,
            x_auth_request_email=x_auth_request_email,
            x_forwarded_user=x_forwarded_user,
            x_forwarded_email=x_forwarded_email,
        )
        if not email:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
        user = get_or_create_user(db, email=email, display_name=name)

    current_user = {
        "id": user.id,
        "email": user.email,
        "display_name": user.display_name,
        "role": user.role,
        "permissions": get_role_permissions(user.role),
    }
    return user, current_user


def require_write(user_context=Depends(get_current_user_context)):
    """Allow investigators and admins to create and edit records."""
    _user, current_user = user_context
    if not can_write(current_user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Investigator or admin role required")
    return user_context


def require_delete(user_context=Depends(get_current_user_context)):
    _user, current_user = user_context
    if not can_delete(current_user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return user_context


def require_admin(user_context=Depends(get_current_user_context)):
    _user, current_user = user_context
    if not can_manage_users(current_user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return user_context
