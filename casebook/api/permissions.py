"""
Permission checks for the current user context.

Key helpers:
- can_write(current_user)
- can_delete(current_user)
- can_manage_users(current_user)
"""
from typing import Optional, Dict, Any
from casebook.utils.role_permissions import (
    role_allows_write as _role_allows_write,
    role_allows_delete as _role_allows_delete,
    role_allows_manage as _role_allows_manage,
)


def _role(current_user: Optional[Dict[str, Any]]) -> Optional[str]:
    if not current_user:
        return None
    return current_user.get("role")


def can_write(current_user: Optional[Dict[str, Any]]) -> bool:
    role = _role(current_user)
    return bool(role) and _role_allows_write(role)


def can_delete(current_user: Optional[Dict[str, Any]]) -> bool:
    role = _role(current_user)
    return bool(role) and _role_allows_delete(role)


def can_manage_users(current_user: Optional[Dict[str, Any]]) -> bool:
    role = _role(current_user)
    return bool(role) and _role_allows_manage(role)
