"""
Role-based permission utilities for dashboard staff.

Each authenticated user carries exactly one application role. This module maps
roles to capabilities so routers can gate screens without hard-coding role
names.
"""

from typing import Dict, FrozenSet
from enum import Enum


# Central role constants to ensure consistency across the codebase
ROLE_ADMIN = "admin"
ROLE_INVESTIGATOR = "investigator"
ROLE_VIEWER = "viewer"
ROLE_PERMISSIONS = {
    ROLE_ADMIN: {
        "can_read": True,
        "can_write": True,
        "can_delete": True,
        "can_manage_users": True,
    },
    ROLE_INVESTIGATOR: {
        "can_read": True,
        "can_write": True,
        "can_delete": False,
        "can_manage_users": False,
    },
    ROLE_VIEWER: {
        "can_read": True,
        "can_write": False,
        "can_delete": False,
        "can_manage_users": False,
    },
}

ALLOWED_ROLES = set(ROLE_PERMISSIONS.keys())

# Derived role groups
WRITE_ROLES: FrozenSet[str] = frozenset({ROLE_ADMIN, ROLE_INVESTIGATOR})
MANAGE_ROLES: FrozenSet[str] = frozenset({ROLE_ADMIN})


class RoleEnum(str, Enum):
    """Enum for application roles used in schemas and validation."""
    admin = ROLE_ADMIN
    investigator = ROLE_INVESTIGATOR
    viewer = ROLE_VIEWER


def get_role_permissions(role: str) -> Dict[str, bool]:
    """
    Get the permissions for a given role.

    Args:
        role: The role name (admin, investigator, viewer)

    Returns:
        Dict with can_read, can_write, can_delete and can_manage_users flags

    Raises:
        ValueError: If role is not recognized
    """
    if role not in ROLE_PERMISSIONS:
        raise ValueError(f"Unknown role: {role}. Allowed roles: {list(ROLE_PERMISSIONS.keys())}")

    return ROLE_PERMISSIONS[role].copy()


def role_allows_write(role: str) -> bool:
    """Return True if the role may create and edit records."""
    return role in WRITE_ROLES


def role_allows_delete(role: str) -> bool:
    """Return True if the role may delete records."""
    return bool(ROLE_PERMISSIONS.get(role, {}).get("can_delete"))


def role_allows_manage(role: str) -> bool:
    """Return True if the role may manage users and read the activity log."""
    return role in MANAGE_ROLES
