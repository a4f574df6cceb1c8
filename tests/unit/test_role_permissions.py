import pytest
from casebook.utils.role_permissions import (
    get_role_permissions,
    role_allows_write,
    role_allows_delete,
    role_allows_manage,
    ROLE_PERMISSIONS,
)


class TestRolePermissions:
    """Unit tests for the staff role capability map."""

    def test_get_role_permissions_admin(self):
        permissions = get_role_permissions("admin")
        assert all(permissions.values())

    def test_get_role_permissions_investigator(self):
        permissions = get_role_permissions("investigator")
        assert permissions["can_read"] is True
        assert permissions["can_write"] is True
        assert permissions["can_delete"] is False
        assert permissions["can_manage_users"] is False

    def test_get_role_permissions_viewer(self):
        permissions = get_role_permissions("viewer")
        assert permissions["can_read"] is True
        assert permissions["can_write"] is False

    def test_get_role_permissions_invalid_role(self):
        with pytest.raises(ValueError, match="Unknown role: owner"):
            get_role_permissions("owner")

    def test_get_role_permissions_returns_copy(self):
        permissions = get_role_permissions("viewer")
        permissions["can_write"] = True
        assert ROLE_PERMISSIONS["viewer"]["can_write"] is False

    @pytest.mark.parametrize(
        "role,write,delete,manage",
        [
            ("admin", True, True, True),
            ("investigator", True, False, False),
            ("viewer", False, False, False),
            ("unknown", False, False, False),
        ],
    )
    def test_role_predicates(self, role, write, delete, manage):
        assert role_allows_write(role) is write
        assert role_allows_delete(role) is delete
        assert role_allows_manage(role) is manage
