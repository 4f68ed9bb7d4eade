# ct_core/common/permissions.py

from __future__ import annotations

from rest_framework.permissions import BasePermission

# Django auth Group names
ROLE_ADMIN = "ADMIN"
ROLE_TESTER = "TESTER"
ROLE_DOCTOR = "DOCTOR"
ROLE_USER = "USER"

STAFF_ROLES = {ROLE_ADMIN, ROLE_TESTER, ROLE_DOCTOR}
ALL_ROLES = STAFF_ROLES | {ROLE_USER}


def _user_roles(user) -> set[str]:
    """
    Superusers are ADMIN. Everyone else gets their group names plus an
    optional `user.role`; a user with neither is a plain requester (USER).
    """
    if not user or not getattr(user, "is_authenticated", False):
        return set()
    if getattr(user, "is_superuser", False):
        return {ROLE_ADMIN}

    roles = set(user.groups.values_list("name", flat=True)) if hasattr(user, "groups") else set()
    if getattr(user, "role", None):
        roles.add(str(user.role))
    return roles or {ROLE_USER}


class BaseRolePermission(BasePermission):
    """
    ViewSet permission keyed on `view.action`.

    Subclasses list the roles allowed per action. ADMIN passes everything;
    actions missing from the map are denied.
    """
    message = "You do not have permission to perform this action."

    allowed_roles_per_action: dict[str, set[str]] = {}

    def has_permission(self, request, view) -> bool:
        roles = _user_roles(request.user)
        if not roles:
            return False
        if ROLE_ADMIN in roles:
            return True
        allowed = self.allowed_roles_per_action.get(getattr(view, "action", None))
        return bool(allowed and roles & allowed)

    def has_object_permission(self, request, view, obj) -> bool:
        return self.has_permission(request, view)


class TestRequestPermission(BaseRolePermission):
    """
    Requesters see their own requests; staff may read any request.
    """
    allowed_roles_per_action = {
        "list": ALL_ROLES,
        "retrieve": ALL_ROLES,
        "create": ALL_ROLES,
        "flow": ALL_ROLES,
    }

    def has_object_permission(self, request, view, obj) -> bool:
        if not self.has_permission(request, view):
            return False
        if _user_roles(request.user) & STAFF_ROLES:
            return True
        return obj.created_by_id == getattr(request.user, "id", None)


class LabPermission(BaseRolePermission):
    """Lab testers pick up and complete lab tests."""
    allowed_roles_per_action = {
        "list": {ROLE_ADMIN, ROLE_TESTER},
        "to_be_tested": {ROLE_ADMIN, ROLE_TESTER},
        "assign": {ROLE_ADMIN, ROLE_TESTER},
        "update_result": {ROLE_ADMIN, ROLE_TESTER},
    }


class ConsultationPermission(BaseRolePermission):
    """Doctors pick up tested requests and close them."""
    allowed_roles_per_action = {
        "list": {ROLE_ADMIN, ROLE_DOCTOR},
        "in_queue": {ROLE_ADMIN, ROLE_DOCTOR},
        "assign": {ROLE_ADMIN, ROLE_DOCTOR},
        "update_consultation": {ROLE_ADMIN, ROLE_DOCTOR},
    }
