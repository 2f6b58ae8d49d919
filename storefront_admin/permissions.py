# storefront_admin/permissions.py
from rest_framework.permissions import BasePermission

from .admin_gate import AdminGate
from .persistence import DatabaseSlots

ADMIN_HEADER = "X-Admin-Password"


class AdminGatePermission(BasePermission):
    """Every gated request carries the admin secret; there is no session."""

    message = "Admin password required"

    def has_permission(self, request, view):
        gate = AdminGate(DatabaseSlots())
        gate.ensure()
        return gate.verify(request.headers.get(ADMIN_HEADER))
