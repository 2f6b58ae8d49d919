from rest_framework.views import APIView

from .api import open_storefront, storefront_response
from .exceptions import BlockingError, NoticeError, StorefrontError
from .permissions import AdminGatePermission
from .utilities import _as_bool, _parse_payload, _s, error_response

# Regions the admin panel shows as soon as it opens.
ADMIN_PANEL_REGIONS = ("slides_admin", "products_admin", "messages_admin", "admin_category_dropdown")


class AdminLoginView(APIView):
    """
    POST /api/admin/login/  {password, remember}
    Verifies the secret and returns the admin panel projections. Nothing is
    kept server-side: later gated calls send the secret in X-Admin-Password.
    """
    authentication_classes = ()
    permission_classes = ()

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            password = data.get("password")
            if not sf.gate.verify(password if isinstance(password, str) else None,
                                  remember=_as_bool(data.get("remember"))):
                raise BlockingError("Incorrect password (demo).")
            sf.notify("Admin unlocked")
            sf.sync.render(*ADMIN_PANEL_REGIONS)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"unlocked": True, "last_login": sf.gate.last_login()})


class AdminLogoutView(APIView):
    authentication_classes = ()
    permission_classes = ()

    def post(self, request):
        sf = open_storefront(request)
        sf.gate.lock()
        sf.notify("Admin logged out (demo)")
        return storefront_response(sf, {"unlocked": False})


class ChangeAdminPasswordView(APIView):
    permission_classes = [AdminGatePermission]

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            new_password = _s(data.get("new_password"))
            if not new_password:
                raise NoticeError("Enter a new password")
            sf.gate.change(new_password)
            sf.notify("Admin password updated (stored locally).")
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf)


class ResetAdminPasswordView(APIView):
    permission_classes = [AdminGatePermission]

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            sf.require_confirmation("Reset admin password to default?")
            sf.gate.reset()
            sf.notify("Admin password reset to default.")
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf)
