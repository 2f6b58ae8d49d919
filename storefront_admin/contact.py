# ---- CONTACT FORM / ADMIN INBOX APIS ----
import logging

from django.http import HttpResponse
from rest_framework import status
from rest_framework.views import APIView

from .api import open_storefront, storefront_response
from .backup import MESSAGES_BACKUP_FILENAME
from .exceptions import StorefrontError
from .permissions import AdminGatePermission
from .utilities import _parse_payload, _s, error_response

logger = logging.getLogger(__name__)


class SaveMessageAPIView(APIView):
    """
    POST /api/save-message/
    Public contact form. Every field is optional; a blank name is stored
    as "Anonymous".
    """

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            record = sf.messages.submit(
                name=_s(data.get("name")),
                email=_s(data.get("email")),
                phone=_s(data.get("phone")),
                message=_s(data.get("message")),
            )
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"id": record["id"]}, status.HTTP_201_CREATED)


class ShowMessagesAPIView(APIView):
    """Newest first."""
    permission_classes = [AdminGatePermission]

    def get(self, request):
        try:
            sf = open_storefront(request)
            sf.sync.render("messages_admin")
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"count": len(sf.messages.items)})


class ClearMessagesAPIView(APIView):
    permission_classes = [AdminGatePermission]

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            sf.require_confirmation("Clear all contact messages?")
            sf.messages.clear()
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"count": 0})


class ExportMessagesAPIView(APIView):
    permission_classes = [AdminGatePermission]

    def get(self, request):
        try:
            sf = open_storefront(request)
            body = sf.export_messages()
        except StorefrontError as e:
            return error_response(e)
        response = HttpResponse(body, content_type="application/json; charset=utf-8")
        response["Content-Disposition"] = f'attachment; filename="{MESSAGES_BACKUP_FILENAME}"'
        return response
