# Standard Library
import json
import logging

# Django
from django.http import HttpResponse

# Django REST Framework
from rest_framework import status
from rest_framework.parsers import MultiPartParser, FormParser, JSONParser
from rest_framework.response import Response
from rest_framework.views import APIView

# Local Imports
from .api import open_storefront, storefront_response
from .backup import STORE_BACKUP_FILENAME
from .exceptions import BlockingError, StorefrontError
from .permissions import AdminGatePermission
from .render import PROJECTIONS
from .utilities import _parse_payload, error_response

logger = logging.getLogger(__name__)


class ShowRegionsAPIView(APIView):
    """
    GET /api/render/?regions=a,b&category=&search=&sort=
    Without `regions` every region is projected (the page-load render).
    """

    def get(self, request):
        wanted = [r.strip() for r in (request.query_params.get("regions") or "").split(",") if r.strip()]
        unknown = [r for r in wanted if r not in PROJECTIONS]
        if unknown:
            return Response({"error": f"Unknown region(s): {', '.join(unknown)}"}, status=status.HTTP_404_NOT_FOUND)
        try:
            sf = open_storefront(request)
            if wanted:
                sf.sync.render(*wanted)
            else:
                sf.sync.full_render()
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf)


class ShowRegionAPIView(APIView):
    """GET /api/render/<region>/ -> one region's presentation."""

    def get(self, request, region):
        if region not in PROJECTIONS:
            return Response({"error": f"Unknown region: {region}"}, status=status.HTTP_404_NOT_FOUND)
        try:
            sf = open_storefront(request)
            sf.sync.render(region)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"region": region, "view": sf.sync.views[region]})


# ---------- Backup / restore ----------

class ExportStoreAPIView(APIView):
    permission_classes = [AdminGatePermission]

    def get(self, request):
        try:
            sf = open_storefront(request)
            body = sf.export_store()
        except StorefrontError as e:
            return error_response(e)
        response = HttpResponse(body, content_type="application/json; charset=utf-8")
        response["Content-Disposition"] = f'attachment; filename="{STORE_BACKUP_FILENAME}"'
        return response


def _backup_text(request, data):
    upload = request.FILES.get("file")
    if upload is not None:
        return upload.read()
    document = data.get("document")
    if isinstance(document, dict):
        return json.dumps(document)
    if isinstance(document, (str, bytes)) and document:
        return document
    raise BlockingError("Invalid JSON file")


class ImportStoreAPIView(APIView):
    """
    POST /api/import-store/
    Multipart `file` or JSON `document` (object or text), plus `confirm`.
    A rejected document leaves the stored state untouched.
    """
    permission_classes = [AdminGatePermission]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            sf.require_confirmation("Import will replace local store data. Continue?")
            state = sf.import_store(_backup_text(request, data))
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"keys": sorted(state)})


class WipeStoreAPIView(APIView):
    permission_classes = [AdminGatePermission]

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            sf.wipe()
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf)


class DebugDumpAPIView(APIView):
    """Logs the whole document and returns it."""
    permission_classes = [AdminGatePermission]

    def get(self, request):
        sf = open_storefront(request)
        state = sf.dump()
        return storefront_response(sf, {"state": state})
