# Standard Library
import logging

# Django REST Framework
from rest_framework import status
from rest_framework.views import APIView

# Local Imports
from .api import open_storefront, storefront_response
from .content import move_item
from .exceptions import NoticeError, StorefrontError
from .permissions import AdminGatePermission
from .render import CATEGORY_REGIONS
from .utilities import _as_int, _parse_payload, _s, error_response

logger = logging.getLogger(__name__)


class ShowCategoryAPIView(APIView):
    """Chips, product filter options, admin list and dropdown in one response."""

    def get(self, request):
        try:
            sf = open_storefront(request)
            sf.sync.render(*(r for r in CATEGORY_REGIONS if r != "products"))
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"categories": sf.categories.items})


class SaveCategoryAPIView(APIView):
    permission_classes = [AdminGatePermission]

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            name = sf.categories.add(_s(data.get("name")))
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(
            sf, {"name": name, "categories": sf.categories.items}, status.HTTP_201_CREATED
        )


class DeleteCategoryAPIView(APIView):
    """
    POST /api/delete-category/  {index} or {name}
    Products keep whatever category string they already hold.
    """
    permission_classes = [AdminGatePermission]

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            categories = sf.categories
            idx = _as_int(data.get("index"))
            if idx is None:
                name = _s(data.get("name"))
                if not name:
                    raise NoticeError("index or name is required")
                idx = categories.index_of(name)
            if not 0 <= idx < len(categories.items):
                raise NoticeError("Category not found")

            sf.require_confirmation(
                f'Delete category "{categories.items[idx]}"? Existing products will keep their category.'
            )
            name = categories.delete(idx)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"deleted": name, "categories": categories.items})


class UpdateCategoryOrderAPIView(APIView):
    """POST /api/move-category/  {index|name, direction: up|down}"""
    permission_classes = [AdminGatePermission]

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            if data.get("index") is None and data.get("name"):
                data = {**data, "index": sf.categories.index_of(_s(data.get("name")))}
            moved = move_item(sf.categories, data)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"moved": moved, "categories": sf.categories.items})
