# ---- GENERIC COLLECTION APIS (services, deals, faq, blog, laptops) ----
import logging

from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.views import APIView

from .api import open_storefront, storefront_response
from .exceptions import NoticeError, StorefrontError
from .permissions import AdminGatePermission
from .utilities import _as_int, _parse_payload, _s, error_response, image_from_request

logger = logging.getLogger(__name__)


def _editor_fields(editor, data):
    return {
        name: data.get(name)
        for name in editor.fields
        if name != editor.image_field and name in data
    }


def _resolve_index(editor, data):
    idx = _as_int(data.get("index"))
    if idx is None:
        item_id = _s(data.get("id"))
        if not item_id:
            raise NoticeError("index or id is required")
        idx = editor.index_of(item_id)
    return idx


def move_item(editor, data):
    """Shared by every reorderable collection; out-of-range moves are no-ops."""
    direction = _s(data.get("direction")).lower()
    idx = _resolve_index(editor, data)
    if direction == "up":
        return editor.move_up(idx)
    if direction == "down":
        return editor.move_down(idx)
    raise NoticeError("direction must be 'up' or 'down'")


class _CollectionAPIView(APIView):
    collection = None

    def _collection(self, kwargs):
        return kwargs.get("collection") or self.collection


# --------------------------
# SHOW
# GET /api/show-<collection>/
# --------------------------
class ShowContentAPIView(_CollectionAPIView):

    def get(self, request, **kwargs):
        try:
            sf = open_storefront(request)
            editor = sf.editor(self._collection(kwargs))
            sf.sync.render(*editor.regions)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"items": editor.items})


# --------------------------
# SAVE (create, or update-in-place when id is given)
# POST /api/save-<collection>/
# --------------------------
class SaveContentAPIView(_CollectionAPIView):
    permission_classes = [AdminGatePermission]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request, **kwargs):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            editor = sf.editor(self._collection(kwargs))
            fields = _editor_fields(editor, data)
            if editor.image_field:
                img = image_from_request(request, data)
                if img:
                    fields[editor.image_field] = img

            item_id = _s(data.get("id"))
            if item_id:
                record = editor.update(item_id, **fields)
                code = status.HTTP_200_OK
            else:
                record = editor.create(**fields)
                code = status.HTTP_201_CREATED
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"item": record}, code)


# --------------------------
# EDIT
# POST /api/edit-<collection>/
# --------------------------
class EditContentAPIView(_CollectionAPIView):
    permission_classes = [AdminGatePermission]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request, **kwargs):
        data = _parse_payload(request)
        item_id = _s(data.get("id"))
        if not item_id:
            return error_response(NoticeError("id is required"))
        try:
            sf = open_storefront(request, data)
            editor = sf.editor(self._collection(kwargs))
            fields = _editor_fields(editor, data)
            if editor.image_field:
                img = image_from_request(request, data)
                if img:
                    fields[editor.image_field] = img
            record = editor.update(item_id, **fields)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"item": record})


# --------------------------
# DELETE (confirmation required)
# POST /api/delete-<collection>/
# --------------------------
class DeleteContentAPIView(_CollectionAPIView):
    permission_classes = [AdminGatePermission]

    def post(self, request, **kwargs):
        data = _parse_payload(request)
        item_id = _s(data.get("id"))
        if not item_id:
            return error_response(NoticeError("id is required"))
        try:
            sf = open_storefront(request, data)
            editor = sf.editor(self._collection(kwargs))
            editor.get(item_id)
            sf.require_confirmation(f"Delete {editor.noun.lower()}?")
            record = editor.delete(item_id)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"deleted": record["id"]})


# --------------------------
# MOVE
# POST /api/move-<collection>/  {index|id, direction: up|down}
# --------------------------
class MoveContentAPIView(_CollectionAPIView):
    permission_classes = [AdminGatePermission]

    def post(self, request, **kwargs):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            editor = sf.editor(self._collection(kwargs))
            moved = move_item(editor, data)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"moved": moved, "items": editor.items})
