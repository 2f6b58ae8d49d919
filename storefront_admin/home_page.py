# Standard Library
import logging

# Django REST Framework
from rest_framework.parsers import MultiPartParser, FormParser, JSONParser
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

# Local Imports
from .api import open_storefront, storefront_response
from .carousel import get_scheduler
from .content import (
    DeleteContentAPIView,
    EditContentAPIView,
    MoveContentAPIView,
    SaveContentAPIView,
)
from .exceptions import NoticeError, StorefrontError
from .permissions import AdminGatePermission
from .utilities import (
    _as_bool,
    _as_int,
    _parse_payload,
    _s,
    error_response,
    image_from_request,
    IMAGE_NOT_AN_IMAGE,
)

logger = logging.getLogger(__name__)


# ---------- Hero carousel: slides ----------

class ShowSlidesAPIView(APIView):
    """GET /api/show-slides/ -> slides plus the admin list projection."""

    def get(self, request):
        try:
            sf = open_storefront(request)
            sf.sync.render("slides_admin")
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"items": sf.slides.items, "carousel": get_scheduler().snapshot()})


class SaveSlideAPIView(SaveContentAPIView):
    collection = "slides"


class EditSlideAPIView(EditContentAPIView):
    collection = "slides"


class DeleteSlideAPIView(DeleteContentAPIView):
    collection = "slides"


class MoveSlideAPIView(MoveContentAPIView):
    collection = "slides"


class SlideImageAPIView(APIView):
    """POST /api/slide-image/  {id, image} replaces one slide's picture."""
    permission_classes = [AdminGatePermission]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request):
        data = _parse_payload(request)
        slide_id = _s(data.get("id"))
        if not slide_id:
            return error_response(NoticeError("id is required"))
        try:
            sf = open_storefront(request, data)
            sf.slides.get(slide_id)
            img = image_from_request(request, data)
            if not img:
                raise NoticeError(IMAGE_NOT_AN_IMAGE)
            record = sf.slides.set_image(slide_id, img)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"item": record})


class ClearSlidesAPIView(APIView):
    permission_classes = [AdminGatePermission]

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            sf.require_confirmation("Clear all slides?")
            sf.slides.clear()
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"items": []})


# ---------- Hero carousel: auto-advance state ----------

class CarouselStateAPIView(APIView):
    """
    GET  /api/carousel/ -> {index, slide_count, running}
    POST /api/carousel/ with one of:
        {"event": "pointer", "inside": true|false}
        {"event": "visibility", "hidden": true|false}
        {"event": "select", "index": n}
    """

    def get(self, request):
        return Response(get_scheduler().snapshot(), status=status.HTTP_200_OK)

    def post(self, request):
        data = _parse_payload(request)
        scheduler = get_scheduler()
        event = _s(data.get("event")).lower()

        if event == "pointer":
            if _as_bool(data.get("inside")):
                scheduler.pointer_enter()
            else:
                scheduler.pointer_leave()
        elif event == "visibility":
            scheduler.visibility_changed(_as_bool(data.get("hidden")))
        elif event == "select":
            idx = _as_int(data.get("index"))
            if idx is None:
                return error_response(NoticeError("index is required"))
            scheduler.select(idx)
        else:
            return error_response(NoticeError("event must be pointer, visibility or select"))

        logger.debug("Carousel event %s -> %s", event, scheduler.snapshot())
        return Response(scheduler.snapshot(), status=status.HTTP_200_OK)
