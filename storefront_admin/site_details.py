# ---- SHOP INFO / BRANDING APIS ----
import logging

from rest_framework.parsers import MultiPartParser, FormParser, JSONParser
from rest_framework.views import APIView

from .api import open_storefront, storefront_response
from .editors import ShopInfoEditor
from .exceptions import NoticeError, StorefrontError
from .permissions import AdminGatePermission
from .utilities import _parse_payload, _s, error_response, image_from_request, IMAGE_NOT_AN_IMAGE

logger = logging.getLogger(__name__)


class ShowShopInfoAPIView(APIView):
    """
    GET /api/show-shop-info/
    Public. Returns the stored shop info plus the header/footer projection.
    """

    def get(self, request):
        try:
            sf = open_storefront(request)
            sf.sync.render("shop_info")
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"shop_info": sf.shop_info.info})


class SaveShopInfoAPIView(APIView):
    """
    POST /api/save-shop-info/
    Blank fields keep the stored value. An optional `logo` upload (or data URL)
    replaces the logo in the same save.
    """
    permission_classes = [AdminGatePermission]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            fields = {name: _s(data.get(name)) for name in ShopInfoEditor.FIELDS}
            logo = image_from_request(request, data, field="logo")
            if logo:
                fields["logo"] = logo
            info = sf.shop_info.save(**fields)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"shop_info": info})


class SaveLogoAPIView(APIView):
    permission_classes = [AdminGatePermission]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request):
        data = _parse_payload(request)
        try:
            sf = open_storefront(request, data)
            logo = image_from_request(request, data, field="logo")
            if not logo:
                raise NoticeError(IMAGE_NOT_AN_IMAGE)
            sf.shop_info.set_logo(logo)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"logo": logo})


class DeleteLogoAPIView(APIView):
    permission_classes = [AdminGatePermission]

    def post(self, request):
        try:
            sf = open_storefront(request)
            sf.shop_info.clear_logo()
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"logo": None})
