# Standard Library
import logging

# Django REST Framework
from rest_framework.views import APIView

# Utilities / Local
from .api import open_storefront, storefront_response
from .content import (
    DeleteContentAPIView,
    EditContentAPIView,
    MoveContentAPIView,
    SaveContentAPIView,
)
from .exceptions import NoticeError, StorefrontError
from .render import filter_products
from .utilities import _parse_payload, _s, error_response

logger = logging.getLogger(__name__)


# -----------------------
# Public catalogue
# -----------------------

class ShowProductsAPIView(APIView):
    """
    GET /api/show-products/?category=&search=&sort=default|price-asc|price-desc
    Returns the filtered product cards (or the empty-state message).
    """

    def get(self, request):
        try:
            sf = open_storefront(request)
            sf.sync.render("products")
            visible = filter_products(sf.products.items, sf.sync.controls)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"count": len(visible)})


class ShowSpecificProductAPIView(APIView):
    """GET /api/show-product/?id=<product id>  -> quick view."""

    def get(self, request):
        product_id = _s(request.query_params.get("id"))
        if not product_id:
            return error_response(NoticeError("id is required"))
        try:
            sf = open_storefront(request)
            modal = sf.products.quick_view(product_id)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"product": modal})


class AddToCartAPIView(APIView):
    """Demo only: acknowledges the click, nothing is stored."""

    def post(self, request):
        data = _parse_payload(request)
        product_id = _s(data.get("id"))
        if not product_id:
            return error_response(NoticeError("id is required"))
        try:
            sf = open_storefront(request, data)
            record = sf.products.add_to_cart(product_id)
        except StorefrontError as e:
            return error_response(e)
        return storefront_response(sf, {"id": record["id"]})


# -----------------------
# Admin
# -----------------------

class SaveProductAPIView(SaveContentAPIView):
    collection = "products"


class EditProductAPIView(EditContentAPIView):
    collection = "products"


class DeleteProductAPIView(DeleteContentAPIView):
    collection = "products"


class UpdateProductOrderAPIView(MoveContentAPIView):
    collection = "products"
