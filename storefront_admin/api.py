"""Per-request storefront plumbing shared by the API views."""
from rest_framework import status
from rest_framework.response import Response

from .carousel import get_scheduler
from .persistence import DatabaseSlots
from .render import ViewControls
from .storefront import Storefront
from .utilities import _as_bool


def confirm_from(data):
    """Confirmation collaborator backed by the request's `confirm` flag."""
    confirmed = _as_bool(data.get("confirm")) if data is not None else False
    return lambda prompt: confirmed


def open_storefront(request=None, data=None, render=False):
    controls = ViewControls.from_params(request.query_params) if request is not None else ViewControls()
    storefront = Storefront(
        DatabaseSlots(),
        scheduler=get_scheduler(),
        controls=controls,
        confirm=confirm_from(data),
    )
    return storefront.start(render=render)


def storefront_response(storefront, payload=None, status_code=status.HTTP_200_OK):
    body = {"success": True}
    body.update(payload or {})
    body["notices"] = storefront.notify.drain()
    body["regions"] = storefront.sync.drain()
    return Response(body, status=status_code)
