# Standard Library
import re
import json
import uuid
import base64
import binascii
import logging
from io import BytesIO
# Third-party
from PIL import Image as PILImage, UnidentifiedImageError

# Django
from django.conf import settings
from django.utils import timezone
from django.utils.dateparse import parse_datetime

# Django REST Framework
from rest_framework import status
from rest_framework.response import Response

# Local Imports
from .exceptions import BlockingError, ConfirmationRequired, NoticeError, StorefrontError

logger = logging.getLogger(__name__)

IMAGE_TOO_LARGE = "Image too large (max 5MB)"
IMAGE_NOT_AN_IMAGE = "Please select an image file"

# PIL cannot decode these; the media type check is all they get.
_UNVERIFIABLE_TYPES = {"image/svg+xml"}


def uid(prefix="id", taken=()):
    """`<prefix>_<7 hex chars>`, re-rolled until it is not in `taken`."""
    while True:
        candidate = f"{prefix}_{uuid.uuid4().hex[:7]}"
        if candidate not in taken:
            return candidate


def safe_parse_number(value):
    """Best-effort number from a free-text price ("USD 1,350" -> 1350.0)."""
    if not value:
        return 0
    cleaned = re.sub(r"[^\d.\-]", "", str(value))
    try:
        return float(cleaned)
    except ValueError:
        return 0


def format_datetime(dt):
    return dt.strftime('%d-%B-%Y-%I:%M%p')


def format_timestamp(raw):
    """Display form of a stored ISO timestamp; unparsable values pass through."""
    if not raw:
        return ""
    try:
        dt = parse_datetime(str(raw))
    except ValueError:
        dt = None
    if dt is None:
        return str(raw)
    if timezone.is_aware(dt):
        dt = timezone.localtime(dt)
    return format_datetime(dt)


def _now_iso():
    return timezone.now().isoformat()


def _s(v, default=""):
    return (v if v is not None else default).strip() if isinstance(v, str) else (v if v is not None else default)


def _as_bool(val, default=False):
    if val is None or val == "":
        return default
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in ("true", "1", "yes", "on"):
        return True
    if s in ("false", "0", "no", "off"):
        return False
    return default


def _as_int(val, default=None):
    try:
        return int(val)
    except (TypeError, ValueError):
        return default


def _parse_payload(request):
    """Consistent, tolerant request payload parsing."""
    if isinstance(request.data, dict):
        return request.data
    try:
        body = request.body.decode("utf-8") if request.body else "{}"
        return json.loads(body or "{}")
    except (UnicodeDecodeError, json.JSONDecodeError):
        return {}


# ---------- Image acquisition ----------

def _is_data_url(s: str) -> bool:
    return s.startswith("data:")


def _max_image_bytes():
    return settings.STOREFRONT.get("MAX_IMAGE_BYTES", 5 * 1024 * 1024)


def _verify_image(blob: bytes, content_type: str):
    if content_type in _UNVERIFIABLE_TYPES:
        return
    try:
        img = PILImage.open(BytesIO(blob))
        img.verify()
    except (UnidentifiedImageError, PILImage.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        logger.warning("Rejected undecodable %s upload: %s", content_type, e)
        raise NoticeError(IMAGE_NOT_AN_IMAGE)


def _decode_data_url(source: str) -> tuple[bytes, str]:
    try:
        header, encoded = source.split(",", 1)
        content_type = header[len("data:"):].split(";")[0].strip().lower()
        return base64.b64decode(encoded, validate=True), content_type
    except (ValueError, binascii.Error):
        raise NoticeError(IMAGE_NOT_AN_IMAGE)


def read_file_as_data_url(file_or_data_url, max_bytes=None) -> str:
    """
    Turn an uploaded file (or a `data:` URL string) into a self-contained
    `data:<type>;base64,<payload>` image reference.

    Size is checked before the media type; both failures raise NoticeError.
    """
    max_bytes = max_bytes or _max_image_bytes()

    if isinstance(file_or_data_url, str):
        if not _is_data_url(file_or_data_url):
            raise NoticeError(IMAGE_NOT_AN_IMAGE)
        blob, content_type = _decode_data_url(file_or_data_url)
    else:
        size = getattr(file_or_data_url, "size", None)
        if size is not None and size > max_bytes:
            raise NoticeError(IMAGE_TOO_LARGE)
        content_type = (getattr(file_or_data_url, "content_type", "") or "").lower()
        if not content_type.startswith("image/"):
            raise NoticeError(IMAGE_NOT_AN_IMAGE)
        blob = file_or_data_url.read()

    if len(blob) > max_bytes:
        raise NoticeError(IMAGE_TOO_LARGE)
    if not content_type.startswith("image/"):
        raise NoticeError(IMAGE_NOT_AN_IMAGE)

    _verify_image(blob, content_type)
    return f"data:{content_type};base64,{base64.b64encode(blob).decode('ascii')}"


def image_from_request(request, data, field="image"):
    """Uploaded file first, then a data-URL string; None when neither is given."""
    source = request.FILES.get(field) or data.get(field)
    if not source:
        return None
    return read_file_as_data_url(source)


# ---------- HTTP helpers ----------

def error_response(exc: StorefrontError):
    if isinstance(exc, ConfirmationRequired):
        return Response(
            {"error": "Confirmation required", "prompt": exc.prompt, "confirmed": False},
            status=status.HTTP_409_CONFLICT,
        )
    if isinstance(exc, BlockingError):
        return Response({"error": exc.message, "blocking": True}, status=status.HTTP_422_UNPROCESSABLE_ENTITY)
    return Response({"error": exc.message, "notice": True}, status=status.HTTP_400_BAD_REQUEST)
