"""
COLLECTION EDITORS

One editor per collection. Every mutation follows the same order:
change the document -> save the whole store -> re-project the regions that
show the collection -> post a notice.

Deletes are unconditional; callers obtain confirmation first.
"""
import logging

from .exceptions import NoticeError
from .render import (
    CATEGORY_REGIONS,
    MESSAGE_REGIONS,
    PRODUCT_REGIONS,
    SHOP_REGIONS,
    SLIDE_REGIONS,
    project_product_modal,
)
from .utilities import IMAGE_NOT_AN_IMAGE, _now_iso, uid

logger = logging.getLogger(__name__)


def _as_text(value, label):
    """Display fields hold text; numbers are stringified, anything else is refused."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)):
        return str(value)
    raise NoticeError(f"{label} must be text")


class _Editor:
    regions = ()
    # Adding, removing or reordering entries restarts the carousel.
    restructures_carousel = False

    def __init__(self, store, sync, notify):
        self.store = store
        self.sync = sync
        self.notify = notify

    def _commit(self, message=None, structural=False):
        self.store.save()
        if structural and self.restructures_carousel:
            self.sync.reload_carousel()
        self.sync.render(*self.regions)
        if message:
            self.notify(message)


class _Reorderable(_Editor):
    @property
    def items(self):
        raise NotImplementedError

    def _swap(self, a, b):
        items = self.items
        items[a], items[b] = items[b], items[a]
        self._commit(structural=True)

    def move_up(self, idx):
        if not isinstance(idx, int) or idx <= 0 or idx >= len(self.items):
            return False
        self._swap(idx - 1, idx)
        return True

    def move_down(self, idx):
        if not isinstance(idx, int) or idx < 0 or idx >= len(self.items) - 1:
            return False
        self._swap(idx, idx + 1)
        return True


class CollectionEditor(_Reorderable):
    """Create / update / delete / reorder for one id-keyed collection."""

    key = None
    prefix = "id"
    noun = "Item"
    # field -> value on create when not supplied
    fields = {}
    # field -> label used in the "<noun> <label> required" notice
    required = {"title": "title"}
    image_field = None

    @property
    def items(self):
        return self.store.collection(self.key)

    def fallbacks(self):
        """Values substituted for blank input, on create and update alike."""
        return {}

    def find(self, item_id):
        return next((item for item in self.items if item.get("id") == item_id), None)

    def get(self, item_id):
        record = self.find(item_id)
        if record is None:
            raise NoticeError(f"{self.noun} not found")
        return record

    def _clean(self, fields):
        fallbacks = self.fallbacks()
        cleaned = {}
        for name, value in fields.items():
            if name not in self.fields or value is None:
                continue
            if name == self.image_field:
                if not isinstance(value, str):
                    raise NoticeError(IMAGE_NOT_AN_IMAGE)
            else:
                value = _as_text(value, f"{self.noun} {name}")
            if value == "" and name in fallbacks:
                value = fallbacks[name]
            cleaned[name] = value
        return cleaned

    def _check_required(self, record):
        for name, label in self.required.items():
            if not record.get(name):
                raise NoticeError(f"{self.noun} {label} required")

    def create(self, **fields):
        record = {**self.fields, **self.fallbacks(), **self._clean(fields)}
        self._check_required(record)
        taken = {item.get("id") for item in self.items}
        record = {"id": uid(self.prefix, taken), **record}
        self.items.append(record)
        self._commit(f"{self.noun} added", structural=True)
        return record

    def update(self, item_id, **fields):
        record = self.get(item_id)
        changes = self._clean(fields)
        if self.image_field and not changes.get(self.image_field):
            changes.pop(self.image_field, None)
        self._check_required({**record, **changes})
        record.update(changes)
        self._commit(f"{self.noun} updated")
        return record

    def delete(self, item_id):
        record = self.get(item_id)
        self.items.remove(record)
        self._commit(f"{self.noun} deleted", structural=True)
        return record

    def index_of(self, item_id):
        for idx, item in enumerate(self.items):
            if item.get("id") == item_id:
                return idx
        raise NoticeError(f"{self.noun} not found")


class SlideEditor(CollectionEditor):
    key = "slider"
    prefix = "s"
    noun = "Slide"
    fields = {"title": "", "desc": "", "img": None}
    image_field = "img"
    regions = SLIDE_REGIONS
    restructures_carousel = True

    def set_image(self, item_id, img):
        record = self.get(item_id)
        record["img"] = img
        self._commit("Slide image uploaded")
        return record

    def clear(self):
        self.store.state["slider"] = []
        self._commit("Slides cleared", structural=True)


class ProductEditor(CollectionEditor):
    key = "products"
    prefix = "p"
    noun = "Product"
    fields = {"title": "", "category": "", "price": "", "oldPrice": "", "desc": "", "img": None}
    image_field = "img"
    regions = PRODUCT_REGIONS

    def fallbacks(self):
        categories = self.store.collection("categories")
        return {"category": categories[0] if categories else "parts", "price": "USD 0"}

    def quick_view(self, item_id):
        return project_product_modal(self.get(item_id))

    def add_to_cart(self, item_id):
        record = self.get(item_id)
        self.notify(f"Added {record.get('title')} (demo)")
        return record


class ServiceEditor(CollectionEditor):
    key = "services"
    prefix = "sv"
    noun = "Service"
    fields = {"title": "", "desc": ""}
    regions = ("services",)


class DealEditor(CollectionEditor):
    key = "deals"
    prefix = "d"
    noun = "Deal"
    fields = {"title": "", "desc": "", "price": ""}
    regions = ("deals",)


class FaqEditor(CollectionEditor):
    key = "faq"
    prefix = "f"
    noun = "FAQ"
    fields = {"q": "", "a": ""}
    required = {"q": "question"}
    regions = ("faq",)


class BlogEditor(CollectionEditor):
    key = "blog"
    prefix = "b"
    noun = "Blog post"
    fields = {"title": "", "excerpt": ""}
    regions = ("blog",)


class LaptopEditor(CollectionEditor):
    key = "laptops"
    prefix = "l"
    noun = "Laptop"
    fields = {"title": "", "price": "", "img": None}
    image_field = "img"
    regions = ("laptops",)


class CategoryEditor(_Reorderable):
    """Categories are bare strings; products keep whatever string they hold."""

    regions = CATEGORY_REGIONS

    @property
    def items(self):
        return self.store.collection("categories")

    def add(self, name):
        name = _as_text(name, "Category name")
        if not name:
            raise NoticeError("Category name required")
        if name not in self.items:
            self.items.append(name)
        self._commit("Category added")
        return name

    def index_of(self, name):
        try:
            return self.items.index(name)
        except ValueError:
            raise NoticeError("Category not found")

    def delete(self, idx):
        if not isinstance(idx, int) or not 0 <= idx < len(self.items):
            raise NoticeError("Category not found")
        name = self.items.pop(idx)
        self._commit("Category deleted")
        return name


class MessageInbox(_Editor):
    """Append-only from the contact form; the admin can only clear everything."""

    regions = MESSAGE_REGIONS

    @property
    def items(self):
        return self.store.collection("messages")

    def submit(self, name="", email="", phone="", message=""):
        record = {
            "id": uid("m", {m.get("id") for m in self.items}),
            "name": _as_text(name, "Name") or "Anonymous",
            "email": _as_text(email, "Email"),
            "phone": _as_text(phone, "Phone"),
            "message": _as_text(message, "Message"),
            "time": _now_iso(),
        }
        self.items.append(record)
        self._commit("Message received (stored in local admin inbox)")
        return record

    def clear(self):
        self.store.state["messages"] = []
        self._commit("Messages cleared")


class ShopInfoEditor(_Editor):
    FIELDS = ("title", "tagline", "phone", "email", "address", "delivery", "footerText")
    regions = SHOP_REGIONS

    @property
    def info(self):
        return self.store.record("shopInfo")

    def save(self, **fields):
        info = self.info
        changes = {name: _as_text(fields.get(name), f"Shop info {name}") for name in self.FIELDS}
        for name, value in changes.items():
            if value:
                info[name] = value
        if fields.get("logo"):
            info["logo"] = fields["logo"]
        self._commit("Shop info saved locally")
        return info

    def set_logo(self, img):
        self.info["logo"] = img
        self._commit("Logo updated")

    def clear_logo(self):
        self.info["logo"] = None
        self._commit("Logo removed")
