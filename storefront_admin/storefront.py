"""
The explicitly constructed storefront: slots, store, admin gate, render
synchronizer, carousel scheduler, notifier and every collection editor,
wired together once per interaction.
"""
import logging

from . import backup
from .admin_gate import AdminGate
from .editors import (
    BlogEditor,
    CategoryEditor,
    DealEditor,
    FaqEditor,
    LaptopEditor,
    MessageInbox,
    ProductEditor,
    ServiceEditor,
    ShopInfoEditor,
    SlideEditor,
)
from .exceptions import ConfirmationRequired, NoticeError
from .notifications import Notifier
from .render import RenderSynchronizer
from .store import StateStore

logger = logging.getLogger(__name__)

# URL-facing collection names -> editor attribute
COLLECTIONS = {
    "slides": "slides",
    "products": "products",
    "services": "services",
    "deals": "deals",
    "faq": "faq",
    "blog": "blog",
    "laptops": "laptops",
}


def _decline(prompt):
    return False


class Storefront:
    def __init__(self, slots, *, scheduler=None, controls=None, mounted=None, confirm=None):
        self.slots = slots
        self.notify = Notifier()
        self.confirm = confirm or _decline
        self.store = StateStore(slots)
        self.gate = AdminGate(slots)
        self.scheduler = scheduler
        self.sync = RenderSynchronizer(self.store, controls=controls, scheduler=scheduler, mounted=mounted)

        args = (self.store, self.sync, self.notify)
        self.shop_info = ShopInfoEditor(*args)
        self.slides = SlideEditor(*args)
        self.products = ProductEditor(*args)
        self.categories = CategoryEditor(*args)
        self.services = ServiceEditor(*args)
        self.deals = DealEditor(*args)
        self.faq = FaqEditor(*args)
        self.blog = BlogEditor(*args)
        self.laptops = LaptopEditor(*args)
        self.messages = MessageInbox(*args)

    def start(self, render=True):
        self.gate.ensure()
        self.store.load()
        if render:
            self.sync.full_render()
        logger.debug("Storefront started (%s)", "rendered" if render else "headless")
        return self

    def editor(self, collection):
        name = COLLECTIONS.get(collection)
        if name is None:
            raise NoticeError(f"Unknown collection {collection!r}")
        return getattr(self, name)

    def require_confirmation(self, prompt):
        if not self.confirm(prompt):
            raise ConfirmationRequired(prompt)

    # ---- whole-store operations ----

    def export_store(self):
        data = backup.export_store(self.store)
        self.notify("Store exported")
        return data

    def export_messages(self):
        data = backup.export_messages(self.store)
        self.notify("Messages exported")
        return data

    def import_store(self, text):
        self.require_confirmation("Import will replace local store data. Continue?")
        backup.import_store(self.store, self.sync, text)
        self.notify("Store imported")
        return self.store.state

    def wipe(self):
        self.require_confirmation("Wipe all local store data and reset to demo?")
        self.store.wipe()
        self.sync.reload_carousel()
        self.sync.full_render()
        self.notify("Local store reset")
        return self.store.state

    def dump(self):
        state = self.store.dump()
        self.notify("State dumped to console")
        return state
