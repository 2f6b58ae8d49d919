"""
ADMIN GATE

A single plaintext secret in its own slot, compared by exact equality.
Deters casual access to the admin panel; it is not a security control.

States: locked -> (verify ok) -> unlocked -> (lock) -> locked.
Nothing about the unlocked state is persisted: every new gate starts locked.
"""
import logging

from django.conf import settings
from django.utils import timezone

logger = logging.getLogger(__name__)

LOCKED = "locked"
UNLOCKED = "unlocked"


class AdminGate:
    def __init__(self, slots, key=None, default_secret=None, last_login_key=None):
        conf = settings.STOREFRONT
        self.slots = slots
        self.key = key or conf["ADMIN_SLOT"]
        self.default_secret = default_secret if default_secret is not None else conf["DEFAULT_ADMIN_PASSWORD"]
        self.last_login_key = last_login_key or conf["LAST_LOGIN_SLOT"]
        self.state = LOCKED

    @property
    def is_unlocked(self):
        return self.state == UNLOCKED

    def ensure(self):
        if not self.slots.get(self.key):
            self.slots.set(self.key, self.default_secret)
            logger.info("Admin password set to default (stored locally).")

    def verify(self, candidate, remember=False):
        stored = self.slots.get(self.key)
        if not isinstance(candidate, str) or stored is None or candidate != stored:
            return False
        self.state = UNLOCKED
        if remember:
            self.slots.set(self.last_login_key, timezone.now().isoformat())
        return True

    def lock(self):
        self.state = LOCKED

    def change(self, new_secret):
        self.slots.set(self.key, new_secret)

    def reset(self):
        self.slots.set(self.key, self.default_secret)

    def last_login(self):
        return self.slots.get(self.last_login_key)
