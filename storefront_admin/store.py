"""
STATE STORE

The canonical storefront document plus its persisted mirror in one slot.

- load(): missing / unparsable / non-object document -> fresh seed, persisted
  at once; otherwise persisted keys are shallow-merged over the seed.
- save(): whole document, one write, on every mutation.
"""
import json
import logging

from django.conf import settings

from .defaults import default_state, merge_over_defaults

logger = logging.getLogger(__name__)


class StateStore:
    def __init__(self, slots, key=None):
        self.slots = slots
        self.key = key or settings.STOREFRONT["STORE_SLOT"]
        self.state = None

    def _read(self):
        raw = self.slots.get(self.key)
        if not raw:
            return None
        try:
            document = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Stored document under %s is not valid JSON; reseeding", self.key)
            return None
        if not isinstance(document, dict):
            logger.warning("Stored document under %s is not an object; reseeding", self.key)
            return None
        return document

    def load(self):
        document = self._read()
        if document is None:
            self.state = default_state()
            self.save()
            return self.state
        self.state = merge_over_defaults(document)
        return self.state

    def save(self):
        self.slots.set(self.key, json.dumps(self.state, ensure_ascii=False))

    def replace(self, document):
        self.state = merge_over_defaults(document)
        self.save()
        return self.state

    def wipe(self):
        self.slots.remove(self.key)
        return self.load()

    def dump(self):
        logger.info("MSA state dump: %s", json.dumps(self.state, ensure_ascii=False))
        return self.state

    def collection(self, key):
        items = self.state.get(key)
        if not isinstance(items, list):
            items = self.state[key] = []
        return items

    def record(self, key):
        """Dict-valued top-level entry (shopInfo, settings)."""
        value = self.state.get(key)
        if not isinstance(value, dict):
            value = self.state[key] = {}
        return value
