"""
Key/value slots holding opaque text.

`DatabaseSlots` is the durable adapter used by the API and the management
commands. `MemorySlots` keeps everything in a dict and is what the core
tests construct.
"""
import logging

from .models import StoreSlot

logger = logging.getLogger(__name__)


class MemorySlots:
    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def get(self, key):
        return self._data.get(key)

    def set(self, key, value):
        self._data[key] = value

    def remove(self, key):
        self._data.pop(key, None)

    def __contains__(self, key):
        return key in self._data


class DatabaseSlots:
    def get(self, key):
        return (
            StoreSlot.objects.filter(key=key)
            .values_list("value", flat=True)
            .first()
        )

    def set(self, key, value):
        StoreSlot.objects.update_or_create(key=key, defaults={"value": value})

    def remove(self, key):
        deleted, _ = StoreSlot.objects.filter(key=key).delete()
        if deleted:
            logger.debug("Removed slot %s", key)

    def __contains__(self, key):
        return StoreSlot.objects.filter(key=key).exists()
