"""Whole-store and messages-only backups."""
import json
import logging

from .exceptions import BlockingError

logger = logging.getLogger(__name__)

STORE_BACKUP_FILENAME = "msa-store-backup.json"
MESSAGES_BACKUP_FILENAME = "msa-messages.json"


def export_store(store):
    return json.dumps(store.state, indent=2, ensure_ascii=False)


def export_messages(store):
    return json.dumps(store.state.get("messages") or [], indent=2, ensure_ascii=False)


def parse_backup(text):
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError:
            raise BlockingError("Invalid JSON file")
    try:
        document = json.loads(text)
    except (TypeError, ValueError):
        raise BlockingError("Invalid JSON file")
    if not isinstance(document, dict):
        raise BlockingError("Invalid JSON file")
    return document


def import_store(store, sync, text):
    """Parse first; the store is only touched once the document is known good."""
    document = parse_backup(text)
    store.replace(document)
    sync.reload_carousel()
    sync.full_render()
    logger.info("Store imported (%d top-level keys)", len(document))
    return store.state
