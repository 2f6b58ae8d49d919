import logging

logger = logging.getLogger(__name__)


class Notifier:
    """Collects the transient status messages (toasts) of one interaction."""

    def __init__(self):
        self.notices = []

    def __call__(self, message):
        logger.info("%s", message)
        self.notices.append(message)

    def drain(self):
        notices, self.notices = self.notices, []
        return notices
