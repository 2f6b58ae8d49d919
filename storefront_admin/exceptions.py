"""
STOREFRONT ERRORS

Every failure leaves the store in its last-known-good state. The class says
how the failure reaches the operator.
"""


class StorefrontError(Exception):
    """Base exception for storefront operations."""

    def __init__(self, message=""):
        super().__init__(message)
        self.message = message


class NoticeError(StorefrontError):
    """Operation aborted; surfaced as a non-blocking notice (toast)."""


class BlockingError(StorefrontError):
    """Operation aborted; the operator must acknowledge the error."""


class ConfirmationRequired(StorefrontError):
    """A destructive operation was not confirmed."""

    def __init__(self, prompt):
        super().__init__(prompt)
        self.prompt = prompt
