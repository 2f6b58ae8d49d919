from django.db import models


class StoreSlot(models.Model):
    """
    One durable key/value slot of opaque text.

    The whole storefront document lives in one row, the admin secret in
    another; nothing else is modelled relationally.
    """
    key = models.CharField(primary_key=True, max_length=100)
    value = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Store Slot"
        verbose_name_plural = "Store Slots"

    def __str__(self):
        return self.key
