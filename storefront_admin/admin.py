from django.contrib import admin
from .models import StoreSlot


@admin.register(StoreSlot)
class StoreSlotAdmin(admin.ModelAdmin):
    list_display = ("key", "updated_at")
    readonly_fields = ("created_at", "updated_at")
