# ==========================================
# apps/assets/admin.py
# ==========================================

from django.contrib import admin
from apps.assets.models import AssetSource


@admin.register(AssetSource)
class AssetSourceAdmin(admin.ModelAdmin):
    """Admin interface for Asset Sources."""

    list_display = ['name', 'type', 'group', 'created_at']
    list_filter = ['type']
    search_fields = ['name', 'description', 'group__name']
    readonly_fields = ['type', 'created_at', 'updated_at']
    ordering = ['group', 'created_at']
