# ==========================================
# apps/categories/admin.py
# ==========================================

from django.contrib import admin
from apps.categories.models import Category


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """Admin interface for Categories."""

    list_display = ['name', 'icon', 'type', 'group', 'is_default', 'sort_order']
    list_filter = ['type', 'is_default']
    search_fields = ['name', 'group__name']
    readonly_fields = ['type', 'is_default', 'created_at', 'updated_at']
    ordering = ['group', 'sort_order']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('group')
