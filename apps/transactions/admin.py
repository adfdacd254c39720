# ==========================================
# apps/transactions/admin.py
# ==========================================

from django.contrib import admin
from apps.transactions.models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """Admin interface for Transactions."""

    list_display = [
        'date',
        'transaction_type',
        'amount',
        'category_name',
        'asset_type',
        'group',
        'user',
    ]
    list_filter = ['transaction_type', 'asset_type', 'date']
    search_fields = ['category_name', 'description', 'group__name', 'user__nickname']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'date'
    ordering = ['-date', '-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('group', 'user', 'transaction_type', 'amount', 'date')
        }),
        ('Classification', {
            'fields': ('asset_type', 'category_name', 'asset_source', 'schedule', 'description')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('group', 'user', 'asset_source')
