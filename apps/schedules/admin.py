# ==========================================
# apps/schedules/admin.py
# ==========================================

from django.contrib import admin
from apps.schedules.models import Schedule


@admin.register(Schedule)
class ScheduleAdmin(admin.ModelAdmin):
    """Admin interface for Schedules."""

    list_display = [
        'title',
        'group',
        'user',
        'start_date',
        'end_date',
        'is_all_day',
        'category',
        'repeat_type',
    ]
    list_filter = ['category', 'asset_type', 'repeat_type', 'is_all_day']
    search_fields = ['title', 'memo', 'group__name', 'user__nickname']
    readonly_fields = ['repeat_type', 'repeat_group_id', 'created_at', 'updated_at']
    date_hierarchy = 'start_date'
    ordering = ['-start_date']

    fieldsets = (
        ('Basic Information', {
            'fields': ('group', 'user', 'title', 'category', 'asset_type', 'memo')
        }),
        ('When', {
            'fields': ('start_date', 'end_date', 'is_all_day', 'start_time', 'end_time')
        }),
        ('Repeat', {
            'fields': ('repeat_type', 'repeat_group_id'),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('group', 'user')
