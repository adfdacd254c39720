# ==========================================
# apps/schedules/models.py
# ==========================================

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import F
from django.db.models.functions import Coalesce
import uuid

from apps.core.choices import AssetType

from .validation import validate_schedule


class ScheduleCategory(models.TextChoices):
    APPOINTMENT = 'APPOINTMENT', 'Appointment'
    ANNIVERSARY = 'ANNIVERSARY', 'Anniversary'
    WORK = 'WORK', 'Work'
    HOSPITAL = 'HOSPITAL', 'Hospital'
    TRAVEL = 'TRAVEL', 'Travel'
    ETC = 'ETC', 'Other'


class RepeatType(models.TextChoices):
    NONE = 'NONE', 'None'
    DAILY = 'DAILY', 'Daily'
    WEEKLY = 'WEEKLY', 'Weekly'
    MONTHLY = 'MONTHLY', 'Monthly'
    YEARLY = 'YEARLY', 'Yearly'


class ScheduleQuerySet(models.QuerySet):

    def overlapping(self, start, end):
        """
        Schedules touching the inclusive range [start, end].

        A schedule without end_date occupies only its start_date.
        """
        return (
            self.annotate(effective_end=Coalesce('end_date', 'start_date'))
            .filter(start_date__lte=end, effective_end__gte=start)
        )

    def for_repeat_group(self, repeat_group_id):
        return self.filter(repeat_group_id=repeat_group_id)

    def chronological(self):
        return self.order_by('start_date', F('start_time').asc(nulls_first=True), 'created_at')


class Schedule(models.Model):
    """Calendar event, optionally one instance of a repeating series."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey('groups.Group', on_delete=models.CASCADE, related_name='schedules')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='schedules')

    title = models.CharField(max_length=50)
    start_date = models.DateField()
    end_date = models.DateField(null=True, blank=True)
    start_time = models.TimeField(null=True, blank=True)
    end_time = models.TimeField(null=True, blank=True)
    is_all_day = models.BooleanField(default=True)

    asset_type = models.CharField(max_length=10, choices=AssetType.choices, default=AssetType.PERSONAL)
    category = models.CharField(max_length=20, choices=ScheduleCategory.choices, default=ScheduleCategory.ETC)
    memo = models.CharField(max_length=500, null=True, blank=True)

    # Series bookkeeping, fixed at creation
    repeat_type = models.CharField(max_length=10, choices=RepeatType.choices, default=RepeatType.NONE)
    repeat_group_id = models.UUIDField(null=True, blank=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ScheduleQuerySet.as_manager()

    class Meta:
        db_table = 'schedules'
        indexes = [
            models.Index(fields=['group', 'start_date'], name='idx_schedule_group_start'),
        ]
        ordering = ['start_date', 'start_time']

    def __str__(self):
        return f"{self.title} ({self.start_date})"

    def clean(self):
        failure = validate_schedule(
            title=self.title,
            start_date=self.start_date,
            end_date=self.end_date,
            is_all_day=self.is_all_day,
            start_time=self.start_time,
            end_time=self.end_time,
            memo=self.memo,
        )
        if failure:
            raise ValidationError({failure.field: failure.reason})

        if self.is_all_day:
            self.start_time = None
            self.end_time = None

    @property
    def is_repeating(self):
        return self.repeat_type != RepeatType.NONE
