from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from apps.core.choices import AssetType
from .models import RepeatType, Schedule, ScheduleCategory


class ScheduleSerializer(serializers.ModelSerializer):
    """Read serializer for schedules."""

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Schedule
        fields = [
            'id',
            'group',
            'user',
            'title',
            'start_date',
            'end_date',
            'start_time',
            'end_time',
            'is_all_day',
            'asset_type',
            'category',
            'memo',
            'repeat_type',
            'repeat_group_id',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ScheduleWriteSerializer(serializers.Serializer):
    """
    Input fields shared by create and update.

    Only types are checked here; schedule invariants (title length, date
    order, required times) are enforced by the service layer.
    """

    title = serializers.CharField(trim_whitespace=False)
    start_date = serializers.DateField()
    end_date = serializers.DateField(required=False, allow_null=True, default=None)
    start_time = serializers.TimeField(required=False, allow_null=True, default=None)
    end_time = serializers.TimeField(required=False, allow_null=True, default=None)
    is_all_day = serializers.BooleanField(default=True)
    asset_type = serializers.ChoiceField(choices=AssetType.choices, default=AssetType.PERSONAL)
    category = serializers.ChoiceField(choices=ScheduleCategory.choices, default=ScheduleCategory.ETC)
    memo = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=500, default=None)


class ScheduleCreateSerializer(ScheduleWriteSerializer):
    """Input serializer for creating a schedule or a repeating series."""

    repeat_type = serializers.ChoiceField(choices=RepeatType.choices, default=RepeatType.NONE)
    repeat_end_date = serializers.DateField(required=False, allow_null=True, default=None)


class ScheduleRangeQuerySerializer(serializers.Serializer):
    """Query parameters for listing schedules in a date range."""

    start_date = serializers.DateField()
    end_date = serializers.DateField()
    user_id = serializers.UUIDField(required=False)
    asset_type = serializers.ChoiceField(choices=AssetType.choices, required=False)


class RepeatGroupDeleteSerializer(serializers.Serializer):
    deleted = serializers.IntegerField()
