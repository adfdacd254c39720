"""
Schedule management service.

Create, query, update and delete calendar schedules. Every operation
checks group membership before it reads or writes schedule rows.
"""

import logging
from datetime import date, time
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.core.choices import AssetType
from apps.core.querysets import in_group
from apps.groups.services.access import find_group, verify_group_access
from apps.schedules.models import RepeatType, Schedule, ScheduleCategory
from apps.schedules.validation import validate_schedule

from .exceptions import InvalidScheduleError, ScheduleNotFoundError
from .recurrence import expand_repeat_instances

logger = logging.getLogger(__name__)


def _check_fields(**fields) -> None:
    failure = validate_schedule(**fields)
    if failure:
        raise InvalidScheduleError(failure.field, failure.reason)


def create_schedule(
    *,
    group_id: UUID,
    user: User,
    title: str,
    start_date: date,
    end_date: Optional[date] = None,
    start_time: Optional[time] = None,
    end_time: Optional[time] = None,
    is_all_day: bool = True,
    asset_type: str = AssetType.PERSONAL,
    category: str = ScheduleCategory.ETC,
    memo: Optional[str] = None,
    repeat_type: str = RepeatType.NONE,
    repeat_end_date: Optional[date] = None
) -> Schedule:
    """
    Create a schedule, expanding it into a series when it repeats.

    The seed row and all generated siblings are written in one transaction,
    so either the whole series exists or none of it does.

    Args:
        group_id: Group the schedule belongs to
        user: Author, must be an accepted member
        repeat_end_date: Last date a sibling may start on (default: one year
            after start_date)

    Returns:
        The seed Schedule; for a series its repeat_group_id equals its id

    Raises:
        GroupNotFoundError: If group doesn't exist
        GroupAccessDeniedError: If user is not an accepted member
        InvalidScheduleError: If fields break schedule invariants
    """
    group = find_group(group_id=group_id)
    verify_group_access(group_id=group.id, user_id=user.id)

    _check_fields(
        title=title,
        start_date=start_date,
        end_date=end_date,
        is_all_day=is_all_day,
        start_time=start_time,
        end_time=end_time,
        memo=memo,
    )

    if is_all_day:
        start_time = None
        end_time = None

    with transaction.atomic():
        seed = Schedule.objects.create(
            group=group,
            user=user,
            title=title,
            start_date=start_date,
            end_date=end_date,
            start_time=start_time,
            end_time=end_time,
            is_all_day=is_all_day,
            asset_type=asset_type,
            category=category,
            memo=memo,
            repeat_type=repeat_type,
        )

        if seed.is_repeating:
            seed.repeat_group_id = seed.id
            seed.save(update_fields=['repeat_group_id'])

            siblings = expand_repeat_instances(seed, repeat_end_date)
            Schedule.objects.bulk_create(siblings)

            logger.info(
                "Created %s series %s with %d siblings in group %s",
                repeat_type, seed.id, len(siblings), group.id,
            )
        else:
            logger.info("Created schedule %s in group %s", seed.id, group.id)

    return seed


def get_schedules_by_date_range(
    *,
    group_id: UUID,
    user: User,
    start_date: date,
    end_date: date,
    filter_user_id: Optional[UUID] = None,
    filter_asset_type: Optional[str] = None
) -> QuerySet:
    """
    Schedules of a group overlapping the inclusive range [start_date, end_date].

    At most one filter is applied: when filter_user_id is given,
    filter_asset_type is ignored. Results are ordered by start_date, then
    start_time with all-day (null) times first.

    Raises:
        GroupAccessDeniedError: If user is not an accepted member
    """
    verify_group_access(group_id=group_id, user_id=user.id)

    schedules = (
        Schedule.objects
        .filter(group_id=group_id)
        .overlapping(start_date, end_date)
    )

    if filter_user_id is not None:
        schedules = schedules.filter(user_id=filter_user_id)
    elif filter_asset_type is not None:
        schedules = schedules.filter(asset_type=filter_asset_type)

    return schedules.select_related('user').chronological()


def _get_schedule(schedule_id: UUID, group_id: Optional[UUID] = None) -> Schedule:
    try:
        return in_group(Schedule.objects.select_related('user'), group_id).get(id=schedule_id)
    except Schedule.DoesNotExist:
        raise ScheduleNotFoundError(schedule_id)


def get_schedule_by_id(*, schedule_id: UUID, user: User, group_id: Optional[UUID] = None) -> Schedule:
    """
    Get a single schedule.

    When group_id is given, a schedule of any other group is reported as
    missing.

    Raises:
        ScheduleNotFoundError: If schedule doesn't exist (in group_id, when given)
        GroupAccessDeniedError: If user is not a member of its group
    """
    schedule = _get_schedule(schedule_id, group_id)
    verify_group_access(group_id=schedule.group_id, user_id=user.id)
    return schedule


@transaction.atomic
def update_schedule(
    *,
    schedule_id: UUID,
    user: User,
    title: str,
    start_date: date,
    end_date: Optional[date],
    start_time: Optional[time],
    end_time: Optional[time],
    is_all_day: bool,
    asset_type: str,
    category: str,
    memo: Optional[str],
    group_id: Optional[UUID] = None
) -> Schedule:
    """
    Replace the editable fields of one schedule instance.

    Series bookkeeping (repeat_type, repeat_group_id) never changes, and
    siblings of a repeating schedule are left untouched.

    Raises:
        ScheduleNotFoundError: If schedule doesn't exist (in group_id, when given)
        GroupAccessDeniedError: If user is not a member of its group
        InvalidScheduleError: If fields break schedule invariants
    """
    try:
        schedule = in_group(Schedule.objects.select_for_update(), group_id).get(id=schedule_id)
    except Schedule.DoesNotExist:
        raise ScheduleNotFoundError(schedule_id)

    verify_group_access(group_id=schedule.group_id, user_id=user.id)

    _check_fields(
        title=title,
        start_date=start_date,
        end_date=end_date,
        is_all_day=is_all_day,
        start_time=start_time,
        end_time=end_time,
        memo=memo,
    )

    schedule.title = title
    schedule.start_date = start_date
    schedule.end_date = end_date
    schedule.start_time = None if is_all_day else start_time
    schedule.end_time = None if is_all_day else end_time
    schedule.is_all_day = is_all_day
    schedule.asset_type = asset_type
    schedule.category = category
    schedule.memo = memo

    schedule.save(update_fields=[
        'title',
        'start_date',
        'end_date',
        'start_time',
        'end_time',
        'is_all_day',
        'asset_type',
        'category',
        'memo',
        'updated_at',
    ])

    return schedule


@transaction.atomic
def delete_schedule(*, schedule_id: UUID, user: User, group_id: Optional[UUID] = None) -> None:
    """
    Delete one schedule instance; other members of its series remain.

    Raises:
        ScheduleNotFoundError: If schedule doesn't exist (in group_id, when given)
        GroupAccessDeniedError: If user is not a member of its group
    """
    schedule = _get_schedule(schedule_id, group_id)
    verify_group_access(group_id=schedule.group_id, user_id=user.id)

    schedule.delete()
    logger.info("Deleted schedule %s", schedule_id)


@transaction.atomic
def delete_repeat_group(*, repeat_group_id: UUID, user: User, group_id: Optional[UUID] = None) -> int:
    """
    Delete every instance of a repeating series.

    Returns:
        Number of deleted schedules

    Raises:
        ScheduleNotFoundError: If no schedule carries repeat_group_id
        GroupAccessDeniedError: If user is not a member of the series' group
    """
    series = in_group(Schedule.objects.for_repeat_group(repeat_group_id), group_id)

    first = series.order_by('start_date').first()
    if first is None:
        raise ScheduleNotFoundError(repeat_group_id)

    verify_group_access(group_id=first.group_id, user_id=user.id)

    _, per_model = series.delete()
    deleted = per_model.get(Schedule._meta.label, 0)
    logger.info("Deleted series %s (%d schedules)", repeat_group_id, deleted)
    return deleted
