"""
Expansion of repeating schedules into concrete sibling instances.

Pure date arithmetic; nothing here reads or writes the database.
"""

from calendar import monthrange
from datetime import date, timedelta
from typing import List, Optional

from apps.schedules.models import RepeatType, Schedule

# Upper bound on generated siblings per series (the seed is not counted)
MAX_REPEAT_INSTANCES = 365


def _add_months(current: date, months: int) -> date:
    month_index = current.month - 1 + months
    year = current.year + month_index // 12
    month = month_index % 12 + 1

    # Jan 31 + 1 month lands on the last day of February
    day = min(current.day, monthrange(year, month)[1])
    return date(year, month, day)


def _add_years(current: date, years: int) -> date:
    year = current.year + years
    day = min(current.day, monthrange(year, current.month)[1])
    return date(year, current.month, day)


def next_occurrence(current: date, repeat_type: str) -> date:
    """
    Date of the occurrence following ``current``.

    MONTHLY and YEARLY clamp to the last valid day of the target month and
    step from ``current``, not from the series start, so a series started on
    Jan 31 continues Feb 28, Mar 28, ...

    Raises:
        ValueError: If repeat_type is NONE or unknown
    """
    if repeat_type == RepeatType.DAILY:
        return current + timedelta(days=1)
    if repeat_type == RepeatType.WEEKLY:
        return current + timedelta(weeks=1)
    if repeat_type == RepeatType.MONTHLY:
        return _add_months(current, 1)
    if repeat_type == RepeatType.YEARLY:
        return _add_years(current, 1)
    raise ValueError(f"No next occurrence for repeat type {repeat_type!r}")


def default_repeat_end(start_date: date) -> date:
    """One year after start_date; Feb 29 maps to Feb 28."""
    return _add_years(start_date, 1)


def expand_repeat_instances(seed: Schedule, repeat_end_date: Optional[date] = None) -> List[Schedule]:
    """
    Build the unsaved siblings of a repeating seed schedule.

    Occurrences start one step after ``seed.start_date`` and continue while
    they fall on or before ``repeat_end_date`` (default: one year after the
    seed), stopping silently after MAX_REPEAT_INSTANCES. Multi-day seeds
    keep their span on every sibling. Each sibling points at the seed
    through ``repeat_group_id``.

    Returns:
        List of unsaved Schedule instances, empty for non-repeating seeds
    """
    if seed.repeat_type == RepeatType.NONE:
        return []

    duration = None
    if seed.end_date is not None:
        duration = seed.end_date - seed.start_date

    effective_end = repeat_end_date or default_repeat_end(seed.start_date)

    instances = []
    current = next_occurrence(seed.start_date, seed.repeat_type)

    while current <= effective_end and len(instances) < MAX_REPEAT_INSTANCES:
        instances.append(
            Schedule(
                group_id=seed.group_id,
                user_id=seed.user_id,
                title=seed.title,
                start_date=current,
                end_date=current + duration if duration is not None else None,
                start_time=seed.start_time,
                end_time=seed.end_time,
                is_all_day=seed.is_all_day,
                asset_type=seed.asset_type,
                category=seed.category,
                memo=seed.memo,
                repeat_type=seed.repeat_type,
                repeat_group_id=seed.id,
            )
        )
        current = next_occurrence(current, seed.repeat_type)

    return instances
