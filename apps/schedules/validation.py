"""
Schedule field invariants.

``validate_schedule`` is pure: it neither raises nor touches the database,
so the service layer and ``Schedule.clean`` share one rule set.
"""

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

TITLE_MAX_LENGTH = 50
MEMO_MAX_LENGTH = 500


@dataclass(frozen=True)
class ValidationFailure:
    field: str
    reason: str


def validate_schedule(
    *,
    title: Optional[str],
    start_date: date,
    end_date: Optional[date],
    is_all_day: bool,
    start_time: Optional[time],
    end_time: Optional[time],
    memo: Optional[str] = None
) -> Optional[ValidationFailure]:
    """
    Check a candidate schedule and return the first broken rule, or None.

    Rules, in order:
        1. title is non-blank and at most 50 characters
        2. end_date, when given, is not before start_date
        3. timed (not all-day) schedules carry both start_time and end_time
        4. memo, when given, is at most 500 characters

    start_time is not required to precede end_time.
    """
    if not title or not title.strip():
        return ValidationFailure('title', 'Title is required')
    if len(title) > TITLE_MAX_LENGTH:
        return ValidationFailure('title', f'Title must be at most {TITLE_MAX_LENGTH} characters')

    if end_date is not None and end_date < start_date:
        return ValidationFailure('end_date', 'End date must not be before start date')

    if not is_all_day:
        if start_time is None:
            return ValidationFailure('start_time', 'Start time is required unless the schedule is all-day')
        if end_time is None:
            return ValidationFailure('end_time', 'End time is required unless the schedule is all-day')

    if memo is not None and len(memo) > MEMO_MAX_LENGTH:
        return ValidationFailure('memo', f'Memo must be at most {MEMO_MAX_LENGTH} characters')

    return None
