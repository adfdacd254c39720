"""
Schedules app services layer.

Calendar schedule CRUD and the expansion of repeating schedules.
"""

from .exceptions import (
    ScheduleNotFoundError,
    InvalidScheduleError,
)

from .recurrence import (
    MAX_REPEAT_INSTANCES,
    default_repeat_end,
    expand_repeat_instances,
    next_occurrence,
)

from .schedule_management import (
    create_schedule,
    get_schedules_by_date_range,
    get_schedule_by_id,
    update_schedule,
    delete_schedule,
    delete_repeat_group,
)


__all__ = [
    # Exceptions
    'ScheduleNotFoundError',
    'InvalidScheduleError',

    # Recurrence
    'MAX_REPEAT_INSTANCES',
    'default_repeat_end',
    'expand_repeat_instances',
    'next_occurrence',

    # Schedule Management
    'create_schedule',
    'get_schedules_by_date_range',
    'get_schedule_by_id',
    'update_schedule',
    'delete_schedule',
    'delete_repeat_group',
]
