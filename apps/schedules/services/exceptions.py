"""Domain-specific exceptions for schedules services."""

from apps.core.exceptions import InvalidInputError, NotFoundError


class ScheduleNotFoundError(NotFoundError):
    """Raised when a schedule or repeat series does not exist."""

    code = 'SCHEDULE_NOT_FOUND'

    def __init__(self, schedule_id):
        self.schedule_id = schedule_id
        super().__init__(f"Schedule not found: {schedule_id}")


class InvalidScheduleError(InvalidInputError):
    """Raised when schedule fields break schedule invariants."""

    code = 'INVALID_SCHEDULE'

    def __init__(self, field, reason):
        self.field = field
        super().__init__(reason)
