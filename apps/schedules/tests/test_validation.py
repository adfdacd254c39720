"""
Unit tests for schedule field validation.

validate_schedule is pure, so none of these tests touch the database.
"""

import pytest
from datetime import date, time

from apps.schedules.validation import ValidationFailure, validate_schedule


def _validate(**overrides):
    fields = {
        'title': 'Dentist',
        'start_date': date(2026, 2, 1),
        'end_date': None,
        'is_all_day': True,
        'start_time': None,
        'end_time': None,
    }
    fields.update(overrides)
    return validate_schedule(**fields)


class TestTitle:

    @pytest.mark.parametrize('title', [None, '', '   ', '\t\n'])
    def test_blank_title_rejected(self, title):
        assert _validate(title=title) == ValidationFailure('title', 'Title is required')

    def test_title_at_limit_accepted(self):
        assert _validate(title='x' * 50) is None

    def test_title_over_limit_rejected(self):
        failure = _validate(title='x' * 51)

        assert failure.field == 'title'


class TestDates:

    def test_single_day_without_end_date(self):
        assert _validate(end_date=None) is None

    def test_end_date_equal_to_start_date(self):
        assert _validate(end_date=date(2026, 2, 1)) is None

    @pytest.mark.parametrize('start, end', [
        (date(2026, 2, 1), date(2026, 1, 31)),
        (date(2026, 1, 1), date(2025, 12, 31)),
        (date(2026, 3, 1), date(2026, 2, 28)),
    ])
    def test_end_date_before_start_date_rejected(self, start, end):
        failure = _validate(start_date=start, end_date=end)

        assert failure.field == 'end_date'


class TestTimes:

    def test_all_day_ignores_missing_times(self):
        assert _validate(is_all_day=True, start_time=None, end_time=None) is None

    def test_timed_requires_start_time(self):
        failure = _validate(is_all_day=False, start_time=None, end_time=time(10, 0))

        assert failure.field == 'start_time'

    def test_timed_requires_end_time(self):
        failure = _validate(is_all_day=False, start_time=time(9, 0), end_time=None)

        assert failure.field == 'end_time'

    def test_start_time_after_end_time_allowed(self):
        """Times are not compared; overnight shifts are valid."""
        assert _validate(is_all_day=False, start_time=time(22, 0), end_time=time(6, 0)) is None


class TestMemo:

    def test_memo_at_limit_accepted(self):
        assert _validate(memo='m' * 500) is None

    def test_memo_over_limit_rejected(self):
        failure = _validate(memo='m' * 501)

        assert failure.field == 'memo'

    def test_title_checked_before_memo(self):
        assert _validate(title='', memo='m' * 501).field == 'title'


def test_validation_is_repeatable():
    """Same input, same answer; nothing is mutated."""
    fields = {
        'title': '',
        'start_date': date(2026, 2, 1),
        'end_date': date(2026, 1, 1),
        'is_all_day': False,
        'start_time': None,
        'end_time': None,
    }
    snapshot = dict(fields)

    assert validate_schedule(**fields) == validate_schedule(**fields)
    assert fields == snapshot
