"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 3 users (alice, bob, charlie), each with a personal calendar
- 1 shared calendar hosted by alice with bob as guest and charlie invited
- Asset sources for the shared calendar
- Schedules, including a weekly repeating series
- Transactions for the current month
"""

from datetime import date, time, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, AVAILABLE_COLORS
from apps.accounts.services import register_user
from apps.assets.models import AssetSourceType
from apps.assets.services import create_asset_source
from apps.core.choices import AssetType, TransactionType
from apps.groups.models import Group
from apps.groups.services import accept_invite, create_shared_group, invite_member
from apps.schedules.models import RepeatType, ScheduleCategory
from apps.schedules.services import create_schedule
from apps.transactions.services import create_transaction

SAMPLE_EMAILS = ['alice@example.com', 'bob@example.com', 'charlie@example.com']
SAMPLE_PASSWORD = 'password123!'


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing sample data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing sample data...')
            self.clear_data()

        if User.objects.filter(email__in=SAMPLE_EMAILS).exists():
            self.stdout.write(self.style.WARNING('Sample users already exist, use --clear to recreate.'))
            return

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        group = self.create_shared_calendar(users)
        sources = self.create_asset_sources(group, users['alice'])
        self.create_schedules(group, users)
        self.create_transactions(group, users, sources)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        for email in SAMPLE_EMAILS:
            self.stdout.write(f'  {email} / {SAMPLE_PASSWORD}')

    def clear_data(self):
        """Delete sample users; their groups and records cascade."""
        Group.objects.filter(host__email__in=SAMPLE_EMAILS).delete()
        User.objects.filter(email__in=SAMPLE_EMAILS).delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        users = {}
        for index, email in enumerate(SAMPLE_EMAILS):
            nickname = email.split('@')[0]
            users[nickname] = register_user(
                email=email,
                password=SAMPLE_PASSWORD,
                nickname=nickname,
                color_code=AVAILABLE_COLORS[index],
            )
        return users

    def create_shared_calendar(self, users):
        self.stdout.write('  Creating shared calendar...')

        group = create_shared_group(
            user=users['alice'],
            name='Our home',
            budget_start_day=25,
        )

        invite = invite_member(group_id=group.id, inviter=users['alice'], invitee_email=users['bob'].email)
        accept_invite(invite_id=invite.id, user=users['bob'])

        # Left pending so the invite inbox has something to show
        invite_member(group_id=group.id, inviter=users['alice'], invitee_email=users['charlie'].email)

        return group

    def create_asset_sources(self, group, user):
        self.stdout.write('  Creating asset sources...')

        return {
            'cash': create_asset_source(group_id=group.id, user=user, name='Wallet', type=AssetSourceType.CASH),
            'card': create_asset_source(
                group_id=group.id,
                user=user,
                name='Joint card',
                type=AssetSourceType.CARD,
                description='Shared household card',
            ),
        }

    def create_schedules(self, group, users):
        self.stdout.write('  Creating schedules...')

        today = date.today()

        create_schedule(
            group_id=group.id,
            user=users['alice'],
            title='Weekly groceries',
            start_date=today,
            is_all_day=False,
            start_time=time(18, 0),
            end_time=time(19, 0),
            asset_type=AssetType.JOINT,
            category=ScheduleCategory.ETC,
            repeat_type=RepeatType.WEEKLY,
            repeat_end_date=today + timedelta(weeks=12),
        )
        create_schedule(
            group_id=group.id,
            user=users['bob'],
            title='Dentist',
            start_date=today + timedelta(days=3),
            is_all_day=False,
            start_time=time(9, 30),
            end_time=time(10, 0),
            category=ScheduleCategory.HOSPITAL,
        )
        create_schedule(
            group_id=group.id,
            user=users['alice'],
            title='Trip to the coast',
            start_date=today + timedelta(days=10),
            end_date=today + timedelta(days=13),
            asset_type=AssetType.JOINT,
            category=ScheduleCategory.TRAVEL,
            memo='Book the hotel by Friday',
        )
        create_schedule(
            group_id=group.id,
            user=users['bob'],
            title='Anniversary',
            start_date=today + timedelta(days=30),
            category=ScheduleCategory.ANNIVERSARY,
            repeat_type=RepeatType.YEARLY,
        )

    def create_transactions(self, group, users, sources):
        self.stdout.write('  Creating transactions...')

        first_of_month = date.today().replace(day=1)

        entries = [
            (users['alice'], TransactionType.INCOME, AssetType.PERSONAL, 'Salary', Decimal('3200.00'), None, 0),
            (users['bob'], TransactionType.INCOME, AssetType.PERSONAL, 'Salary', Decimal('2900.00'), None, 0),
            (users['alice'], TransactionType.EXPENSE, AssetType.JOINT, 'Food', Decimal('84.30'), 'card', 1),
            (users['bob'], TransactionType.EXPENSE, AssetType.JOINT, 'Food', Decimal('42.10'), 'cash', 3),
            (users['bob'], TransactionType.EXPENSE, AssetType.PERSONAL, 'Transport', Decimal('25.00'), 'cash', 4),
            (users['alice'], TransactionType.EXPENSE, AssetType.JOINT, 'Shopping', Decimal('129.99'), 'card', 6),
        ]

        for user, transaction_type, asset_type, category_name, amount, source, day_offset in entries:
            create_transaction(
                group_id=group.id,
                user=user,
                amount=amount,
                transaction_type=transaction_type,
                asset_type=asset_type,
                category_name=category_name,
                date=first_of_month + timedelta(days=day_offset),
                asset_source_id=sources[source].id if source else None,
            )
