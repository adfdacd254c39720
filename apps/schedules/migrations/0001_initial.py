# Generated manually for calendar schedules

import uuid
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('groups', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Schedule',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=50)),
                ('start_date', models.DateField()),
                ('end_date', models.DateField(blank=True, null=True)),
                ('start_time', models.TimeField(blank=True, null=True)),
                ('end_time', models.TimeField(blank=True, null=True)),
                ('is_all_day', models.BooleanField(default=True)),
                ('asset_type', models.CharField(choices=[('PERSONAL', 'Personal'), ('JOINT', 'Joint')], default='PERSONAL', max_length=10)),
                ('category', models.CharField(choices=[('APPOINTMENT', 'Appointment'), ('ANNIVERSARY', 'Anniversary'), ('WORK', 'Work'), ('HOSPITAL', 'Hospital'), ('TRAVEL', 'Travel'), ('ETC', 'Other')], default='ETC', max_length=20)),
                ('memo', models.CharField(blank=True, max_length=500, null=True)),
                ('repeat_type', models.CharField(choices=[('NONE', 'None'), ('DAILY', 'Daily'), ('WEEKLY', 'Weekly'), ('MONTHLY', 'Monthly'), ('YEARLY', 'Yearly')], default='NONE', max_length=10)),
                ('repeat_group_id', models.UUIDField(blank=True, db_index=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='schedules', to='groups.group')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='schedules', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'schedules',
                'ordering': ['start_date', 'start_time'],
                'indexes': [models.Index(fields=['group', 'start_date'], name='idx_schedule_group_start')],
            },
        ),
    ]
