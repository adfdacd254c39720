# Generated manually for asset sources

import uuid
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('groups', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='AssetSource',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=30)),
                ('type', models.CharField(choices=[('CASH', 'Cash'), ('BANK', 'Bank account'), ('CARD', 'Card'), ('ETC', 'Other')], editable=False, max_length=10)),
                ('description', models.CharField(blank=True, max_length=100, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='asset_sources', to='groups.group')),
            ],
            options={
                'db_table': 'asset_sources',
                'ordering': ['created_at'],
            },
        ),
    ]
