import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models

import apps.core.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('employees', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Consumer',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('full_name', models.CharField(max_length=100)),
                ('mobile_number', models.CharField(max_length=10, validators=[apps.core.validators.mobile_number_validator])),
                ('address', models.TextField()),
                ('area', models.CharField(max_length=100)),
                ('per_liter_rate', models.DecimalField(decimal_places=2, max_digits=8, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('daily_milk_quota', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('assigned_employee', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='consumers', to='employees.employee')),
            ],
            options={
                'db_table': 'consumers',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['area'], name='consumers_area_idx'),
                    models.Index(fields=['is_active'], name='consumers_active_idx'),
                ],
            },
        ),
    ]
