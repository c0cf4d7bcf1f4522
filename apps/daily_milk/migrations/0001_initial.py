import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('consumers', '0001_initial'),
        ('employees', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='DailyMilkEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('entry_date', models.DateField(unique=True)),
                ('total_milk_collected', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'daily_milk_entries',
                'ordering': ['-entry_date'],
                'verbose_name_plural': 'daily milk entries',
            },
        ),
        migrations.CreateModel(
            name='EmployeeAllocation',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('allocated_quantity', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('delivered_quantity', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10)),
                ('remaining_quantity', models.DecimalField(decimal_places=2, max_digits=10)),
                ('is_verified', models.BooleanField(default=False)),
                ('verified_at', models.DateTimeField(blank=True, null=True)),
                ('position', models.PositiveIntegerField(default=0)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='allocations', to='employees.employee')),
                ('entry', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='allocations', to='daily_milk.dailymilkentry')),
            ],
            options={
                'db_table': 'employee_allocations',
                'ordering': ['position'],
                'constraints': [models.UniqueConstraint(fields=('entry', 'employee'), name='unique_entry_employee')],
            },
        ),
        migrations.CreateModel(
            name='Delivery',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('delivery_date', models.DateField()),
                ('quantity_delivered', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('per_liter_rate', models.DecimalField(decimal_places=2, max_digits=8)),
                ('recorded_at', models.DateTimeField(auto_now_add=True)),
                ('consumer', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='deliveries', to='consumers.consumer')),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='deliveries', to='employees.employee')),
            ],
            options={
                'db_table': 'deliveries',
                'ordering': ['-delivery_date', '-recorded_at'],
                'verbose_name_plural': 'deliveries',
                'indexes': [
                    models.Index(fields=['employee', 'delivery_date'], name='delivery_employee_date_idx'),
                    models.Index(fields=['delivery_date'], name='delivery_date_idx'),
                ],
                'constraints': [models.UniqueConstraint(fields=('consumer', 'delivery_date'), name='unique_consumer_delivery_date')],
            },
        ),
    ]
