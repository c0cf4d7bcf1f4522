"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --days 14 --clear

This creates:
- 1 admin (admin / admin123)
- 3 employees (login: mobile number, password = mobile number)
- 9 consumers across 3 areas, each assigned to one employee
- A daily entry per day for the last ``--days`` days with deliveries
"""

import random
from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.assignments.models import Assignment
from apps.assignments.services import create_assignment
from apps.consumers.models import Consumer
from apps.consumers.services import create_consumer
from apps.daily_milk.models import DailyMilkEntry, Delivery
from apps.daily_milk.services import create_daily_entry, record_delivery
from apps.employees.models import Employee
from apps.employees.services import create_employee

EMPLOYEES = [
    ('Ravi Kumar', '9876543210', 'North'),
    ('Suresh Patel', '9123456789', 'South'),
    ('Lakshmi Iyer', '9012345678', 'East'),
]

CONSUMERS = [
    ('Anita Sharma', '9988776655', '12 MG Road', 'North', Decimal('60'), Decimal('2')),
    ('Rahul Verma', '9988776644', '3 Church Street', 'North', Decimal('60'), Decimal('1.5')),
    ('Pooja Nair', '9988776633', '88 Temple Road', 'North', Decimal('62'), Decimal('1')),
    ('Vikram Singh', '8877665544', '4 Lake View', 'South', Decimal('55'), Decimal('2')),
    ('Deepa Rao', '8877665533', '19 Station Road', 'South', Decimal('58'), Decimal('3')),
    ('Arjun Mehta', '8877665522', '7 Market Lane', 'South', Decimal('55'), Decimal('1')),
    ('Kavya Menon', '7766554433', '21 River Side', 'East', Decimal('60'), Decimal('2.5')),
    ('Sanjay Gupta', '7766554422', '5 Hill Top', 'East', Decimal('65'), Decimal('1')),
    ('Neha Joshi', '7766554411', '60 College Road', 'East', Decimal('60'), Decimal('2')),
]


class Command(BaseCommand):
    help = 'Create sample employees, consumers, assignments and deliveries'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )
        parser.add_argument(
            '--days',
            type=int,
            default=7,
            help='Number of past days to fill with entries and deliveries (default: 7)',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        admin = self.create_admin()
        employees = self.create_employees()
        consumers = self.create_consumers()
        self.create_assignments(employees, consumers)
        self.create_days(admin, employees, options['days'])

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin / admin123 (admin)')
        for name, mobile, _ in EMPLOYEES:
            self.stdout.write(f'  {mobile} / {mobile} ({name})')

    def clear_data(self):
        """Clear all milk data and employee logins (admins are kept)."""
        Delivery.objects.all().delete()
        DailyMilkEntry.objects.all().delete()
        Assignment.objects.all().delete()
        Consumer.objects.all().delete()
        User.objects.filter(employee_profile__isnull=False).delete()

    def create_admin(self):
        admin = User.objects.filter(username='admin').first()
        if admin is None:
            admin = User.objects.create_admin(username='admin', password='admin123', name='Administrator')
            self.stdout.write('  Created admin account')
        return admin

    def create_employees(self):
        employees = []
        for name, mobile, area in EMPLOYEES:
            employee = Employee.objects.filter(mobile_number=mobile).first()
            if employee is None:
                employee = create_employee(name=name, mobile_number=mobile, assigned_area=area)
            employees.append(employee)
        self.stdout.write(f'  {len(employees)} employees')
        return employees

    def create_consumers(self):
        consumers = []
        for full_name, mobile, address, area, rate, quota in CONSUMERS:
            consumer = Consumer.objects.filter(full_name=full_name, mobile_number=mobile).first()
            if consumer is None:
                consumer = create_consumer(
                    full_name=full_name,
                    mobile_number=mobile,
                    address=address,
                    area=area,
                    per_liter_rate=rate,
                    daily_milk_quota=quota,
                )
            consumers.append(consumer)
        self.stdout.write(f'  {len(consumers)} consumers')
        return consumers

    def create_assignments(self, employees, consumers):
        by_area = {employee.assigned_area: employee for employee in employees}
        created = 0
        for consumer in consumers:
            employee = by_area[consumer.area]
            if not Assignment.objects.filter(employee=employee, consumer=consumer).exists():
                create_assignment(
                    employee_id=employee.id,
                    consumer_id=consumer.id,
                    daily_milk_quota=consumer.daily_milk_quota,
                )
                created += 1
        self.stdout.write(f'  {created} assignments')

    def create_days(self, admin, employees, days):
        today = timezone.localdate()
        deliveries = 0

        for offset in range(days, 0, -1):
            day = today - timedelta(days=offset)
            if DailyMilkEntry.objects.filter(entry_date=day).exists():
                continue

            allocations = []
            for employee in employees:
                route_total = sum(
                    (a.daily_milk_quota for a in employee.assignments.filter(is_active=True)),
                    Decimal('0'),
                )
                allocations.append({
                    'employee_id': employee.id,
                    'allocated_quantity': route_total + Decimal('1'),
                })

            total = sum((a['allocated_quantity'] for a in allocations), Decimal('0'))
            create_daily_entry(
                entry_date=day,
                total_milk_collected=total + Decimal(random.randint(0, 3)),
                employee_allocations=allocations,
            )

            for employee in employees:
                for assignment in employee.assignments.filter(is_active=True).select_related('consumer'):
                    # Skip the odd day to make bills differ
                    if random.random() < 0.1:
                        continue
                    record_delivery(
                        consumer_id=assignment.consumer_id,
                        employee_id=employee.id,
                        delivery_date=day,
                        quantity=assignment.daily_milk_quota,
                        principal=admin,
                    )
                    deliveries += 1

        self.stdout.write(f'  {days} days, {deliveries} deliveries')
