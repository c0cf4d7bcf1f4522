"""
Daily milk services layer.

- allocation: daily entries and their per-employee split
- delivery: recording deliveries against allocations
- verification: end-of-day verification
"""

from .exceptions import (
    DailyMilkServiceError,
    DailyEntryNotFoundError,
    AllocationNotFoundError,
    DuplicateEntryError,
    OverAllocationError,
    DuplicateDeliveryError,
    NotAssignedError,
    QuotaExceededError,
)

from .allocation import (
    create_daily_entry,
    get_entry_by_date,
    list_entries,
)

from .delivery import (
    record_delivery,
    list_deliveries,
    get_employee_quota,
)

from .verification import (
    verify_employee_day,
)


__all__ = [
    # Exceptions
    'DailyMilkServiceError',
    'DailyEntryNotFoundError',
    'AllocationNotFoundError',
    'DuplicateEntryError',
    'OverAllocationError',
    'DuplicateDeliveryError',
    'NotAssignedError',
    'QuotaExceededError',

    # Allocation
    'create_daily_entry',
    'get_entry_by_date',
    'list_entries',

    # Delivery
    'record_delivery',
    'list_deliveries',
    'get_employee_quota',

    # Verification
    'verify_employee_day',
]
