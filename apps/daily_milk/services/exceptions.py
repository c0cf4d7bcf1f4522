"""
Domain-specific exceptions for the daily milk workflow.

Exception Hierarchy:
    DailyMilkServiceError
    ├── DailyEntryNotFoundError (404)
    ├── AllocationNotFoundError (404)
    ├── DuplicateEntryError
    ├── OverAllocationError
    ├── DuplicateDeliveryError
    ├── NotAssignedError
    └── QuotaExceededError
"""

from apps.core.exceptions import ServiceError, NotFoundError


class DailyMilkServiceError(ServiceError):
    """Base exception for daily milk services."""
    pass


class DailyEntryNotFoundError(NotFoundError, DailyMilkServiceError):
    """Raised when no daily milk entry exists for a date."""
    default_message = 'No milk entry found for this date'


class AllocationNotFoundError(NotFoundError, DailyMilkServiceError):
    """Raised when an employee has no allocation on a date."""
    default_message = 'Employee not allocated for this date'


class DuplicateEntryError(DailyMilkServiceError):
    """Raised when an entry already exists for the date or an employee is listed twice."""
    default_message = 'Entry already exists for this date'


class OverAllocationError(DailyMilkServiceError):
    """Raised when allocations add up to more than was collected."""

    def __init__(self, total_allocated, total_collected):
        self.total_allocated = total_allocated
        self.total_collected = total_collected
        super().__init__(
            f"Total allocated ({total_allocated}L) cannot exceed "
            f"total collected ({total_collected}L)"
        )


class DuplicateDeliveryError(DailyMilkServiceError):
    """Raised when the consumer already has a delivery on the date."""
    default_message = 'Delivery already recorded for this consumer on this date'


class NotAssignedError(DailyMilkServiceError):
    """Raised when no active assignment links the employee and consumer."""
    default_message = 'This consumer is not assigned to this employee'


class QuotaExceededError(DailyMilkServiceError):
    """Raised when a delivery is larger than the employee's remaining allocation."""

    def __init__(self, remaining, attempted):
        self.remaining = remaining
        self.attempted = attempted
        super().__init__(
            f"Employee has only {remaining}L remaining quota "
            f"(attempted {attempted}L)"
        )
