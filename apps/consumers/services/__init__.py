"""
Consumers app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    ConsumersServiceError,
    ConsumerNotFoundError,
    ConsumerInUseError,
)

from .consumer_management import (
    get_consumer,
    list_consumers,
    list_areas,
    create_consumer,
    update_consumer,
    delete_consumer,
)


__all__ = [
    # Exceptions
    'ConsumersServiceError',
    'ConsumerNotFoundError',
    'ConsumerInUseError',

    # Consumer Management
    'get_consumer',
    'list_consumers',
    'list_areas',
    'create_consumer',
    'update_consumer',
    'delete_consumer',
]
