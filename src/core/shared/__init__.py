"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
- Base class para Domain Events
- Relógio UTC
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    ConflictError,
    BusinessRuleViolationError,
    InvalidStatusTransitionError,
    RepositoryError,
)
from .events import DomainEvent
from .interfaces import UnitOfWork, EventPublisher
from .clock import utc_now, hours_between

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "BusinessRuleViolationError",
    "InvalidStatusTransitionError",
    "RepositoryError",
    "DomainEvent",
    "UnitOfWork",
    "EventPublisher",
    "utc_now",
    "hours_between",
]
