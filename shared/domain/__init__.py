# Shared domain module
from .base_entity import AggregateRoot
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    EntityValidationError,
    ValidationError,
)

__all__ = [
    'AggregateRoot',
    'DomainException',
    'EntityNotFoundError',
    'EntityValidationError',
    'ValidationError',
]
