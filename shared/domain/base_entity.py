"""
Base entity classes for DDD.
"""
from abc import ABC
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class AggregateRoot(ABC):
    """
    Aggregate root base class with identity.

    The id and created_at are stamped once at construction and exposed as
    read-only properties. Passing them explicitly is reserved for
    rehydrating an aggregate that already exists in storage.
    """

    def __init__(self, id: Optional[UUID] = None, created_at: Optional[datetime] = None):
        self._id = id if id is not None else uuid4()
        self._created_at = created_at if created_at is not None else utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AggregateRoot):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
