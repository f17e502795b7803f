"""
Category entity (Aggregate Root).
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from shared.domain import AggregateRoot, EntityValidationError

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000


def validate_name(name: Optional[str]) -> None:
    """Check the name invariants in order, raising on the first failure."""
    if name is None or not name.strip():
        raise EntityValidationError("Name should not be empty or null", field="name")
    if len(name) < NAME_MIN_LENGTH:
        raise EntityValidationError("Name should has at least 3 characters", field="name")
    if len(name) > NAME_MAX_LENGTH:
        raise EntityValidationError("Name should has less then 255 characters", field="name")


def validate_description(description: Optional[str]) -> None:
    """Check the description invariants. Blank descriptions are allowed."""
    if description is None:
        raise EntityValidationError("Description should not be empty or null", field="description")
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise EntityValidationError(
            "Description should has less then 10.000 characters", field="description"
        )


class Category(AggregateRoot):
    """Catalog category that is valid for its whole lifetime."""

    def __init__(self, name: str, description: str, is_active: bool = True):
        super().__init__()
        self._validate(name, description)
        self._name = name
        self._description = description
        self._is_active = is_active

    @classmethod
    def create(cls, name: str, description: str, is_active: bool = True) -> 'Category':
        """Factory method to create a new category."""
        return cls(name=name, description=description, is_active=is_active)

    @classmethod
    def restore(
        cls,
        id: UUID,
        name: str,
        description: str,
        is_active: bool,
        created_at: datetime,
    ) -> 'Category':
        """Rebuild a stored category without re-running validation."""
        category = cls.__new__(cls)
        AggregateRoot.__init__(category, id=id, created_at=created_at)
        category._name = name
        category._description = description
        category._is_active = is_active
        return category

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def is_active(self) -> bool:
        return self._is_active

    def activate(self) -> None:
        """Activate the category."""
        self._validate(self._name, self._description)
        self._is_active = True

    def deactivate(self) -> None:
        """Deactivate the category."""
        self._validate(self._name, self._description)
        self._is_active = False

    def update(self, name: str, description: Optional[str] = None) -> None:
        """
        Update category information.

        The description is kept as-is when not given. Both fields are
        validated before either is written.
        """
        new_description = self._description if description is None else description
        self._validate(name, new_description)
        self._name = name
        self._description = new_description

    @staticmethod
    def _validate(name: Optional[str], description: Optional[str]) -> None:
        validate_name(name)
        validate_description(description)

    def __repr__(self) -> str:
        return (
            f"Category(id={self.id!r}, name={self._name!r}, "
            f"is_active={self._is_active!r})"
        )
