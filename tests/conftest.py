"""
Pytest configuration and fixtures.
"""
from typing import Dict, List, Optional
from uuid import UUID

import pytest

from apps.catalog.domain.entities.category import Category
from apps.catalog.domain.repositories.category_repository import CategoryRepository


class InMemoryCategoryRepository(CategoryRepository):
    """Dict-backed repository for use case tests."""

    def __init__(self):
        self.items: Dict[UUID, Category] = {}

    def save(self, category: Category) -> Category:
        self.items[category.id] = category
        return category

    def find_by_id(self, category_id: UUID) -> Optional[Category]:
        return self.items.get(category_id)

    def find_all(
        self,
        is_active: Optional[bool] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Category]:
        categories = sorted(self.items.values(), key=lambda c: c.created_at, reverse=True)
        if is_active is not None:
            categories = [c for c in categories if c.is_active == is_active]
        return categories[offset:offset + limit]

    def delete(self, category_id: UUID) -> bool:
        return self.items.pop(category_id, None) is not None


@pytest.fixture
def valid_category_data():
    """Name and description that satisfy every category invariant."""
    return {'name': 'Category Name', 'description': 'Category Description'}


@pytest.fixture
def valid_category(valid_category_data):
    return Category.create(**valid_category_data)


@pytest.fixture
def saved_category(valid_category):
    """A valid category persisted through the Django repository."""
    from apps.catalog.infrastructure.repositories import DjangoCategoryRepository
    return DjangoCategoryRepository().save(valid_category)


@pytest.fixture
def category_repository():
    return InMemoryCategoryRepository()


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, django_user_model):
    """Create an authenticated API client."""
    user = django_user_model.objects.create_user(
        username='testuser',
        email='test@example.com',
        password='testpass123',
    )
    api_client.force_authenticate(user=user)
    return api_client
