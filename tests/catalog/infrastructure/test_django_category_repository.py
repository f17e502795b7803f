"""
Django category repository tests.
"""
from datetime import timedelta
from uuid import uuid4

import pytest

from apps.catalog.domain.entities.category import Category
from apps.catalog.infrastructure.models import CategoryModel
from apps.catalog.infrastructure.repositories import DjangoCategoryRepository

pytestmark = pytest.mark.django_db


@pytest.fixture
def repository():
    return DjangoCategoryRepository()


def test_save_and_find_by_id(repository, valid_category):
    repository.save(valid_category)

    found = repository.find_by_id(valid_category.id)

    assert found == valid_category
    assert found.name == valid_category.name
    assert found.description == valid_category.description
    assert found.is_active is True
    assert found.created_at == valid_category.created_at


def test_save_existing_updates_row(repository, valid_category):
    repository.save(valid_category)
    valid_category.update('New Name')
    valid_category.deactivate()

    repository.save(valid_category)

    assert CategoryModel.objects.count() == 1
    found = repository.find_by_id(valid_category.id)
    assert found.name == 'New Name'
    assert found.is_active is False


def test_find_by_id_missing(repository):
    assert repository.find_by_id(uuid4()) is None


def test_find_all_filters_and_paginates(repository):
    for index in range(3):
        repository.save(Category.create(f'Category {index}', ''))
    repository.save(Category.create('Inactive Category', '', is_active=False))

    assert len(repository.find_all()) == 4
    assert len(repository.find_all(is_active=True)) == 3
    assert [c.name for c in repository.find_all(is_active=False)] == ['Inactive Category']
    assert len(repository.find_all(offset=1, limit=2)) == 2


def test_find_all_newest_first(repository):
    older = Category.create('Older Category', '')
    newer = Category.restore(
        id=uuid4(),
        name='Newer Category',
        description='',
        is_active=True,
        created_at=older.created_at + timedelta(seconds=1),
    )
    repository.save(older)
    repository.save(newer)

    assert [c.name for c in repository.find_all()] == ['Newer Category', 'Older Category']


def test_delete(repository, valid_category):
    repository.save(valid_category)

    assert repository.delete(valid_category.id) is True
    assert repository.delete(valid_category.id) is False
    assert repository.find_by_id(valid_category.id) is None
