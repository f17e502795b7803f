"""
Category use case tests against an in-memory repository.
"""
from uuid import uuid4

import pytest

from apps.catalog.application.dtos import (
    CategoryCreateDTO,
    CategoryDTO,
    CategoryListDTO,
    CategoryUpdateDTO,
)
from apps.catalog.application.use_cases import (
    ActivateCategoryUseCase,
    CreateCategoryUseCase,
    DeactivateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from apps.catalog.domain.exceptions import CategoryNotFoundError
from shared.domain import EntityValidationError


class TestCreateCategory:

    def test_create(self, category_repository, valid_category_data):
        result = CreateCategoryUseCase(category_repository).execute(
            CategoryCreateDTO(**valid_category_data)
        )

        assert result.success is True
        assert isinstance(result.data, CategoryDTO)
        assert result.data.name == valid_category_data['name']
        assert result.data.is_active is True
        assert result.data.id in category_repository.items

    def test_create_inactive(self, category_repository, valid_category_data):
        result = CreateCategoryUseCase(category_repository).execute(
            CategoryCreateDTO(**valid_category_data, is_active=False)
        )

        assert result.data.is_active is False

    def test_invalid_category_is_not_saved(self, category_repository):
        with pytest.raises(EntityValidationError) as exc_info:
            CreateCategoryUseCase(category_repository).execute(
                CategoryCreateDTO(name='ab', description='Category Description')
            )

        assert str(exc_info.value) == "Name should has at least 3 characters"
        assert category_repository.items == {}


class TestGetAndListCategories:

    def test_get(self, category_repository, valid_category):
        category_repository.save(valid_category)

        result = GetCategoryUseCase(category_repository).execute(valid_category.id)

        assert result.data.id == valid_category.id

    def test_get_missing(self, category_repository):
        with pytest.raises(CategoryNotFoundError):
            GetCategoryUseCase(category_repository).execute(uuid4())

    def test_list_filters_by_status(self, category_repository, valid_category_data):
        create = CreateCategoryUseCase(category_repository)
        create.execute(CategoryCreateDTO(**valid_category_data))
        create.execute(CategoryCreateDTO(name='Inactive One', description='', is_active=False))

        all_result = ListCategoriesUseCase(category_repository).execute(CategoryListDTO())
        active_result = ListCategoriesUseCase(category_repository).execute(
            CategoryListDTO(is_active=True)
        )

        assert len(all_result.data) == 2
        assert [dto.name for dto in active_result.data] == [valid_category_data['name']]


class TestUpdateCategory:

    def test_update(self, category_repository, valid_category):
        category_repository.save(valid_category)

        result = UpdateCategoryUseCase(category_repository).execute(
            CategoryUpdateDTO(id=valid_category.id, name='New Name', description='New Description')
        )

        assert result.data.name == 'New Name'
        assert result.data.description == 'New Description'

    def test_update_only_name(self, category_repository, valid_category):
        category_repository.save(valid_category)

        result = UpdateCategoryUseCase(category_repository).execute(
            CategoryUpdateDTO(id=valid_category.id, name='New Name')
        )

        assert result.data.name == 'New Name'
        assert result.data.description == 'Category Description'

    def test_update_invalid(self, category_repository, valid_category):
        category_repository.save(valid_category)

        with pytest.raises(EntityValidationError):
            UpdateCategoryUseCase(category_repository).execute(
                CategoryUpdateDTO(id=valid_category.id, name='   ')
            )

        assert category_repository.find_by_id(valid_category.id).name == 'Category Name'

    def test_update_missing(self, category_repository):
        with pytest.raises(CategoryNotFoundError):
            UpdateCategoryUseCase(category_repository).execute(
                CategoryUpdateDTO(id=uuid4(), name='New Name')
            )


class TestChangeCategoryStatus:

    def test_deactivate_then_activate(self, category_repository, valid_category):
        category_repository.save(valid_category)

        result = DeactivateCategoryUseCase(category_repository).execute(valid_category.id)
        assert result.data.is_active is False

        result = ActivateCategoryUseCase(category_repository).execute(valid_category.id)
        assert result.data.is_active is True

    @pytest.mark.parametrize('use_case', [ActivateCategoryUseCase, DeactivateCategoryUseCase])
    def test_missing(self, category_repository, use_case):
        with pytest.raises(CategoryNotFoundError):
            use_case(category_repository).execute(uuid4())


class TestDeleteCategory:

    def test_delete(self, category_repository, valid_category):
        category_repository.save(valid_category)

        result = DeleteCategoryUseCase(category_repository).execute(valid_category.id)

        assert result.success is True
        assert category_repository.find_by_id(valid_category.id) is None

    def test_delete_missing(self, category_repository):
        category_id = uuid4()

        with pytest.raises(CategoryNotFoundError) as exc_info:
            DeleteCategoryUseCase(category_repository).execute(category_id)

        assert exc_info.value.code == 'CATEGORY_NOT_FOUND'
        assert exc_info.value.entity_id == str(category_id)
