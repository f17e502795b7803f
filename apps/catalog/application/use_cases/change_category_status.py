"""
Activate / deactivate category use cases.
"""
import logging
from dataclasses import dataclass
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import CategoryNotFoundError
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryDTO

logger = logging.getLogger(__name__)


@dataclass
class ActivateCategoryUseCase(UseCase[UUID, CategoryDTO]):
    """Use case for activating a category."""

    category_repository: CategoryRepository

    def execute(self, input_dto: UUID) -> UseCaseResult[CategoryDTO]:
        category = self.category_repository.find_by_id(input_dto)
        if category is None:
            raise CategoryNotFoundError(input_dto)

        category.activate()

        saved_category = self.category_repository.save(category)
        logger.info(f"Category activated: {saved_category.id}")

        return UseCaseResult.ok(CategoryDTO.from_entity(saved_category))


@dataclass
class DeactivateCategoryUseCase(UseCase[UUID, CategoryDTO]):
    """Use case for deactivating a category."""

    category_repository: CategoryRepository

    def execute(self, input_dto: UUID) -> UseCaseResult[CategoryDTO]:
        category = self.category_repository.find_by_id(input_dto)
        if category is None:
            raise CategoryNotFoundError(input_dto)

        category.deactivate()

        saved_category = self.category_repository.save(category)
        logger.info(f"Category deactivated: {saved_category.id}")

        return UseCaseResult.ok(CategoryDTO.from_entity(saved_category))
