"""
Update category use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import CategoryNotFoundError
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryDTO, CategoryUpdateDTO

logger = logging.getLogger(__name__)


@dataclass
class UpdateCategoryUseCase(UseCase[CategoryUpdateDTO, CategoryDTO]):
    """Use case for renaming or re-describing a category."""

    category_repository: CategoryRepository

    def execute(self, input_dto: CategoryUpdateDTO) -> UseCaseResult[CategoryDTO]:
        category = self.category_repository.find_by_id(input_dto.id)
        if category is None:
            raise CategoryNotFoundError(input_dto.id)

        category.update(name=input_dto.name, description=input_dto.description)

        saved_category = self.category_repository.save(category)
        logger.info(f"Category updated: {saved_category.id}")

        return UseCaseResult.ok(CategoryDTO.from_entity(saved_category))
