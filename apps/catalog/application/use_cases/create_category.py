"""
Create category use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryCreateDTO, CategoryDTO

logger = logging.getLogger(__name__)


@dataclass
class CreateCategoryUseCase(UseCase[CategoryCreateDTO, CategoryDTO]):
    """Use case for creating a new category."""

    category_repository: CategoryRepository

    def execute(self, input_dto: CategoryCreateDTO) -> UseCaseResult[CategoryDTO]:
        # Raises EntityValidationError before anything is stored
        category = Category.create(
            name=input_dto.name,
            description=input_dto.description,
            is_active=input_dto.is_active,
        )

        saved_category = self.category_repository.save(category)
        logger.info(f"Category created: {saved_category.id} ({saved_category.name})")

        return UseCaseResult.ok(CategoryDTO.from_entity(saved_category))
