"""
Get category use case.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import CategoryNotFoundError
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryDTO


@dataclass
class GetCategoryUseCase(UseCase[UUID, CategoryDTO]):
    """Use case for fetching a single category."""

    category_repository: CategoryRepository

    def execute(self, input_dto: UUID) -> UseCaseResult[CategoryDTO]:
        category = self.category_repository.find_by_id(input_dto)
        if category is None:
            raise CategoryNotFoundError(input_dto)

        return UseCaseResult.ok(CategoryDTO.from_entity(category))
