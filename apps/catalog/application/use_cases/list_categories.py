"""
List categories use case.
"""
from dataclasses import dataclass
from typing import List

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryDTO, CategoryListDTO


@dataclass
class ListCategoriesUseCase(UseCase[CategoryListDTO, List[CategoryDTO]]):
    """Use case for listing categories."""

    category_repository: CategoryRepository

    def execute(self, input_dto: CategoryListDTO) -> UseCaseResult[List[CategoryDTO]]:
        categories = self.category_repository.find_all(
            is_active=input_dto.is_active,
            offset=input_dto.offset,
            limit=input_dto.limit,
        )
        return UseCaseResult.ok([CategoryDTO.from_entity(c) for c in categories])
