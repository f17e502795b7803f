"""
Delete category use case.
"""
import logging
from dataclasses import dataclass
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import CategoryNotFoundError
from ...domain.repositories.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


@dataclass
class DeleteCategoryUseCase(UseCase[UUID, None]):
    """Use case for removing a category."""

    category_repository: CategoryRepository

    def execute(self, input_dto: UUID) -> UseCaseResult[None]:
        if not self.category_repository.delete(input_dto):
            raise CategoryNotFoundError(input_dto)

        logger.info(f"Category deleted: {input_dto}")
        return UseCaseResult.ok()
