from .create_category import CreateCategoryUseCase
from .get_category import GetCategoryUseCase
from .list_categories import ListCategoriesUseCase
from .update_category import UpdateCategoryUseCase
from .change_category_status import ActivateCategoryUseCase, DeactivateCategoryUseCase
from .delete_category import DeleteCategoryUseCase

__all__ = [
    'CreateCategoryUseCase',
    'GetCategoryUseCase',
    'ListCategoriesUseCase',
    'UpdateCategoryUseCase',
    'ActivateCategoryUseCase',
    'DeactivateCategoryUseCase',
    'DeleteCategoryUseCase',
]
