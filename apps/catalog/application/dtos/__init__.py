from .category_dto import (
    CategoryCreateDTO,
    CategoryUpdateDTO,
    CategoryListDTO,
    CategoryDTO,
)

__all__ = [
    'CategoryCreateDTO',
    'CategoryUpdateDTO',
    'CategoryListDTO',
    'CategoryDTO',
]
