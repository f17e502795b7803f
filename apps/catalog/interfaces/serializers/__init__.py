from .category_serializer import (
    CategorySerializer,
    CategoryListQuerySerializer,
    CategoryCreateSerializer,
    CategoryUpdateSerializer,
)

__all__ = [
    'CategorySerializer',
    'CategoryListQuerySerializer',
    'CategoryCreateSerializer',
    'CategoryUpdateSerializer',
]
