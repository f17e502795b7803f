from .django_category_repository import DjangoCategoryRepository

__all__ = ['DjangoCategoryRepository']
