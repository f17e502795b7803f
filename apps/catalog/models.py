# Django discovers models through this module
from .infrastructure.models import CategoryModel

__all__ = ['CategoryModel']
