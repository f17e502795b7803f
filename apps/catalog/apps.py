"""
Catalog app configuration.
"""
from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.catalog'
    label = 'catalog'
    verbose_name = 'Catalog'

    def ready(self):
        # Admin registrations live with the other interface adapters
        from .interfaces import admin  # noqa: F401
