"""
Catalog API v1 URLs.
"""
from django.urls import path

from .views import (
    CategoryListCreateView,
    CategoryDetailView,
    CategoryActivateView,
    CategoryDeactivateView,
)

urlpatterns = [
    path('categories/', CategoryListCreateView.as_view(), name='category-list-create'),
    path('categories/<uuid:category_id>/', CategoryDetailView.as_view(), name='category-detail'),
    path(
        'categories/<uuid:category_id>/activate/',
        CategoryActivateView.as_view(),
        name='category-activate',
    ),
    path(
        'categories/<uuid:category_id>/deactivate/',
        CategoryDeactivateView.as_view(),
        name='category-deactivate',
    ),
]
