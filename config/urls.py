"""
Root URL configuration.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from apps.catalog.interfaces.api.health_views import (
    CatalogLivenessView,
    CatalogReadinessView,
)

urlpatterns = [
    path('admin/', admin.site.urls),

    # Health
    path('health/', CatalogLivenessView.as_view(), name='health'),
    path('health/ready/', CatalogReadinessView.as_view(), name='health-ready'),

    # API
    path('api/', include('apps.catalog.interfaces.api.urls')),

    # OpenAPI
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
