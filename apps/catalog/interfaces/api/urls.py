"""
Catalog API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('v1/', include('apps.catalog.interfaces.api.v1.urls')),
]
