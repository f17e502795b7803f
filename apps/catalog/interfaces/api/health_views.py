"""
Catalog health check views.
"""
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ...infrastructure.models.category_model import CategoryModel

logger = logging.getLogger(__name__)


class CatalogLivenessView(APIView):
    """Liveness probe."""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'alive'}, status=status.HTTP_200_OK)


class CatalogReadinessView(APIView):
    """Ready once the categories table is migrated and readable."""
    permission_classes = [AllowAny]

    def get(self, request):
        try:
            category_count = CategoryModel.objects.count()
        except DatabaseError as e:
            logger.error(f"Catalog storage not ready: {e}")
            return Response(
                {'status': 'not_ready', 'categories': {'healthy': False, 'error': str(e)}},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return Response(
            {'status': 'ready', 'categories': {'healthy': True, 'count': category_count}},
            status=status.HTTP_200_OK,
        )
