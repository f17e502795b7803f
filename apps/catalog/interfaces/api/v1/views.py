"""
Catalog API v1 views.
"""
from uuid import UUID

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ....application.dtos.category_dto import (
    CategoryCreateDTO,
    CategoryListDTO,
    CategoryUpdateDTO,
)
from ....application.use_cases import (
    CreateCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
    ActivateCategoryUseCase,
    DeactivateCategoryUseCase,
    DeleteCategoryUseCase,
)
from ....infrastructure.repositories import DjangoCategoryRepository
from ...serializers.category_serializer import (
    CategorySerializer,
    CategoryListQuerySerializer,
    CategoryCreateSerializer,
    CategoryUpdateSerializer,
)


class PublicReadMixin:
    """Anyone may read; writes require authentication."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAuthenticated()]


@extend_schema(tags=['Categories'])
class CategoryListCreateView(PublicReadMixin, APIView):
    """Category list and create endpoint."""

    @extend_schema(
        parameters=[CategoryListQuerySerializer],
        responses={200: CategorySerializer(many=True)},
        summary="List categories",
    )
    def get(self, request):
        query = CategoryListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        input_dto = CategoryListDTO(**query.validated_data)

        result = ListCategoriesUseCase(DjangoCategoryRepository()).execute(input_dto)

        serializer = CategorySerializer(result.data, many=True)
        return Response(serializer.data)

    @extend_schema(
        request=CategoryCreateSerializer,
        responses={201: CategorySerializer},
        summary="Create a category",
    )
    def post(self, request):
        serializer = CategoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        input_dto = CategoryCreateDTO(
            name=data['name'],
            description=data.get('description', ''),
            is_active=data.get('is_active', True),
        )

        result = CreateCategoryUseCase(DjangoCategoryRepository()).execute(input_dto)

        output = CategorySerializer(result.data)
        return Response(output.data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Categories'])
class CategoryDetailView(PublicReadMixin, APIView):
    """Category detail endpoint."""

    @extend_schema(
        responses={200: CategorySerializer},
        summary="Get category detail",
    )
    def get(self, request, category_id: UUID):
        result = GetCategoryUseCase(DjangoCategoryRepository()).execute(category_id)

        serializer = CategorySerializer(result.data)
        return Response(serializer.data)

    @extend_schema(
        request=CategoryUpdateSerializer,
        responses={200: CategorySerializer},
        summary="Update a category",
    )
    def put(self, request, category_id: UUID):
        serializer = CategoryUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        input_dto = CategoryUpdateDTO(
            id=category_id,
            name=data['name'],
            description=data.get('description'),
        )

        result = UpdateCategoryUseCase(DjangoCategoryRepository()).execute(input_dto)

        output = CategorySerializer(result.data)
        return Response(output.data)

    @extend_schema(summary="Delete a category")
    def delete(self, request, category_id: UUID):
        DeleteCategoryUseCase(DjangoCategoryRepository()).execute(category_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema_view(
    post=extend_schema(
        request=None,
        responses={200: CategorySerializer},
        summary="Activate a category",
    ),
)
@extend_schema(tags=['Categories'])
class CategoryActivateView(APIView):
    """Category activation endpoint."""
    permission_classes = [IsAuthenticated]

    def post(self, request, category_id: UUID):
        result = ActivateCategoryUseCase(DjangoCategoryRepository()).execute(category_id)
        return Response(CategorySerializer(result.data).data)


@extend_schema_view(
    post=extend_schema(
        request=None,
        responses={200: CategorySerializer},
        summary="Deactivate a category",
    ),
)
@extend_schema(tags=['Categories'])
class CategoryDeactivateView(APIView):
    """Category deactivation endpoint."""
    permission_classes = [IsAuthenticated]

    def post(self, request, category_id: UUID):
        result = DeactivateCategoryUseCase(DjangoCategoryRepository()).execute(category_id)
        return Response(CategorySerializer(result.data).data)
