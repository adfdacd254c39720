from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.core.routers import UUID_PATTERN

from .serializers import (
    CategorySerializer,
    CategoryCreateSerializer,
    CategoryUpdateSerializer,
    CategoryQuerySerializer,
)
from .services import (
    create_category,
    get_categories,
    update_category,
    delete_category,
)


class CategoryViewSet(viewsets.ViewSet):
    """
    Budget categories of one group.

    list: Categories in display order, optionally of one type
    create: Add a custom category
    update: Rename a category
    destroy: Delete a custom category
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(
        parameters=[OpenApiParameter('type', str, description='EXPENSE or INCOME')],
        responses={200: CategorySerializer(many=True)},
        tags=['categories'],
    )
    def list(self, request, group_id=None):
        query = CategoryQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        categories = get_categories(
            group_id=group_id,
            user=request.user,
            type=query.validated_data.get('type'),
        )
        return Response(CategorySerializer(categories, many=True).data)

    @extend_schema(request=CategoryCreateSerializer, responses={201: CategorySerializer}, tags=['categories'])
    def create(self, request, group_id=None):
        serializer = CategoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = create_category(group_id=group_id, user=request.user, **serializer.validated_data)
        return Response(CategorySerializer(category).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=CategoryUpdateSerializer, responses={200: CategorySerializer}, tags=['categories'])
    def update(self, request, group_id=None, pk=None):
        serializer = CategoryUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = update_category(
            category_id=pk,
            user=request.user,
            group_id=group_id,
            **serializer.validated_data
        )
        return Response(CategorySerializer(category).data)

    @extend_schema(responses={204: None}, tags=['categories'])
    def destroy(self, request, group_id=None, pk=None):
        delete_category(category_id=pk, user=request.user, group_id=group_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
