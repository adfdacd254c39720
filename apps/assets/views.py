from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.routers import UUID_PATTERN

from .serializers import (
    AssetSourceSerializer,
    AssetSourceCreateSerializer,
    AssetSourceUpdateSerializer,
)
from .services import (
    create_asset_source,
    get_asset_sources,
    get_asset_source_by_id,
    update_asset_source,
    delete_asset_source,
)


class AssetSourceViewSet(viewsets.ViewSet):
    """
    Asset sources (cash, accounts, cards) of one group.
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(responses={200: AssetSourceSerializer(many=True)}, tags=['asset-sources'])
    def list(self, request, group_id=None):
        asset_sources = get_asset_sources(group_id=group_id, user=request.user)
        return Response(AssetSourceSerializer(asset_sources, many=True).data)

    @extend_schema(request=AssetSourceCreateSerializer, responses={201: AssetSourceSerializer}, tags=['asset-sources'])
    def create(self, request, group_id=None):
        serializer = AssetSourceCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        asset_source = create_asset_source(group_id=group_id, user=request.user, **serializer.validated_data)
        return Response(AssetSourceSerializer(asset_source).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: AssetSourceSerializer}, tags=['asset-sources'])
    def retrieve(self, request, group_id=None, pk=None):
        asset_source = get_asset_source_by_id(asset_source_id=pk, user=request.user, group_id=group_id)
        return Response(AssetSourceSerializer(asset_source).data)

    @extend_schema(request=AssetSourceUpdateSerializer, responses={200: AssetSourceSerializer}, tags=['asset-sources'])
    def update(self, request, group_id=None, pk=None):
        serializer = AssetSourceUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        asset_source = update_asset_source(
            asset_source_id=pk,
            user=request.user,
            group_id=group_id,
            **serializer.validated_data
        )
        return Response(AssetSourceSerializer(asset_source).data)

    @extend_schema(responses={204: None}, tags=['asset-sources'])
    def destroy(self, request, group_id=None, pk=None):
        delete_asset_source(asset_source_id=pk, user=request.user, group_id=group_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
