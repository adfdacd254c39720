from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.core.routers import UUID_PATTERN

from .serializers import (
    ScheduleSerializer,
    ScheduleCreateSerializer,
    ScheduleWriteSerializer,
    ScheduleRangeQuerySerializer,
    RepeatGroupDeleteSerializer,
)
from .services import (
    create_schedule,
    get_schedules_by_date_range,
    get_schedule_by_id,
    update_schedule,
    delete_schedule,
    delete_repeat_group,
)


class ScheduleViewSet(viewsets.ViewSet):
    """
    Calendar schedules of one group.

    Mounted under /api/groups/{group_id}/schedules/. Membership checks
    happen in the services; views only parse input and shape output.

    list: Schedules overlapping a date range
    create: Create a schedule (expanded into a series when repeating)
    retrieve: Get a single schedule
    update: Replace a single schedule's editable fields
    destroy: Delete a single schedule
    delete_repeat_group: Delete a whole repeating series
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(
        parameters=[
            OpenApiParameter('start_date', str, required=True, description='Range start (inclusive)'),
            OpenApiParameter('end_date', str, required=True, description='Range end (inclusive)'),
            OpenApiParameter('user_id', str, description='Only schedules by this member'),
            OpenApiParameter('asset_type', str, description='PERSONAL or JOINT (ignored with user_id)'),
        ],
        responses={200: ScheduleSerializer(many=True)},
        tags=['schedules'],
    )
    def list(self, request, group_id=None):
        query = ScheduleRangeQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data

        schedules = get_schedules_by_date_range(
            group_id=group_id,
            user=request.user,
            start_date=params['start_date'],
            end_date=params['end_date'],
            filter_user_id=params.get('user_id'),
            filter_asset_type=params.get('asset_type'),
        )

        return Response(ScheduleSerializer(schedules, many=True).data)

    @extend_schema(request=ScheduleCreateSerializer, responses={201: ScheduleSerializer}, tags=['schedules'])
    def create(self, request, group_id=None):
        serializer = ScheduleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        schedule = create_schedule(group_id=group_id, user=request.user, **serializer.validated_data)

        return Response(ScheduleSerializer(schedule).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ScheduleSerializer}, tags=['schedules'])
    def retrieve(self, request, group_id=None, pk=None):
        schedule = get_schedule_by_id(schedule_id=pk, user=request.user, group_id=group_id)
        return Response(ScheduleSerializer(schedule).data)

    @extend_schema(request=ScheduleWriteSerializer, responses={200: ScheduleSerializer}, tags=['schedules'])
    def update(self, request, group_id=None, pk=None):
        serializer = ScheduleWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        schedule = update_schedule(
            schedule_id=pk,
            user=request.user,
            group_id=group_id,
            **serializer.validated_data
        )

        return Response(ScheduleSerializer(schedule).data)

    @extend_schema(responses={204: None}, tags=['schedules'])
    def destroy(self, request, group_id=None, pk=None):
        delete_schedule(schedule_id=pk, user=request.user, group_id=group_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: RepeatGroupDeleteSerializer}, tags=['schedules'])
    @action(
        detail=False,
        methods=['delete'],
        url_path=rf'repeat-group/(?P<repeat_group_id>{UUID_PATTERN})',
        url_name='repeat-group',
    )
    def delete_repeat_group(self, request, group_id=None, repeat_group_id=None):
        deleted = delete_repeat_group(
            repeat_group_id=repeat_group_id,
            user=request.user,
            group_id=group_id,
        )
        return Response({'deleted': deleted})
