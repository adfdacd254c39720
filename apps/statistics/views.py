from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .analytics import StatisticsQueries
from .serializers import (
    PeriodQuerySerializer,
    BudgetOverviewSerializer,
    CategoryBreakdownSerializer,
    DailyTrendSerializer,
    MemberComparisonSerializer,
)

PERIOD_PARAMETERS = [
    OpenApiParameter('period', OpenApiTypes.STR, description='Month period (YYYY-MM)'),
    OpenApiParameter('start_date', OpenApiTypes.DATE, description='Start date (YYYY-MM-DD)'),
    OpenApiParameter('end_date', OpenApiTypes.DATE, description='End date (YYYY-MM-DD)'),
]


def _range(request):
    query_serializer = PeriodQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    return query_serializer.validated_data


@extend_schema(
    parameters=PERIOD_PARAMETERS,
    responses={200: BudgetOverviewSerializer},
    description="Income, expense and balance of the group for a period.",
    tags=['statistics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def budget_overview(request, group_id):
    """Budget overview - thin HTTP handler."""
    data = StatisticsQueries.budget_overview(group_id=group_id, user_id=request.user.id, **_range(request))
    return Response(BudgetOverviewSerializer(data).data)


@extend_schema(
    parameters=PERIOD_PARAMETERS,
    responses={200: CategoryBreakdownSerializer},
    description="Totals per category and transaction type for a period.",
    tags=['statistics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def category_breakdown(request, group_id):
    data = StatisticsQueries.category_breakdown(group_id=group_id, user_id=request.user.id, **_range(request))
    return Response(CategoryBreakdownSerializer(data).data)


@extend_schema(
    parameters=PERIOD_PARAMETERS,
    responses={200: DailyTrendSerializer},
    description="Totals per day and transaction type for a period.",
    tags=['statistics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def daily_trend(request, group_id):
    data = StatisticsQueries.daily_trend(group_id=group_id, user_id=request.user.id, **_range(request))
    return Response(DailyTrendSerializer(data).data)


@extend_schema(
    parameters=PERIOD_PARAMETERS,
    responses={200: MemberComparisonSerializer},
    description="Totals per member and transaction type for a period.",
    tags=['statistics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def member_comparison(request, group_id):
    data = StatisticsQueries.member_comparison(group_id=group_id, user_id=request.user.id, **_range(request))
    return Response(MemberComparisonSerializer(data).data)
