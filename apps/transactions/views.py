from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.core.routers import UUID_PATTERN

from .serializers import (
    TransactionSerializer,
    TransactionWriteSerializer,
    TransactionRangeQuerySerializer,
    SummaryQuerySerializer,
    TransactionSummarySerializer,
)
from .services import (
    create_transaction,
    get_transactions_by_date_range,
    get_transaction_by_id,
    update_transaction,
    delete_transaction,
    get_transaction_summary,
)

RANGE_PARAMETERS = [
    OpenApiParameter('start_date', str, required=True, description='Range start (inclusive)'),
    OpenApiParameter('end_date', str, required=True, description='Range end (inclusive)'),
]


class TransactionViewSet(viewsets.ViewSet):
    """
    Budget transactions of one group.

    list: Transactions in a date range
    create: Record a transaction
    retrieve: Get a transaction
    update: Replace a transaction
    destroy: Delete a transaction
    summary: Income/expense totals and category breakdown for a range
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_PATTERN

    @extend_schema(
        parameters=RANGE_PARAMETERS + [OpenApiParameter('asset_type', str, description='PERSONAL or JOINT')],
        responses={200: TransactionSerializer(many=True)},
        tags=['transactions'],
    )
    def list(self, request, group_id=None):
        query = TransactionRangeQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        transactions = get_transactions_by_date_range(group_id=group_id, user=request.user, **query.validated_data)
        return Response(TransactionSerializer(transactions, many=True).data)

    @extend_schema(request=TransactionWriteSerializer, responses={201: TransactionSerializer}, tags=['transactions'])
    def create(self, request, group_id=None):
        serializer = TransactionWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        txn = create_transaction(group_id=group_id, user=request.user, **serializer.validated_data)
        return Response(TransactionSerializer(txn).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: TransactionSerializer}, tags=['transactions'])
    def retrieve(self, request, group_id=None, pk=None):
        txn = get_transaction_by_id(transaction_id=pk, user=request.user, group_id=group_id)
        return Response(TransactionSerializer(txn).data)

    @extend_schema(request=TransactionWriteSerializer, responses={200: TransactionSerializer}, tags=['transactions'])
    def update(self, request, group_id=None, pk=None):
        serializer = TransactionWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        txn = update_transaction(
            transaction_id=pk,
            user=request.user,
            group_id=group_id,
            **serializer.validated_data
        )
        return Response(TransactionSerializer(txn).data)

    @extend_schema(responses={204: None}, tags=['transactions'])
    def destroy(self, request, group_id=None, pk=None):
        delete_transaction(transaction_id=pk, user=request.user, group_id=group_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(parameters=RANGE_PARAMETERS, responses={200: TransactionSummarySerializer}, tags=['transactions'])
    @action(detail=False, methods=['get'])
    def summary(self, request, group_id=None):
        query = SummaryQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        summary = get_transaction_summary(group_id=group_id, user=request.user, **query.validated_data)
        return Response(TransactionSummarySerializer(summary).data)
