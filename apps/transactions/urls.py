from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'transactions'

router = SimpleRouter()
router.register(r'', views.TransactionViewSet, basename='transaction')

urlpatterns = [
    # Mounted at /api/groups/{group_id}/transactions/
    # GET    /             - Transactions in a date range
    # POST   /             - Record transaction
    # GET    /summary/     - Totals and category breakdown
    # GET    /{id}/        - Get transaction
    # PUT    /{id}/        - Update transaction
    # DELETE /{id}/        - Delete transaction
    path('', include(router.urls)),
]
