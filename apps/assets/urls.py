from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'assets'

router = SimpleRouter()
router.register(r'', views.AssetSourceViewSet, basename='asset-source')

urlpatterns = [
    # Mounted at /api/groups/{group_id}/asset-sources/
    # GET    /          - List asset sources
    # POST   /          - Create asset source
    # GET    /{id}/     - Get asset source
    # PUT    /{id}/     - Update asset source
    # DELETE /{id}/     - Delete unused asset source
    path('', include(router.urls)),
]
