from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'categories'

router = SimpleRouter()
router.register(r'', views.CategoryViewSet, basename='category')

urlpatterns = [
    # Mounted at /api/groups/{group_id}/categories/
    # GET    /          - List categories (?type=EXPENSE|INCOME)
    # POST   /          - Create category
    # PUT    /{id}/     - Update category
    # DELETE /{id}/     - Delete custom category
    path('', include(router.urls)),
]
