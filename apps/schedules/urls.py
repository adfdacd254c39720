from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'schedules'

router = SimpleRouter()
router.register(r'', views.ScheduleViewSet, basename='schedule')

urlpatterns = [
    # Mounted at /api/groups/{group_id}/schedules/
    # GET    /                                   - Schedules in a date range
    # POST   /                                   - Create schedule or series
    # GET    /{id}/                              - Get schedule
    # PUT    /{id}/                              - Update schedule
    # DELETE /{id}/                              - Delete one schedule
    # DELETE /repeat-group/{repeat_group_id}/    - Delete a whole series
    path('', include(router.urls)),
]
