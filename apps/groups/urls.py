from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'groups'

# Router for ViewSets
router = DefaultRouter()
router.register(r'groups', views.GroupViewSet, basename='group')
router.register(r'invites', views.InviteViewSet, basename='invite')

urlpatterns = [
    # Group ViewSet routes
    # GET    /api/groups/                          - List user's groups
    # POST   /api/groups/                          - Create shared group
    # GET    /api/groups/{id}/                     - Get group details
    # PUT    /api/groups/{id}/                     - Update group (host)
    # PATCH  /api/groups/{id}/                     - Partial update (host)
    # DELETE /api/groups/{id}/                     - Delete shared group (host)

    # Custom group actions
    # GET    /api/groups/{id}/members/             - List members
    # DELETE /api/groups/{id}/members/{user_id}/   - Remove member (host)
    # POST   /api/groups/{id}/leave/               - Leave group
    # POST   /api/groups/{id}/invites/             - Invite by email (host)

    # Invites for the current user
    # GET    /api/invites/                         - Pending invites
    # POST   /api/invites/{id}/accept/             - Accept
    # POST   /api/invites/{id}/reject/             - Reject

    path('', include(router.urls)),
]
