"""
URL configuration for the Shared Calendar project.

Group-scoped resources are mounted under /api/groups/<group_id>/; each app
router receives group_id as a view kwarg.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenRefreshView

from config.views import health_check

urlpatterns = [
    # Health check
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.accounts.urls')),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # Groups and invites
    path('api/', include('apps.groups.urls')),

    # Group-scoped resources
    path('api/groups/<uuid:group_id>/schedules/', include('apps.schedules.urls')),
    path('api/groups/<uuid:group_id>/transactions/', include('apps.transactions.urls')),
    path('api/groups/<uuid:group_id>/categories/', include('apps.categories.urls')),
    path('api/groups/<uuid:group_id>/asset-sources/', include('apps.assets.urls')),
    path('api/groups/<uuid:group_id>/statistics/', include('apps.statistics.urls')),
]

# Static files (development only)
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
