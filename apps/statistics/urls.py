from django.urls import path
from . import views

app_name = 'statistics'

# Mounted at /api/groups/{group_id}/statistics/
urlpatterns = [
    path('budget/', views.budget_overview, name='budget'),
    path('category-breakdown/', views.category_breakdown, name='category-breakdown'),
    path('daily-trend/', views.daily_trend, name='daily-trend'),
    path('member-comparison/', views.member_comparison, name='member-comparison'),
]
