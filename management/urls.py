from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import views_meeting

app_name = "management"

router = DefaultRouter()
router.register(r'meetings', views_meeting.ManagementMeetingViewSet, basename='meeting')

urlpatterns = [
    path('components/<uuid:component_pk>/', include(router.urls)),
]
