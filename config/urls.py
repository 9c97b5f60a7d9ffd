from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path, re_path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions
from rest_framework.decorators import api_view, permission_classes


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def health_check(request):
    """Simple health check endpoint for container orchestration."""
    return JsonResponse({"status": "ok"})


schema_view = get_schema_view(
    openapi.Info(
        title="Agora API",
        default_version="v1",
        description="Agora's meetings administration API",
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)


v1_endpoints = [
    path("management/", include("management.urls")),
]


urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/health/", health_check, name="health-check"),
    re_path("api/v1/", include(v1_endpoints)),
    path(
        "doc/",
        schema_view.with_ui("swagger", cache_timeout=0),
        name="schema-swagger-ui",
    ),
    path("redoc/", schema_view.with_ui("redoc", cache_timeout=0), name="schema-redoc"),
]
