"""
URL Configuration for TaskManager project.
"""
from django.contrib import admin
from django.urls import include, path, re_path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from .views import health_check, home_view

urlpatterns = [
    # Home and Health Check
    path('', home_view, name='home'),
    path('health/', health_check, name='health'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),

    # API Endpoints: версия в пути (/api/v1/...) или в заголовке Accept (/api/...)
    re_path(
        r'^api/(?P<version>v\d+)/',
        include(('apps.laboratories.urls', 'laboratories'), namespace='laboratories-versioned')
    ),
    path('api/', include(('apps.laboratories.urls', 'laboratories'), namespace='laboratories')),
]
