"""URL configuration for the meeting room booking backend.

The `urlpatterns` list routes URLs to views. It includes the Django admin
(used for room, unit and consumption management), the booking API and the
directory listings.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

from apps.core.views import healthz

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health', healthz, name='health'),
    # Application URLs
    path('api/bookings/', include('apps.bookings.urls')),
    path('api/', include('apps.directory.urls')),
    # API docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]

handler404 = 'apps.core.views.route_not_found'
handler500 = 'apps.core.views.server_error'
