"""URL configuration for Home Rental project.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the OpenAPI schema and each app's URL module.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    # Application URLs
    path('auth/', include(('apps.users.auth_urls', 'auth'), namespace='auth')),
    path('properties/', include('apps.properties.urls')),
    path('orders/', include(('apps.bookings.urls', 'orders'), namespace='orders')),
    path('notifications/', include('apps.notifications.urls')),
    # API docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
