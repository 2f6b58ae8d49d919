"""
URL configuration for backend project.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),

    # Storefront content + admin panel API
    path('api/', include('storefront_admin.urls')),

    # Admin gate (login / logout / secret management)
    path('', include('storefront_admin.auth_urls')),
]
