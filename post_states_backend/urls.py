"""
URL configuration for post_states_backend project.

The admin changelist for posts shows the registered post states next to each
title; the same states are exposed read-only under /api/.
"""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('content.urls')),
    path('api/', include('post_states.urls')),
]
