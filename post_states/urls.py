from django.urls import path

from .views import PostStatesView

urlpatterns = [
    path('post-states/', PostStatesView.as_view(), name='post-states'),
]
