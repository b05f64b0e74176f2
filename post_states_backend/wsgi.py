"""
WSGI config for post_states_backend project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'post_states_backend.settings')

application = get_wsgi_application()
