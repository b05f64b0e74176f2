import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class PostStatesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'post_states'
    verbose_name = 'Post States'

    def ready(self):
        from .errors import PostStatesError
        from .helpers import register_post_states

        states = getattr(settings, 'POST_STATES', None)
        if not states:
            return

        try:
            register_post_states(states)
        except PostStatesError as exc:
            logger.error(f"Invalid POST_STATES setting: {exc.error_message}")
