import logging

from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from .helpers import post_states

logger = logging.getLogger(__name__)


class PostStatesView(APIView):
    """
    List the registered post states with the post ID each currently resolves to.
    """
    permission_classes = [IsAdminUser]

    def get(self, request):
        registry = post_states()
        data = []
        for key, label in registry.get_states().items():
            try:
                post_id = registry.resolve(key)
            except Exception as exc:
                logger.warning(f"Could not resolve post state {key}: {str(exc)}")
                post_id = None
            data.append({'key': key, 'label': str(label), 'post_id': post_id})
        return Response(data)
