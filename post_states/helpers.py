"""
Process-wide access to post states.

``post_states()`` lazily creates one ``PostStates`` registry for the process
and subscribes it to the listing hook the first time it is called; later calls
return the same registry. ``reset_post_states()`` unsubscribes and discards it
so the next call starts from scratch.

Example::

    from post_states.helpers import register_post_states

    register_post_states({
        'landing_page': _('Landing Page'),
        'featured_post': _('Featured Post'),
    })
"""
import logging
import threading

from .errors import PostStateErrorCode, PostStatesError
from .registry import PostStates

logger = logging.getLogger(__name__)

_instance = None
_instance_lock = threading.Lock()


def post_states():
    """Return the process-wide registry, creating it on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = PostStates()
            logger.debug("Initialized process-wide post states registry")
        return _instance


def reset_post_states():
    """Unsubscribe and drop the process-wide registry."""
    global _instance
    with _instance_lock:
        if _instance is not None:
            _instance.unsubscribe()
        _instance = None


def _wrap_failure(exc):
    return PostStatesError(
        PostStateErrorCode.REGISTRATION_FAILED,
        params={'error': exc},
    )


def register_post_states(states, option_getter=None):
    """
    Replace the process-wide states with ``states`` and return the registry.

    Raises ``PostStatesError``. Validation failures keep their own code; any
    other failure is reported as ``post_states_registration_failed``.
    """
    try:
        registry = post_states()
        registry.set_states(states, option_getter)
    except PostStatesError:
        raise
    except Exception as exc:
        logger.error(f"Error registering post states: {str(exc)}")
        raise _wrap_failure(exc) from exc
    return registry


def add_post_state(key, label, option_getter=None):
    try:
        registry = post_states()
        registry.add_state(key, label, option_getter)
    except PostStatesError:
        raise
    except Exception as exc:
        logger.error(f"Error adding post state {key}: {str(exc)}")
        raise _wrap_failure(exc) from exc
    return registry
