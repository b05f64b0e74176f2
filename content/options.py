import logging

from django.conf import settings
from django.core.cache import cache

from .models import Option

logger = logging.getLogger(__name__)

OPTIONS_CACHE_KEY = 'content:options'


def load_options():
    """
    Return every stored option as a ``{name: value}`` dict.

    The whole table is read once and kept in the cache so a listing page does
    not query the database for every option lookup. Writes flush it through
    the handlers in ``content.signals``.
    """
    options = cache.get(OPTIONS_CACHE_KEY)
    if options is None:
        options = dict(Option.objects.values_list('name', 'value'))
        cache.set(
            OPTIONS_CACHE_KEY,
            options,
            getattr(settings, 'OPTIONS_CACHE_TIMEOUT', 300)
        )
    return options


def flush_options_cache():
    cache.delete(OPTIONS_CACHE_KEY)


def get_option(name, default=None):
    """
    Return the stored value for ``name``, or ``default`` when no such option exists.
    """
    if not name:
        return default

    return load_options().get(name, default)


def update_option(name, value):
    """
    Create or overwrite the option ``name``. Non-string values are stored as text.
    """
    if not name:
        raise ValueError("Option name cannot be empty.")

    option, created = Option.objects.update_or_create(
        name=name,
        defaults={'value': "" if value is None else str(value)}
    )
    logger.info(f"{'Created' if created else 'Updated'} option {name}")
    return option


def delete_option(name):
    deleted, _ = Option.objects.filter(name=name).delete()
    return deleted > 0
