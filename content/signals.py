from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import Option
from .options import flush_options_cache


@receiver(post_save, sender=Option)
@receiver(post_delete, sender=Option)
def flush_options_on_change(sender, instance, **kwargs):
    """
    Drop the cached option table whenever an option is saved or deleted.
    """
    flush_options_cache()
