from django.core.management.base import BaseCommand

from content.models import Post
from post_states.helpers import post_states


class Command(BaseCommand):
    help = 'List registered post states and the post each one currently points at'

    def handle(self, *args, **options):
        registry = post_states()
        states = registry.get_states()

        if not states:
            self.stdout.write(self.style.WARNING('No post states registered.'))
            return

        for key, label in states.items():
            try:
                post_id = registry.resolve(key)
            except Exception as e:
                self.stdout.write(self.style.ERROR(f'{key} ({label}): could not read option: {e}'))
                continue

            if post_id is None:
                self.stdout.write(f'{key} ({label}): not set')
                continue

            post = Post.objects.filter(pk=post_id).first()
            target = f'"{post.title}" (#{post_id})' if post else f'#{post_id} (missing)'
            self.stdout.write(f'{key} ({label}): {target}')

        self.stdout.write(
            self.style.SUCCESS(f'{len(states)} post states registered.')
        )
