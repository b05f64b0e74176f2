from django.core.management.base import BaseCommand, CommandError

from content.options import delete_option, update_option


class Command(BaseCommand):
    help = 'Set or delete a stored site option, e.g. `set_option page_on_front 42`'

    def add_arguments(self, parser):
        parser.add_argument('name', help='Option name')
        parser.add_argument('value', nargs='?', help='Value to store')
        parser.add_argument(
            '--delete',
            action='store_true',
            help='Delete the option instead of setting it',
        )

    def handle(self, *args, **options):
        name = options['name']

        if options['delete']:
            if delete_option(name):
                self.stdout.write(self.style.SUCCESS(f'Deleted option: {name}'))
            else:
                self.stdout.write(self.style.WARNING(f'Option does not exist: {name}'))
            return

        if options['value'] is None:
            raise CommandError('A value is required unless --delete is given.')

        try:
            update_option(name, options['value'])
        except ValueError as e:
            raise CommandError(str(e))

        self.stdout.write(
            self.style.SUCCESS(f'Set option {name} = {options["value"]}')
        )
