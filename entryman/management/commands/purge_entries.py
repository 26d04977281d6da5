"""
Management command to delete every entry (development only).

Usage:
    python manage.py purge_entries --dry-run
    python manage.py purge_entries --confirm

Requires ENTRYMAN['ALLOW_BULK_DELETE'] = True. Batch stock is not touched.
"""

from django.core.management.base import BaseCommand, CommandError

from entryman import entries, EntryError
from entryman.models import Entry


class Command(BaseCommand):
    """Purge entries command."""

    help = 'Remove todas as entradas (somente desenvolvimento)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Mostra quantas entradas seriam removidas sem executar'
        )
        parser.add_argument(
            '--confirm',
            action='store_true',
            help='Confirma a remoção em massa'
        )

    def handle(self, *args, **options):
        if options['dry_run']:
            count = Entry.objects.count()
            self.stdout.write(f'{count} entrada(s) seria(m) removida(s)')
            return

        try:
            count = entries.delete_all_entries(confirm=options['confirm'])
        except EntryError as e:
            raise CommandError(f"{e.message}: {e.data.get('reason', '')}") from e

        self.stdout.write(
            self.style.SUCCESS(f'{count} entrada(s) removida(s)')
        )
