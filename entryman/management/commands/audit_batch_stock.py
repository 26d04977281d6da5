"""
Management command to compare batch stock with the sum of its entries.

Usage:
    python manage.py audit_batch_stock
    python manage.py audit_batch_stock --fix

Editing or deleting entries does not adjust batch stock, so counters can
drift. This command reports the drift and, with --fix, rewrites the counter.
"""

from django.core.management.base import BaseCommand
from django.db.models import Sum

from entryman.models import Batch, Entry


class Command(BaseCommand):
    """Audit batch stock command."""

    help = 'Compara o estoque dos lotes com a soma das entradas'

    def add_arguments(self, parser):
        parser.add_argument(
            '--fix',
            action='store_true',
            help='Recalcula o estoque dos lotes divergentes'
        )

    def handle(self, *args, **options):
        totals = {
            (row['product_id'], row['batch_number']): row['total']
            for row in Entry.objects.order_by().values('product_id', 'batch_number').annotate(
                total=Sum('quantity')
            )
        }

        mismatched = 0
        for batch in Batch.objects.all():
            expected = totals.get((batch.product_id, batch.batch_number), 0)
            if expected == batch.stock:
                continue
            mismatched += 1
            self.stdout.write(
                f'{batch.product_name} / {batch.batch_number}: '
                f'estoque={batch.stock} entradas={expected}'
            )
            if options['fix']:
                batch.recalculate()

        if options['fix'] and mismatched:
            self.stdout.write(self.style.SUCCESS(f'{mismatched} lote(s) corrigido(s)'))
        else:
            self.stdout.write(f'{mismatched} lote(s) divergente(s)')
