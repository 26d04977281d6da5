"""
Entryman Admin.

Provides views for production debugging:
- Batch: read-only (stock only changes via the Entries service)
- Entry: read-only audit trail, with "recalculate batches" action
"""

import logging

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from entryman.models import Batch, Entry

logger = logging.getLogger(__name__)


# =========================================================================
# BATCH ADMIN (read-only)
# =========================================================================

@admin.register(Batch)
class BatchAdmin(admin.ModelAdmin):
    """Batch admin — read-only. Stock only changes via Entries service."""

    list_display = ['batch_number', 'product_name', 'product_id', 'stock',
                    'expiry_date', 'is_expired_display']
    list_filter = ['expiry_date']
    search_fields = ['batch_number', 'product_name', 'product_id']
    readonly_fields = ['product_id', 'product_name', 'batch_number', 'stock',
                       'expiry_date', 'created_at', 'updated_at']
    date_hierarchy = 'expiry_date'
    actions = ['recalculate_stock']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    @admin.display(description=_('Expirado?'), boolean=True)
    def is_expired_display(self, obj):
        return obj.is_expired

    @admin.action(description=_('Recalcular estoque a partir das entradas'))
    def recalculate_stock(self, request, queryset):
        changed = 0
        for batch in queryset:
            before = batch.stock
            if batch.recalculate() != before:
                changed += 1
        self.message_user(request, _('{count} lote(s) corrigido(s).').format(count=changed))


# =========================================================================
# ENTRY ADMIN (read-only audit trail)
# =========================================================================

@admin.register(Entry)
class EntryAdmin(admin.ModelAdmin):
    """Entry admin — read-only. New entries go through Entries.create_entry()."""

    list_display = ['created_at', 'product_name', 'batch_number', 'quantity']
    list_filter = ['created_at']
    search_fields = ['product_name', 'product_id', 'batch_number']
    readonly_fields = ['product_id', 'product_name', 'batch_number', 'quantity', 'created_at']
    date_hierarchy = 'created_at'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
