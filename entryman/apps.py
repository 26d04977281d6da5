"""Django app configuration for Entryman."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class EntrymanConfig(AppConfig):
    """Configuration for Entryman app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "entryman"
    verbose_name = _("Entradas de Estoque")
