"""Configuration de l'application Django pour la validation des entreprises."""

from django.apps import AppConfig


class EInvoiceFrConfig(AppConfig):
    """Configuration de l'app Django einvoice-fr."""

    name = "einvoice_fr.contrib.django"
    label = "einvoice_fr"
    verbose_name = "Facturation électronique française"
