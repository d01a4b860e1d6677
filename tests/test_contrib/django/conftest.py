"""Configuration pytest pour les tests Django.

FR: Configure Django sans base de données : l'intégration ne fournit
    que des paramètres et des validateurs de champs.
EN: Configures Django without a database: the integration only provides
    settings and field validators.
"""

import django
from django.conf import settings


def pytest_configure() -> None:
    """Configure Django pour les tests."""
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=[
                "einvoice_fr.contrib.django.apps.EInvoiceFrConfig",
            ],
            USE_TZ=True,
        )
        django.setup()
