# apps/mercado/apps.py

from django.apps import AppConfig


class MercadoConfig(AppConfig):
    """Configuração da app Mini Mercado"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.mercado'
    verbose_name = 'Mini Mercado'
