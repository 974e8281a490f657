# apps/rh/apps.py

from django.apps import AppConfig


class RhConfig(AppConfig):
    """Configuração da app RH"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.rh'
    verbose_name = 'Recursos Humanos'
