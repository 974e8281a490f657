# apps/equipe/apps.py

from django.apps import AppConfig


class EquipeConfig(AppConfig):
    """Configuração da app Gestão de Equipe"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.equipe'
    verbose_name = 'Gestão de Equipe'
