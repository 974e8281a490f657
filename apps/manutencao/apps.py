# apps/manutencao/apps.py

from django.apps import AppConfig


class ManutencaoConfig(AppConfig):
    """Configuração da app Manutenção"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.manutencao'
    verbose_name = 'Manutenção - Equipamentos e Chamados'
