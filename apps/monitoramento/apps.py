# apps/monitoramento/apps.py

from django.apps import AppConfig


class MonitoramentoConfig(AppConfig):
    """Configuração da app Monitoramento"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.monitoramento'
    verbose_name = 'Monitoramento - Leituras e Indicadores'
