# apps/comunicacao/apps.py

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class ComunicacaoConfig(AppConfig):
    """Configuração da app Comunicação"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.comunicacao'
    verbose_name = 'Comunicação - Comunicados e Notificações'

    def ready(self):
        logger.info("🔌 Comunicação inicializada - WebSockets habilitados")
