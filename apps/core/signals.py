# apps/core/signals.py

import logging

from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Condominio, PermissaoModulo

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Condominio)
def criar_permissoes_padrao(sender, instance, created, **kwargs):
    """
    Cria as permissões de módulo (todas habilitadas) para um novo condomínio
    """
    if not created:
        return

    PermissaoModulo.objects.bulk_create([
        PermissaoModulo(condominio=instance, chave=chave, rotulo=rotulo, habilitado=True)
        for chave, rotulo in PermissaoModulo.MODULOS
    ], ignore_conflicts=True)

    logger.info(f"🧩 Permissões padrão criadas para {instance.nome}")
