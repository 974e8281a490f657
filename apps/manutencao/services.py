# apps/manutencao/services.py

import logging

from django.utils import timezone

from apps.comunicacao.services import notificar_usuario
from .models import ChamadoManutencao

logger = logging.getLogger(__name__)


def atualizar_status_chamado(chamado: ChamadoManutencao, novo_status: str) -> bool:
    """
    Altera o status do chamado e avisa o solicitante

    Returns:
        True se o status de fato mudou
    """
    if chamado.status == novo_status:
        return False

    status_anterior = chamado.status
    chamado.status = novo_status
    chamado.concluido_em = timezone.now() if novo_status == 'concluido' else None
    chamado.save(update_fields=['status', 'concluido_em', 'atualizado_em'])

    logger.info(f"🔧 Chamado #{chamado.pk}: {status_anterior} → {novo_status}")

    if chamado.solicitado_por_id:
        rotulo = ChamadoManutencao.ROTULOS_STATUS[novo_status]
        notificar_usuario(
            chamado.solicitado_por,
            tipo='maintenance_update',
            titulo=f'Chamado Atualizado: {rotulo}',
            mensagem=f'Seu chamado "{chamado.titulo}" foi atualizado para "{rotulo}".',
            condominio=chamado.condominio,
            relacionado_id=chamado.pk,
        )

    return True
