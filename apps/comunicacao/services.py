# apps/comunicacao/services.py

"""
Fan-out de notificações

Cada notificação é gravada no banco e, quando a transação confirma,
empurrada para o grupo `user_<id>` do channel layer. O envio é "best effort": se o usuário não
tiver socket aberto a mensagem simplesmente não é entregue em tempo real,
e falhas do channel layer só geram log.
"""

import json
import logging
from typing import Iterable, List, Optional

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.core.serializers.json import DjangoJSONEncoder
from django.db import transaction

from apps.core.utils import serializar
from .models import Notificacao

logger = logging.getLogger(__name__)


def grupo_usuario(usuario_id) -> str:
    return f'user_{usuario_id}'


def notificacao_para_json(notificacao: Notificacao) -> dict:
    """Dict apenas com tipos JSON (o channel layer Redis usa msgpack)"""
    return json.loads(json.dumps(serializar(notificacao), cls=DjangoJSONEncoder))


def enviar_tempo_real(notificacao: Notificacao) -> bool:
    """
    Envia a notificação ao grupo do usuário

    Returns:
        True se o channel layer aceitou a mensagem
    """
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return False

    try:
        async_to_sync(channel_layer.group_send)(
            grupo_usuario(notificacao.usuario_id),
            {
                'type': 'notification_message',
                'message': notificacao_para_json(notificacao),
            }
        )
        return True
    except Exception as e:
        # Redis fora do ar ou canal cheio não podem derrubar a requisição
        logger.error(f"❌ Falha ao enviar notificação {notificacao.pk} via WebSocket: {e}")
        return False


def notificar_usuario(usuario, tipo: str, titulo: str, mensagem: str,
                      condominio=None, relacionado_id='') -> Notificacao:
    """Cria a notificação de um usuário e tenta entregá-la em tempo real"""
    notificacao = Notificacao.objects.create(
        usuario=usuario,
        condominio=condominio,
        tipo=tipo,
        titulo=titulo,
        mensagem=mensagem,
        relacionado_id=str(relacionado_id or ''),
    )
    # Só empurra pelo socket depois que a linha estiver gravada
    transaction.on_commit(lambda: enviar_tempo_real(notificacao))
    return notificacao


def notificar_usuarios(usuarios: Iterable, tipo: str, titulo: str, mensagem: str,
                       condominio=None, relacionado_id='', excluir: Optional[object] = None) -> List[Notificacao]:
    """
    Broadcast para vários usuários

    Args:
        excluir: usuário que não deve ser notificado (normalmente o autor)
    """
    excluir_id = getattr(excluir, 'pk', None)
    notificacoes = [
        notificar_usuario(usuario, tipo, titulo, mensagem, condominio, relacionado_id)
        for usuario in usuarios
        if usuario.pk != excluir_id
    ]

    logger.info(f"🔔 {len(notificacoes)} notificações '{tipo}' enviadas: {titulo}")
    return notificacoes
