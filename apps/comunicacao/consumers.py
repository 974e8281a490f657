# apps/comunicacao/consumers.py

import asyncio
import json
import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncWebsocketConsumer
from django.conf import settings
from django.utils import timezone

from apps.core.auth_service import auth_service
from .models import Notificacao
from .services import grupo_usuario

logger = logging.getLogger(__name__)

# Código de fechamento para violação de política (RFC 6455)
CLOSE_POLICY_VIOLATION = 1008


class NotificacaoConsumer(AsyncWebsocketConsumer):
    """
    Consumer de notificações em tempo real

    A conexão é aceita e o cliente tem CONDO_WS_AUTH_TIMEOUT segundos para
    mandar {"type": "auth", "token": "<jwt>"}. Sessões já autenticadas
    (AuthMiddlewareStack) entram direto no grupo do usuário.
    """

    async def connect(self):
        self.user = None
        self.user_group_name = None
        self._timeout_task = None

        await self.accept()

        usuario_sessao = self.scope.get('user')
        if usuario_sessao is not None and usuario_sessao.is_authenticated:
            await self.autenticar(usuario_sessao)
            return

        self._timeout_task = asyncio.ensure_future(self.aguardar_autenticacao())

    async def disconnect(self, close_code):
        """
        Sai do grupo pessoal e cancela o prazo de autenticação pendente
        """
        if self._timeout_task is not None and not self._timeout_task.done():
            self._timeout_task.cancel()

        if self.user_group_name:
            await self.channel_layer.group_discard(
                self.user_group_name,
                self.channel_name
            )

        if self.user is not None:
            logger.info(f"🔕 Notificações desconectadas para {self.user.email}")

    async def receive(self, text_data=None, bytes_data=None):
        """
        Processa comandos do cliente

        Antes da autenticação só é aceita a mensagem `auth`.
        """
        try:
            data = json.loads(text_data or '')
        except json.JSONDecodeError:
            logger.warning("❌ JSON inválido recebido via WebSocket")
            if self.user is None:
                await self.close(code=CLOSE_POLICY_VIOLATION)
            return

        message_type = data.get('type') if isinstance(data, dict) else None

        if self.user is None:
            if message_type != 'auth':
                await self.close(code=CLOSE_POLICY_VIOLATION)
                return
            await self.processar_auth(data)
            return

        if message_type == 'ping':
            await self.send(text_data=json.dumps({
                'type': 'pong',
                'timestamp': timezone.now().isoformat()
            }))

        elif message_type == 'mark_read':
            marcada = await self.mark_notification_read(data.get('notification_id'))
            await self.send(text_data=json.dumps({
                'type': 'marked_read',
                'notification_id': data.get('notification_id'),
                'success': marcada,
            }))

    # === Autenticação ===

    async def processar_auth(self, data):
        token = data.get('token')
        usuario = await self.usuario_do_token(token) if token else None

        # userId informado pelo cliente deve bater com o token
        user_id_cliente = data.get('userId')
        if usuario is not None and user_id_cliente is not None and str(user_id_cliente) != str(usuario.pk):
            usuario = None

        if usuario is None:
            logger.warning("❌ Autenticação WebSocket rejeitada")
            await self.close(code=CLOSE_POLICY_VIOLATION)
            return

        await self.autenticar(usuario)

    async def autenticar(self, usuario):
        if self._timeout_task is not None:
            self._timeout_task.cancel()
            self._timeout_task = None

        self.user = usuario
        self.user_group_name = grupo_usuario(usuario.pk)

        await self.channel_layer.group_add(
            self.user_group_name,
            self.channel_name
        )

        await self.send(text_data=json.dumps({
            'type': 'authenticated',
            'userId': usuario.pk,
        }))
        logger.info(f"🔔 Notificações conectadas para {usuario.email}")

    async def aguardar_autenticacao(self):
        await asyncio.sleep(settings.CONDO_WS_AUTH_TIMEOUT)
        if self.user is None:
            logger.warning("⏱️ WebSocket fechado: autenticação não recebida no prazo")
            await self.close(code=CLOSE_POLICY_VIOLATION)

    # === Handlers de eventos do channel layer ===

    async def notification_message(self, event):
        """
        Envia notificação para o usuário
        """
        await self.send(text_data=json.dumps({
            'type': 'notification',
            'data': event['message']
        }))

    # === Métodos auxiliares ===

    @database_sync_to_async
    def usuario_do_token(self, token):
        return auth_service.obter_usuario_do_token(token)

    @database_sync_to_async
    def mark_notification_read(self, notification_id):
        """
        Marca notificação como lida (apenas do próprio usuário)
        """
        if notification_id is None or not str(notification_id).isdigit():
            return False
        return Notificacao.objects.filter(
            pk=notification_id,
            usuario=self.user
        ).update(lida=True) > 0
