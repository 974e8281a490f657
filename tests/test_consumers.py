# tests/test_consumers.py

import pytest
from channels.db import database_sync_to_async
from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator

from apps.comunicacao.consumers import CLOSE_POLICY_VIOLATION, NotificacaoConsumer
from apps.comunicacao.models import Notificacao
from apps.comunicacao.services import grupo_usuario
from apps.core.auth_service import auth_service
from apps.core.models import Usuario

pytestmark = [pytest.mark.asyncio, pytest.mark.django_db(transaction=True)]

WS_PATH = '/ws/notificacoes/'


@pytest.fixture
def usuario_ws(transactional_db):
    return Usuario.objects.create_user(
        username='ws', email='ws@teste.com', password='senha-forte-123', nome='Usuário WS'
    )


@pytest.fixture
def token(usuario_ws):
    return auth_service.gerar_token(usuario_ws)


async def conectar():
    communicator = WebsocketCommunicator(NotificacaoConsumer.as_asgi(), WS_PATH)
    conectado, _ = await communicator.connect()
    assert conectado
    return communicator


async def autenticar(communicator, token, **extra):
    await communicator.send_json_to({'type': 'auth', 'token': token, **extra})
    return await communicator.receive_json_from(timeout=2)


async def assert_fechado_por_politica(communicator):
    saida = await communicator.receive_output(timeout=3)
    assert saida == {'type': 'websocket.close', 'code': CLOSE_POLICY_VIOLATION}


async def test_autenticacao_com_token(usuario_ws, token):
    communicator = await conectar()

    resposta = await autenticar(communicator, token)

    assert resposta == {'type': 'authenticated', 'userId': usuario_ws.pk}
    await communicator.disconnect()


async def test_ping_depois_de_autenticado(token):
    communicator = await conectar()
    await autenticar(communicator, token)

    await communicator.send_json_to({'type': 'ping'})
    resposta = await communicator.receive_json_from(timeout=2)

    assert resposta['type'] == 'pong'
    assert 'timestamp' in resposta
    await communicator.disconnect()


async def test_token_invalido_fecha_conexao(usuario_ws):
    communicator = await conectar()

    await communicator.send_json_to({'type': 'auth', 'token': 'invalido'})

    await assert_fechado_por_politica(communicator)
    await communicator.disconnect()


async def test_user_id_divergente_fecha_conexao(usuario_ws, token):
    communicator = await conectar()

    await communicator.send_json_to({'type': 'auth', 'token': token, 'userId': usuario_ws.pk + 1})

    await assert_fechado_por_politica(communicator)
    await communicator.disconnect()


async def test_mensagem_antes_da_autenticacao_fecha_conexao(usuario_ws):
    communicator = await conectar()

    await communicator.send_json_to({'type': 'ping'})

    await assert_fechado_por_politica(communicator)
    await communicator.disconnect()


async def test_sem_autenticacao_no_prazo(usuario_ws):
    communicator = await conectar()

    await assert_fechado_por_politica(communicator)
    await communicator.disconnect()


async def test_notificacao_chega_ao_grupo_do_usuario(usuario_ws, token):
    communicator = await conectar()
    await autenticar(communicator, token)

    await get_channel_layer().group_send(grupo_usuario(usuario_ws.pk), {
        'type': 'notification_message',
        'message': {'titulo': 'Novo Comunicado', 'mensagem': 'Piscina fechada'},
    })
    resposta = await communicator.receive_json_from(timeout=2)

    assert resposta == {
        'type': 'notification',
        'data': {'titulo': 'Novo Comunicado', 'mensagem': 'Piscina fechada'},
    }
    await communicator.disconnect()


async def test_mark_read_so_afeta_notificacao_propria(usuario_ws, token):
    notificacao = await database_sync_to_async(Notificacao.objects.create)(
        usuario=usuario_ws, tipo='announcement_new', titulo='T', mensagem='M'
    )
    communicator = await conectar()
    await autenticar(communicator, token)

    await communicator.send_json_to({'type': 'mark_read', 'notification_id': notificacao.pk})
    resposta = await communicator.receive_json_from(timeout=2)

    assert resposta == {'type': 'marked_read', 'notification_id': notificacao.pk, 'success': True}
    await communicator.disconnect()

    await database_sync_to_async(notificacao.refresh_from_db)()
    assert notificacao.lida is True
