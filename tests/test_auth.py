# tests/test_auth.py

import json
from datetime import timedelta

import pytest
import redis
from django.conf import settings
from django.test import Client
from django.utils import timezone
from jose import jwt

from apps.core.auth_service import auth_service
from .conftest import SENHA, ApiClient


def login(client, email, password):
    return client.post(
        '/api/login/',
        data=json.dumps({'email': email, 'password': password}),
        content_type='application/json',
    )


@pytest.mark.django_db
class TestLogin:

    def test_login_emite_token(self, morador):
        response = login(Client(), morador.email, SENHA)

        assert response.status_code == 200
        corpo = response.json()
        assert corpo['success'] is True
        assert corpo['user']['email'] == morador.email
        assert corpo['user']['role'] == 'condomino'
        assert auth_service.obter_usuario_do_token(corpo['token']) == morador

    def test_senha_errada(self, morador):
        response = login(Client(), morador.email, 'errada')

        assert response.status_code == 401
        assert response.json()['error'] == 'Credenciais inválidas'

    def test_campos_obrigatorios(self, db):
        response = login(Client(), '', '')

        assert response.status_code == 400
        assert response.json()['error'] == 'Email e senha são obrigatórios'

    def test_bloqueio_apos_tentativas(self, morador):
        client = Client()
        for _ in range(5):
            login(client, morador.email, 'errada')

        # Mesmo a senha correta é recusada enquanto durar o bloqueio
        response = login(client, morador.email, SENHA)

        assert response.status_code == 401
        assert 'bloqueada' in response.json()['error']

    def test_usuario_inativo_nao_loga(self, morador):
        morador.is_active = False
        morador.save()

        assert login(Client(), morador.email, SENHA).status_code == 401


@pytest.mark.django_db
class TestToken:

    def test_me_sem_token(self):
        response = Client().get('/api/auth/me/')

        assert response.status_code == 401
        assert response.json()['error'] == 'Token ausente'

    def test_me_lista_condominios(self, morador, condominio):
        client = ApiClient(HTTP_AUTHORIZATION=f'Bearer {auth_service.gerar_token(morador)}')
        response = client.get('/api/auth/me/')

        assert response.status_code == 200
        dados = response.json()['data']
        assert dados['id'] == morador.pk
        assert dados['condominios'] == [{
            'id': condominio.pk,
            'nome': condominio.nome,
            'papel': 'condomino',
            'unidade': '302',
        }]

    def test_token_invalido(self, db):
        client = ApiClient(HTTP_AUTHORIZATION='Bearer nao-e-um-jwt')

        response = client.get('/api/auth/me/')

        assert response.status_code == 401
        assert response.json()['error'] == 'Token inválido'

    def test_token_expirado(self, morador):
        payload = {
            'sub': str(morador.pk),
            'email': morador.email,
            'role': morador.papel,
            'exp': int((timezone.now() - timedelta(minutes=1)).timestamp()),
        }
        token = jwt.encode(payload, settings.CONDO_JWT_SECRET, algorithm=settings.CONDO_JWT_ALGORITHM)

        response = ApiClient(HTTP_AUTHORIZATION=f'Bearer {token}').get('/api/auth/me/')

        assert response.status_code == 401

    def test_token_de_usuario_desativado(self, morador):
        token = auth_service.gerar_token(morador)
        morador.is_active = False
        morador.save()

        assert auth_service.obter_usuario_do_token(token) is None

    def test_token_resolve_pelo_email_quando_sub_nao_existe(self, morador):
        token = jwt.encode(
            {'sub': '999999', 'email': morador.email},
            settings.CONDO_JWT_SECRET,
            algorithm=settings.CONDO_JWT_ALGORITHM,
        )

        assert auth_service.obter_usuario_do_token(token) == morador


@pytest.mark.django_db
def test_health_check():
    response = Client().get('/health/')

    assert response.status_code == 200
    assert response.json()['status'] == 'healthy'


@pytest.mark.django_db
def test_health_check_com_redis_fora_do_ar(monkeypatch):
    def cache_indisponivel(*args, **kwargs):
        raise redis.exceptions.ConnectionError('Connection refused')

    monkeypatch.setattr('apps.core.views.cache.set', cache_indisponivel)

    response = Client().get('/health/')

    assert response.status_code == 500
    assert response.json()['status'] == 'unhealthy'
    assert 'Connection refused' in response.json()['error']
