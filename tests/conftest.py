# tests/conftest.py

import json

import pytest
from django.core.cache import cache
from django.test import Client

from apps.core.auth_service import auth_service
from apps.core.models import Condominio, Usuario, VinculoCondominio

SENHA = 'senha-forte-123'


@pytest.fixture(autouse=True)
def limpar_cache():
    """Tentativas de login ficam no cache; cada teste começa do zero"""
    cache.clear()
    yield
    cache.clear()


def criar_usuario(username, papel='condomino', **extra):
    return Usuario.objects.create_user(
        username=username,
        email=f'{username}@teste.com',
        password=SENHA,
        nome=username.title(),
        papel=papel,
        **extra
    )


def vincular(usuario, condominio, papel='condomino', unidade=''):
    return VinculoCondominio.objects.create(
        usuario=usuario, condominio=condominio, papel=papel, unidade=unidade
    )


# === CONDOMÍNIOS ===

@pytest.fixture
def condominio(db):
    return Condominio.objects.create(nome='Residencial Aurora', total_unidades=40)


@pytest.fixture
def outro_condominio(db):
    return Condominio.objects.create(nome='Edifício Horizonte', total_unidades=12)


# === USUÁRIOS ===

@pytest.fixture
def administrador(db):
    return criar_usuario('administrador', papel='admin')


@pytest.fixture
def sindico(condominio):
    usuario = criar_usuario('sindico', papel='sindico')
    vincular(usuario, condominio, papel='sindico', unidade='101')
    return usuario


@pytest.fixture
def conselheiro(condominio):
    usuario = criar_usuario('conselheiro')
    vincular(usuario, condominio, papel='conselheiro', unidade='201')
    return usuario


@pytest.fixture
def morador(condominio):
    usuario = criar_usuario('morador')
    vincular(usuario, condominio, papel='condomino', unidade='302')
    return usuario


# === CLIENTES DA API ===

class ApiClient(Client):
    """Client com JWT e condomínio ativo nos headers; corpo sempre JSON"""

    def _json(self, metodo, path, dados=None, **kwargs):
        corpo = json.dumps(dados) if dados is not None else ''
        return metodo(path, data=corpo, content_type='application/json', **kwargs)

    def post_json(self, path, dados=None, **kwargs):
        return self._json(self.post, path, dados, **kwargs)

    def patch_json(self, path, dados=None, **kwargs):
        return self._json(self.patch, path, dados, **kwargs)

    def put_json(self, path, dados=None, **kwargs):
        return self._json(self.put, path, dados, **kwargs)


@pytest.fixture
def api_client_para(condominio):
    def fabrica(usuario, condominio_id=None):
        defaults = {'HTTP_AUTHORIZATION': f'Bearer {auth_service.gerar_token(usuario)}'}
        condominio_id = condominio.pk if condominio_id is None else condominio_id
        if condominio_id:
            defaults['HTTP_X_CONDOMINIUM_ID'] = str(condominio_id)
        return ApiClient(**defaults)

    return fabrica


@pytest.fixture
def cliente_sindico(api_client_para, sindico):
    return api_client_para(sindico)


@pytest.fixture
def cliente_morador(api_client_para, morador):
    return api_client_para(morador)


@pytest.fixture
def cliente_admin(api_client_para, administrador):
    return api_client_para(administrador)
