# tests/test_permissoes.py

import pytest
from django.test import RequestFactory

from apps.core.models import PermissaoModulo
from apps.core.permissions import CondoPermissions
from apps.manutencao.models import Equipamento
from .conftest import criar_usuario


@pytest.fixture
def equipamento(condominio):
    return Equipamento.objects.create(
        condominio=condominio, nome='Bomba 1', categoria='bombas', localizacao='Subsolo'
    )


@pytest.mark.django_db
class TestContextoCondominio:

    def test_sem_header_de_condominio(self, api_client_para, morador):
        client = api_client_para(morador, condominio_id=0)

        response = client.get('/api/equipamentos/')

        assert response.status_code == 400
        assert response.json()['error'] == 'Condomínio não selecionado'

    def test_usuario_sem_vinculo_nao_acessa(self, api_client_para, condominio):
        estranho = criar_usuario('estranho')
        client = api_client_para(estranho)

        assert client.get('/api/equipamentos/').status_code == 400

    def test_admin_acessa_qualquer_condominio(self, cliente_admin, equipamento):
        response = cliente_admin.get('/api/equipamentos/')

        assert response.status_code == 200
        assert response.json()['count'] == 1
        assert response['X-Condominio'] == str(equipamento.condominio_id)

    def test_dados_de_outro_condominio_sao_invisiveis(self, api_client_para, sindico, outro_condominio):
        alheio = Equipamento.objects.create(
            condominio=outro_condominio, nome='Elevador', categoria='elevadores', localizacao='Torre B'
        )

        response = api_client_para(sindico).get(f'/api/equipamentos/{alheio.pk}/')

        assert response.status_code == 404
        assert response.json()['error'] == 'Equipamento não encontrado'

    def test_chave_estrangeira_de_outro_condominio_e_rejeitada(self, cliente_morador, outro_condominio):
        alheio = Equipamento.objects.create(
            condominio=outro_condominio, nome='Elevador', categoria='elevadores', localizacao='Torre B'
        )

        response = cliente_morador.post_json('/api/manutencoes/', {
            'equipamento': alheio.pk,
            'titulo': 'Barulho',
            'descricao': 'Elevador fazendo barulho',
        })

        assert response.status_code == 400
        assert 'equipamento' in response.json()['detalhes']


@pytest.mark.django_db
class TestModulos:

    def test_condominio_novo_tem_todos_os_modulos(self, condominio):
        chaves = set(condominio.permissoes_modulos.values_list('chave', flat=True))

        assert chaves == {chave for chave, _ in PermissaoModulo.MODULOS}

    def test_modulo_desabilitado_bloqueia(self, cliente_morador, condominio):
        condominio.permissoes_modulos.filter(chave='manutencoes').update(habilitado=False)

        response = cliente_morador.get('/api/equipamentos/')

        assert response.status_code == 403
        assert response.json()['error'] == 'Módulo desabilitado para este condomínio'

    def test_modulo_sem_registro_conta_como_habilitado(self, cliente_morador, condominio):
        condominio.permissoes_modulos.filter(chave='manutencoes').delete()

        assert cliente_morador.get('/api/equipamentos/').status_code == 200

    def test_listagem_de_modulos(self, cliente_morador, condominio):
        condominio.permissoes_modulos.filter(chave='gas').update(habilitado=False)

        response = cliente_morador.get('/api/permissoes-modulos/')

        dados = {m['chave']: m['habilitado'] for m in response.json()['data']}
        assert len(dados) == len(PermissaoModulo.MODULOS)
        assert dados['gas'] is False
        assert dados['piscina'] is True

    def test_morador_nao_altera_modulo(self, cliente_morador):
        response = cliente_morador.patch_json('/api/permissoes-modulos/piscina/', {'habilitado': False})

        assert response.status_code == 403

    def test_sindico_altera_modulo(self, cliente_sindico, condominio, sindico):
        response = cliente_sindico.patch_json('/api/permissoes-modulos/piscina/', {'habilitado': False})

        assert response.status_code == 200
        permissao = condominio.permissoes_modulos.get(chave='piscina')
        assert permissao.habilitado is False
        assert permissao.atualizado_por == sindico

    def test_habilitado_precisa_ser_booleano(self, cliente_sindico):
        response = cliente_sindico.patch_json('/api/permissoes-modulos/piscina/', {'habilitado': 'nao'})

        assert response.status_code == 400

    def test_modulo_desconhecido(self, cliente_sindico):
        response = cliente_sindico.patch_json('/api/permissoes-modulos/foguete/', {'habilitado': True})

        assert response.status_code == 404


@pytest.mark.django_db
class TestPapeis:

    def _request(self, usuario, papel_condominio=None):
        request = RequestFactory().get('/')
        request.user = usuario
        request.papel_condominio = papel_condominio
        return request

    def test_conselheiro_e_gestao_mas_nao_sindico(self, conselheiro):
        request = self._request(conselheiro, 'conselheiro')

        assert CondoPermissions.is_gestao(request)
        assert not CondoPermissions.is_sindico_ou_admin(request)

    def test_morador_nao_e_gestao(self, morador):
        assert not CondoPermissions.is_gestao(self._request(morador, 'condomino'))

    def test_admin_e_gestao(self, administrador):
        assert CondoPermissions.is_gestao(self._request(administrador))

    def test_morador_nao_cria_reservatorio(self, cliente_morador):
        response = cliente_morador.post_json('/api/reservatorios/', {
            'nome': 'Caixa inferior', 'capacidade_litros': 10000,
        })

        assert response.status_code == 403
        assert response.json()['error'] == 'Acesso negado: requer perfil de gestão'

    def test_conselheiro_cria_reservatorio(self, api_client_para, conselheiro):
        response = api_client_para(conselheiro).post_json('/api/reservatorios/', {
            'nome': 'Caixa inferior', 'capacidade_litros': 10000,
        })

        assert response.status_code == 201


@pytest.mark.django_db
class TestVinculos:

    def test_sindico_lista_usuarios_do_condominio(self, cliente_sindico, condominio, morador):
        response = cliente_sindico.get(f'/api/condominios/{condominio.pk}/usuarios/')

        assert response.status_code == 200
        emails = {v['usuario_email'] for v in response.json()['data']}
        assert emails == {'sindico@teste.com', 'morador@teste.com'}

    def test_morador_nao_lista_usuarios(self, cliente_morador, condominio):
        response = cliente_morador.get(f'/api/condominios/{condominio.pk}/usuarios/')

        assert response.status_code == 403

    def test_vinculo_duplicado(self, cliente_sindico, condominio, morador):
        response = cliente_sindico.post_json('/api/vinculos/', {
            'usuario': morador.pk, 'condominio': condominio.pk, 'papel': 'condomino',
        })

        assert response.status_code == 400

    def test_apenas_admin_cria_condominio(self, cliente_sindico, cliente_admin):
        dados = {'nome': 'Novo Condomínio', 'estado': 'sc', 'total_unidades': 10}

        assert cliente_sindico.post_json('/api/condominios/', dados).status_code == 403

        response = cliente_admin.post_json('/api/condominios/', dados)
        assert response.status_code == 201
        assert response.json()['data']['estado'] == 'SC'
